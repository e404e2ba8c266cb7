"""Stable identifiers for sampler configurations.

A hash is the first 16 hex digits of SHA-256 over compact, key-sorted JSON
of the dataclass, so it is independent of field order and Python version.
"""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from ergm.config.experiment import SamplerConfig


def _digest(payload: Any) -> str:
    text = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(text.encode("ascii")).hexdigest()[:16]


def config_hash(config: Any) -> str:
    """Hash of any config dataclass (or sub-config) as a 16-char hex string."""
    return _digest(asdict(config))


def model_config_hash(config: SamplerConfig) -> str:
    """Identity of the target ERGM: terms and coefficients only."""
    return config_hash(config.model)


def target_config_hash(config: SamplerConfig) -> str:
    """Identity of what a chain explores, ignoring how long it runs.

    Covers the starting graph, the model and the seed. Configs that differ
    only in ``chain`` settings (sample count, burn-in, thinning, snapshots)
    or in description/tags share this hash, so a longer rerun of the same
    chain can be matched to the shorter one.
    """
    return _digest(
        {
            "graph": asdict(config.graph),
            "model": asdict(config.model),
            "seed": config.seed,
        }
    )


def full_config_hash(config: SamplerConfig) -> str:
    """Hash of the whole run configuration, seed and chain settings included."""
    return config_hash(config)

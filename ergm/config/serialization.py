"""SamplerConfig <-> JSON and plain-dict conversion."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from ergm.config.experiment import SamplerConfig

# strict: unknown keys are an error; cast: JSON lists become the tuple
# fields (model.terms, model.params, tags).
_DACITE_CONFIG = DaciteConfig(cast=[tuple], check_types=True, strict=True)


def config_to_dict(config: SamplerConfig) -> dict[str, Any]:
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> SamplerConfig:
    """Build a SamplerConfig, running its cross-field validation.

    Raises:
        dacite.DaciteError: On unknown keys or mistyped values.
        ValueError: If the values are well-typed but inconsistent
            (e.g. more terms than params, thinning < 1).
    """
    return from_dict(data_class=SamplerConfig, data=d, config=_DACITE_CONFIG)


def config_to_json(config: SamplerConfig) -> str:
    """Pretty, key-sorted JSON so saved run configs diff cleanly."""
    return json.dumps(config_to_dict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> SamplerConfig:
    return config_from_dict(json.loads(json_str))

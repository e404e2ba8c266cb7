"""Sampler configuration system with frozen, hashable, serializable dataclasses."""

from ergm.config.experiment import (
    ChainConfig,
    GraphConfig,
    ModelConfig,
    SamplerConfig,
)
from ergm.config.defaults import DEFAULT_CONFIG
from ergm.config.hashing import (
    config_hash,
    full_config_hash,
    model_config_hash,
    target_config_hash,
)
from ergm.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "ChainConfig",
    "GraphConfig",
    "ModelConfig",
    "SamplerConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "model_config_hash",
    "full_config_hash",
    "target_config_hash",
    "config_from_dict",
    "config_from_json",
    "config_to_dict",
    "config_to_json",
]

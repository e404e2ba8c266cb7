"""Default configuration — single source of truth for default sampler parameters."""

from ergm.config.experiment import SamplerConfig

# Instantiated with all-default values: n=10, empty initial graph,
# edges-only model with theta=-2.0, 5000 samples, burn_in=1000, thinning=1,
# seed=42.
DEFAULT_CONFIG = SamplerConfig()

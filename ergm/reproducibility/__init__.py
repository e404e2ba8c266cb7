"""Reproducibility infrastructure: explicit per-chain seed management."""

from ergm.reproducibility.seed import make_rng, spawn_rngs

__all__ = [
    "make_rng",
    "spawn_rngs",
]

"""Explicit, per-chain random generators for reproducible sampling.

No process-wide RNG is ever seeded or consulted: every chain owns a
numpy Generator that is threaded through each Metropolis-Hastings step.
"""

import numpy as np


def make_rng(seed: int | np.random.SeedSequence | None = None) -> np.random.Generator:
    """Create a fresh PCG64 Generator.

    Args:
        seed: Integer seed, SeedSequence, or None for OS entropy.

    Returns:
        A Generator owned exclusively by the caller.
    """
    return np.random.default_rng(seed)


def spawn_rngs(seed: int | None, n: int) -> list[np.random.Generator]:
    """Derive n statistically independent Generators from one master seed.

    Uses SeedSequence.spawn so that chains seeded from the same master seed
    never share a stream, and chain i is reproducible regardless of how
    many chains run alongside it.

    Args:
        seed: Master seed value (e.g., 42), or None for OS entropy.
        n: Number of Generators to derive.

    Returns:
        List of n independent Generators.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    children = np.random.SeedSequence(seed).spawn(n)
    return [np.random.default_rng(child) for child in children]

"""MCMC result container."""

from dataclasses import dataclass

import numpy as np

from ergm.graph.attributes import ErgmGraph


@dataclass(frozen=True)
class MCMCResult:
    """Immutable output of one sampler invocation.

    Uses frozen=True but omits slots=True since numpy arrays don't interact
    well with __slots__. The stats array is marked read-only on construction.
    """

    stats: np.ndarray  # float64 array of shape (n_samples, num_terms)
    samples: tuple[ErgmGraph, ...] = ()  # empty unless requested
    term_names: tuple[str, ...] = ()
    n_proposals: int = 0  # MH steps performed, burn-in included
    n_accepted: int = 0

    def __post_init__(self) -> None:
        self.stats.setflags(write=False)

    @property
    def n_samples(self) -> int:
        return self.stats.shape[0]

    @property
    def acceptance_rate(self) -> float:
        """Fraction of proposals accepted, 0.0 if none were made."""
        if self.n_proposals == 0:
            return 0.0
        return self.n_accepted / self.n_proposals

    def mean_stats(self) -> np.ndarray:
        """Per-term mean over recorded samples."""
        if self.n_samples == 0:
            return np.full(self.stats.shape[1], np.nan)
        return self.stats.mean(axis=0)

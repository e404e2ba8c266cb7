"""Placeholder ``fit`` entry point.

This is NOT a maximum-likelihood estimator. It simulates from the model
with every coefficient fixed at 1.0, starting from the observed graph.
"""

import logging
from collections.abc import Sequence

import numpy as np

from ergm.graph.attributes import ErgmGraph
from ergm.mcmc.sampler import run_sampler
from ergm.mcmc.types import MCMCResult
from ergm.model.types import Model
from ergm.terms.types import Term

log = logging.getLogger(__name__)

PLACEHOLDER_PARAM = 1.0


def fit(
    terms: Sequence[Term],
    observed_graph: ErgmGraph,
    n_steps: int = 1000,
    burn_in: int = 1000,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
) -> MCMCResult:
    """Simulate with dummy parameters; does not estimate anything.

    Every parameter is set to 1.0 and the sampler is run from a copy of
    ``observed_graph`` (the caller's graph is not mutated). The returned
    statistics describe that fixed-parameter simulation, not a fitted model.

    Args:
        terms: Model terms.
        observed_graph: Starting state; copied before sampling.
        n_steps: Number of samples to record (default: 1000).
        burn_in: Discarded steps before recording (default: 1000).
        rng: Chain-owned Generator. Mutually exclusive with ``seed``.
        seed: Seed for a new Generator.

    Returns:
        MCMCResult of shape (n_steps, len(terms)) with no graph snapshots.
    """
    log.warning(
        "fit() is a placeholder: simulating with all %d parameters fixed at "
        "%.1f, no estimation is performed",
        len(terms),
        PLACEHOLDER_PARAM,
    )
    model = Model(terms, np.full(len(terms), PLACEHOLDER_PARAM))
    return run_sampler(
        observed_graph.copy(),
        model,
        n_steps,
        burn_in=burn_in,
        rng=rng,
        seed=seed,
    )

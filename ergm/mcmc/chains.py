"""Independent chains sharing no mutable state.

Each chain owns a copy of the initial graph, its own running statistics
and a Generator spawned from one master SeedSequence. Chains run one
after another; this is not parallel tempering.
"""

import logging

from ergm.graph.attributes import ErgmGraph
from ergm.graph.network import Network
from ergm.mcmc.sampler import run_sampler
from ergm.mcmc.types import MCMCResult
from ergm.model.types import Model
from ergm.reproducibility.seed import spawn_rngs

log = logging.getLogger(__name__)


def run_chains(
    graph: ErgmGraph | Network,
    model: Model,
    n_chains: int,
    n_samples: int,
    burn_in: int = 1000,
    thinning: int = 1,
    keep_graphs: bool = False,
    seed: int | None = None,
) -> list[MCMCResult]:
    """Run ``n_chains`` independent chains from copies of ``graph``.

    ``graph`` itself is never mutated. Chain i is reproducible from
    (seed, i) alone.

    Returns:
        One MCMCResult per chain, in chain order.
    """
    if n_chains < 1:
        raise ValueError(f"n_chains must be >= 1, got {n_chains}")

    results: list[MCMCResult] = []
    for i, rng in enumerate(spawn_rngs(seed, n_chains)):
        log.info("Running chain %d/%d", i + 1, n_chains)
        results.append(
            run_sampler(
                graph.copy(),
                model,
                n_samples,
                burn_in=burn_in,
                thinning=thinning,
                keep_graphs=keep_graphs,
                rng=rng,
            )
        )
    return results

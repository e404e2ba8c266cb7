"""Sampler driver: burn-in, thinning and sample collection.

Statistics are computed from scratch exactly once, when the chain starts.
Every later value is the initial vector plus the sum of accepted deltas,
which keeps per-step cost independent of graph size.
"""

import logging

import numpy as np

from ergm.graph.attributes import ErgmGraph
from ergm.graph.network import Network
from ergm.mcmc.step import (
    SamplerPreconditionError,
    check_sampler_preconditions,
    mcmc_step,
)
from ergm.mcmc.types import MCMCResult
from ergm.model.types import Model
from ergm.reproducibility.seed import make_rng
from ergm.terms.statistics import compute_statistics

log = logging.getLogger(__name__)


class StatisticsDriftError(RuntimeError):
    """Raised when running statistics disagree with a from-scratch recount."""


def verify_running_statistics(
    network: Network, model: Model, stats: np.ndarray
) -> bool:
    """True iff ``stats`` equals the from-scratch statistics of ``network``."""
    return bool(np.array_equal(compute_statistics(network, model.terms), stats))


def run_sampler(
    graph: ErgmGraph | Network,
    model: Model,
    n_samples: int,
    burn_in: int = 1000,
    thinning: int = 1,
    keep_graphs: bool = False,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
    check_every: int = 0,
) -> MCMCResult:
    """Simulate networks from an ERGM with a toggle Metropolis-Hastings chain.

    ``graph`` is mutated in place and is left in the final chain state;
    callers who need the original must copy it first. Burn-in always
    performs raw steps; thinning applies only to the sampling phase.

    Args:
        graph: Initial state, an ErgmGraph or a bare Network (>= 2 vertices).
        model: ERGM terms and parameters.
        n_samples: Number of rows to record.
        burn_in: Steps discarded before recording (default: 1000).
        thinning: Steps performed per recorded row (default: 1).
        keep_graphs: If True, store a deep copy of the graph with every row.
            **Warning**: memory grows with n_samples * graph size.
        rng: Chain-owned Generator. Mutually exclusive with ``seed``.
        seed: Seed for a new Generator. With neither rng nor seed, a fresh
            Generator is seeded from OS entropy.
        check_every: If > 0, recount statistics from scratch every
            ``check_every`` recorded rows and raise StatisticsDriftError on
            mismatch (debugging aid; default 0 disables it).

    Returns:
        MCMCResult with an (n_samples, num_terms) stats matrix and, if
        requested, one ErgmGraph snapshot per row.

    Raises:
        SamplerPreconditionError: On invalid arguments, before any mutation.
    """
    if isinstance(graph, ErgmGraph):
        wrapper, network = graph, graph.network
    else:
        wrapper, network = None, graph

    if n_samples < 0:
        raise SamplerPreconditionError(f"n_samples must be >= 0, got {n_samples}")
    if burn_in < 0:
        raise SamplerPreconditionError(f"burn_in must be >= 0, got {burn_in}")
    if thinning < 1:
        raise SamplerPreconditionError(f"thinning must be >= 1, got {thinning}")
    if check_every < 0:
        raise SamplerPreconditionError(
            f"check_every must be >= 0, got {check_every}"
        )
    if rng is not None and seed is not None:
        raise SamplerPreconditionError("Pass either rng or seed, not both")
    if rng is None:
        rng = make_rng(seed)

    num_terms = model.num_terms
    delta_buffer = np.zeros(num_terms, dtype=np.float64)
    stats = compute_statistics(network, model.terms)
    check_sampler_preconditions(network, model, delta_buffer, stats)

    log.info(
        "Starting MCMC: n=%d, edges=%d, terms=%s, n_samples=%d, "
        "burn_in=%d, thinning=%d",
        network.num_vertices,
        network.num_edges,
        ",".join(model.term_names),
        n_samples,
        burn_in,
        thinning,
    )
    log.debug("Initial statistics: %s", stats.tolist())

    stats_history = np.empty((n_samples, num_terms), dtype=np.float64)
    saved_samples: list[ErgmGraph] = []
    n_accepted = 0

    for _ in range(burn_in):
        n_accepted += mcmc_step(network, model, delta_buffer, stats, rng)
    log.debug(
        "Burn-in complete: %d/%d accepted, stats=%s",
        n_accepted,
        burn_in,
        stats.tolist(),
    )

    for i in range(n_samples):
        for _ in range(thinning):
            n_accepted += mcmc_step(network, model, delta_buffer, stats, rng)

        stats_history[i] = stats

        if keep_graphs:
            if wrapper is not None:
                saved_samples.append(wrapper.copy())
            else:
                saved_samples.append(ErgmGraph(network.copy()))

        if check_every and (i + 1) % check_every == 0:
            if not verify_running_statistics(network, model, stats):
                raise StatisticsDriftError(
                    f"Running statistics {stats.tolist()} diverged from "
                    f"recount {compute_statistics(network, model.terms).tolist()} "
                    f"at sample {i}"
                )

    n_proposals = burn_in + n_samples * thinning
    result = MCMCResult(
        stats=stats_history,
        samples=tuple(saved_samples),
        term_names=model.term_names,
        n_proposals=n_proposals,
        n_accepted=n_accepted,
    )
    log.info(
        "MCMC finished: %d proposals, acceptance rate %.3f, final stats=%s",
        n_proposals,
        result.acceptance_rate,
        stats.tolist(),
    )
    return result


# Name used by earlier releases of the sampler.
mcmc_sampler = run_sampler

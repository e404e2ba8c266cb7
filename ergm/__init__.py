"""ergm: Exponential Random Graph Model simulation by toggle Metropolis-Hastings.

Sufficient statistics are maintained incrementally from exact change
statistics, so each step costs O(num_terms * min degree) regardless of
graph size.
"""

from ergm.graph import Change, ErgmGraph, Network, VertexIndexError
from ergm.mcmc import (
    MCMCResult,
    SamplerPreconditionError,
    StatisticsDriftError,
    fit,
    mcmc_sampler,
    mcmc_step,
    run_chains,
    run_sampler,
    simulate_from_config,
)
from ergm.model import Model
from ergm.terms import (
    DegreeTerm,
    EdgeTerm,
    Term,
    TermKind,
    TriangleTerm,
    compute_statistics,
    count_degree,
    count_edges,
    count_triangles,
    delta_degree,
    delta_edges,
    delta_triangles,
)

__all__ = [
    # Graph
    "Change",
    "ErgmGraph",
    "Network",
    "VertexIndexError",
    # Terms
    "DegreeTerm",
    "EdgeTerm",
    "Term",
    "TermKind",
    "TriangleTerm",
    "compute_statistics",
    "count_degree",
    "count_edges",
    "count_triangles",
    "delta_degree",
    "delta_edges",
    "delta_triangles",
    # Model
    "Model",
    # MCMC
    "MCMCResult",
    "SamplerPreconditionError",
    "StatisticsDriftError",
    "fit",
    "mcmc_sampler",
    "mcmc_step",
    "run_chains",
    "run_sampler",
    "simulate_from_config",
]

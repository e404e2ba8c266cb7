"""From-scratch sufficient statistics.

These are only evaluated at chain initialization and for verification; the
sampler itself advances statistics incrementally via change statistics.
"""

from collections.abc import Sequence

import numpy as np

from ergm.graph.network import Network
from ergm.terms.types import Term, TermKind


def count_edges(network: Network) -> int:
    return network.num_edges


def count_degree(network: Network, k: int) -> int:
    """Number of vertices whose degree is exactly k."""
    return int(np.count_nonzero(network.degrees() == k))


def count_triangles(network: Network) -> int:
    """Number of triangles, trace(A^3) / 6, via sparse matrix products."""
    if network.num_edges == 0:
        return 0
    A = network.to_sparse()
    # sum_ij (A^2)_ij * A_ij counts each triangle 6 times
    closed = (A @ A).multiply(A).sum()
    return int(closed) // 6


def compute_statistic(network: Network, term: Term) -> int:
    kind = term.kind
    if kind is TermKind.EDGES:
        return count_edges(network)
    if kind is TermKind.DEGREE:
        return count_degree(network, term.k)
    if kind is TermKind.TRIANGLES:
        return count_triangles(network)
    raise ValueError(f"No statistic for term kind {kind!r}")


def compute_statistics(network: Network, terms: Sequence[Term]) -> np.ndarray:
    """Statistics vector (float64) with one entry per term, in term order."""
    return np.array(
        [compute_statistic(network, term) for term in terms],
        dtype=np.float64,
    )

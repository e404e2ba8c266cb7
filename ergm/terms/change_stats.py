"""Change statistics: exact per-term deltas for a single edge toggle.

Every rule is evaluated against the graph *before* the toggle is applied,
so the same Change can be scored and then committed.
"""

from collections.abc import Sequence

import numpy as np

from ergm.graph.change import Change
from ergm.graph.network import Network
from ergm.terms.types import Term, TermKind


def delta_edges(network: Network, change: Change) -> int:
    """+1 when the toggle adds an edge, -1 when it removes one."""
    return 1 if change.add else -1


def delta_degree(network: Network, k: int, change: Change) -> int:
    """Change in the number of degree-k vertices caused by the toggle.

    Each endpoint is scored independently: it enters the degree-k set if its
    current degree is k-1 (add) or k+1 (remove), and leaves it if its
    current degree is k.
    """
    entering = k - 1 if change.add else k + 1
    delta = 0
    for d in (network.degree(change.u), network.degree(change.v)):
        if d == entering:
            delta += 1
        elif d == k:
            delta -= 1
    return delta


def delta_triangles(network: Network, change: Change) -> int:
    """Signed number of triangles created or destroyed by the toggle.

    Every common neighbour of u and v closes (or opens) exactly one
    triangle through the toggled pair.
    """
    shared = network.num_common_neighbors(change.u, change.v)
    return shared if change.add else -shared


def change_statistic(network: Network, change: Change, term: Term) -> int:
    """Delta of ``term``'s statistic under ``change``."""
    kind = term.kind
    if kind is TermKind.EDGES:
        return delta_edges(network, change)
    if kind is TermKind.DEGREE:
        return delta_degree(network, term.k, change)
    if kind is TermKind.TRIANGLES:
        return delta_triangles(network, change)
    raise ValueError(f"No change statistic for term kind {kind!r}")


def fill_deltas(
    network: Network,
    change: Change,
    terms: Sequence[Term],
    out: np.ndarray,
) -> np.ndarray:
    """Write the delta of every term into ``out`` in place and return it."""
    for i, term in enumerate(terms):
        out[i] = change_statistic(network, change, term)
    return out

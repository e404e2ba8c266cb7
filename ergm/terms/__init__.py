"""ERGM terms: statistic kinds, change statistics and from-scratch counts."""

from ergm.terms.change_stats import (
    change_statistic,
    delta_degree,
    delta_edges,
    delta_triangles,
    fill_deltas,
)
from ergm.terms.statistics import (
    compute_statistic,
    compute_statistics,
    count_degree,
    count_edges,
    count_triangles,
)
from ergm.terms.types import DegreeTerm, EdgeTerm, Term, TermKind, TriangleTerm

__all__ = [
    "DegreeTerm",
    "EdgeTerm",
    "Term",
    "TermKind",
    "TriangleTerm",
    "change_statistic",
    "compute_statistic",
    "compute_statistics",
    "count_degree",
    "count_edges",
    "count_triangles",
    "delta_degree",
    "delta_edges",
    "delta_triangles",
    "fill_deltas",
]

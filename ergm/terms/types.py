"""Model term definitions: a closed set of sufficient-statistic kinds."""

import re
from dataclasses import dataclass
from enum import Enum


class TermKind(Enum):
    """Tag selecting the statistic a Term measures."""

    EDGES = "edges"
    DEGREE = "degree"
    TRIANGLES = "triangles"


_DEGREE_NAME = re.compile(r"^degree(\d+)$")


@dataclass(frozen=True, slots=True)
class Term:
    """A sufficient statistic entering the ERGM log-linear form.

    Dispatch on ``kind`` rather than subclassing keeps the set of terms
    closed; every kind has a change-statistic rule in
    ``ergm.terms.change_stats`` and a from-scratch rule in
    ``ergm.terms.statistics``.
    """

    kind: TermKind
    k: int | None = None  # degree of interest, DEGREE terms only

    def __post_init__(self) -> None:
        if self.kind is TermKind.DEGREE:
            if self.k is None or self.k < 0:
                raise ValueError(
                    f"Degree term requires k >= 0, got k={self.k}"
                )
        elif self.k is not None:
            raise ValueError(
                f"{self.kind.value} term takes no k, got k={self.k}"
            )

    @property
    def name(self) -> str:
        """Readable label: 'edges', 'degree3', 'triangles'."""
        if self.kind is TermKind.DEGREE:
            return f"degree{self.k}"
        return self.kind.value

    @classmethod
    def from_name(cls, name: str) -> "Term":
        """Parse a label produced by ``Term.name``."""
        if name == TermKind.EDGES.value:
            return EdgeTerm()
        if name == TermKind.TRIANGLES.value:
            return TriangleTerm()
        match = _DEGREE_NAME.match(name)
        if match:
            return DegreeTerm(int(match.group(1)))
        raise ValueError(
            f"Unknown term '{name}'; expected 'edges', 'triangles' or "
            f"'degree<k>'"
        )


def EdgeTerm() -> Term:
    """Number of edges (density)."""
    return Term(TermKind.EDGES)


def DegreeTerm(k: int) -> Term:
    """Number of vertices with degree exactly k."""
    return Term(TermKind.DEGREE, k)


def TriangleTerm() -> Term:
    """Number of triangles (transitivity)."""
    return Term(TermKind.TRIANGLES)

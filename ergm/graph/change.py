"""Proposed edge toggles."""

from dataclasses import dataclass

from ergm.graph.network import Network


@dataclass(frozen=True, slots=True)
class Change:
    """A proposed toggle of the pair (u, v).

    ``add`` is never chosen freely: it is True exactly when the edge is
    currently absent, which makes every toggle its own inverse.
    """

    u: int
    v: int
    add: bool

    def __post_init__(self) -> None:
        if self.u == self.v:
            raise ValueError(f"Change endpoints must differ, got u=v={self.u}")

    @classmethod
    def for_pair(cls, network: Network, u: int, v: int) -> "Change":
        """The toggle of (u, v) implied by the current state of ``network``."""
        return cls(u, v, not network.has_edge(u, v))

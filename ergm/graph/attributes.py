"""ERGM network wrapper carrying vertex, edge and graph-level attributes.

Attributes are metadata only. The sampler reads and mutates the wrapped
Network and never consults the attribute tables.
"""

import copy
from typing import Any

import networkx as nx
import numpy as np

from ergm.graph.network import Network


class ErgmGraph:
    """A Network augmented with attribute tables.

    Attributes:
        network: The underlying mutable graph state.
        vertex_attributes: name -> array of length n, row i-1 is vertex i.
            Pre-populated with an ``id`` column holding 1..n.
        edge_attributes: canonical (min, max) pair -> {name: value}.
        graph_attributes: name -> value for global metadata.
    """

    def __init__(self, network: Network | nx.Graph) -> None:
        if isinstance(network, nx.Graph):
            network = Network.from_networkx(network)
        self.network = network
        self.vertex_attributes: dict[str, np.ndarray] = {
            "id": np.arange(1, network.num_vertices + 1, dtype=np.int64)
        }
        self.edge_attributes: dict[tuple[int, int], dict[str, Any]] = {}
        self.graph_attributes: dict[str, Any] = {}

    @property
    def num_vertices(self) -> int:
        return self.network.num_vertices

    @property
    def num_edges(self) -> int:
        return self.network.num_edges

    def set_vertex_attribute(self, name: str, values) -> None:
        """Assign a per-vertex attribute; length must equal the vertex count."""
        values = np.asarray(values)
        if values.shape != (self.network.num_vertices,):
            raise ValueError(
                f"Attribute '{name}' has shape {values.shape}, expected "
                f"{self.network.num_vertices} (one value per vertex)"
            )
        self.vertex_attributes[name] = values

    def get_vertex_attribute(self, name: str) -> np.ndarray:
        return self.vertex_attributes[name]

    def set_edge_attribute(self, u: int, v: int, name: str, value: Any) -> None:
        """Set attribute ``name`` on edge (u, v), merging with existing ones.

        Raises:
            ValueError: If the edge is not present in the network.
        """
        if not self.network.has_edge(u, v):
            raise ValueError(f"Edge ({u}, {v}) does not exist in the graph")
        self.edge_attributes.setdefault(_edge_key(u, v), {})[name] = value

    def get_edge_attribute(self, u: int, v: int, name: str) -> Any:
        """Attribute value for edge (u, v), or None if unset or edge absent.

        Values survive removal of the edge and are visible again once it is
        re-added.
        """
        if not self.network.has_edge(u, v):
            return None
        return self.edge_attributes.get(_edge_key(u, v), {}).get(name)

    def set_graph_attribute(self, name: str, value: Any) -> None:
        self.graph_attributes[name] = value

    def get_graph_attribute(self, name: str) -> Any:
        return self.graph_attributes.get(name)

    def copy(self) -> "ErgmGraph":
        """Deep copy of the network and all attribute tables."""
        clone = ErgmGraph.__new__(ErgmGraph)
        clone.network = self.network.copy()
        clone.vertex_attributes = {
            name: values.copy() for name, values in self.vertex_attributes.items()
        }
        clone.edge_attributes = copy.deepcopy(self.edge_attributes)
        clone.graph_attributes = copy.deepcopy(self.graph_attributes)
        return clone

    def __repr__(self) -> str:
        return (
            f"ErgmGraph(n={self.network.num_vertices}, "
            f"edges={self.network.num_edges}, "
            f"vertex_attributes={sorted(self.vertex_attributes)})"
        )


def _edge_key(u: int, v: int) -> tuple[int, int]:
    return (u, v) if u < v else (v, u)

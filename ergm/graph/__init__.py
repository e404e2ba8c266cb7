"""Graph state for ERGM sampling: adjacency network and attribute wrapper."""

from ergm.graph.attributes import ErgmGraph
from ergm.graph.change import Change
from ergm.graph.network import Network, VertexIndexError

__all__ = [
    "Change",
    "ErgmGraph",
    "Network",
    "VertexIndexError",
]

"""Mutable undirected simple graph used as the MCMC chain state.

Vertices are integer ids 1..n. Adjacency is held as one Python set per
vertex so that edge tests, toggles, degree lookups and common-neighbour
counts are all O(1) or O(min degree), independent of n.
"""

from collections.abc import Iterable, Iterator

import networkx as nx
import numpy as np
import scipy.sparse


class VertexIndexError(IndexError):
    """Raised when a vertex id falls outside 1..n."""


class Network:
    """Undirected simple graph on vertices 1..n with set-based adjacency.

    Slot 0 of the adjacency list is unused so vertex ids index directly.
    The edge count is maintained as a counter rather than recomputed.
    """

    __slots__ = ("_n", "_adj", "_num_edges")

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Number of vertices must be >= 0, got {n}")
        self._n = n
        self._adj: list[set[int]] = [set() for _ in range(n + 1)]
        self._num_edges = 0

    # ------------------------------------------------------------------
    # Constructors / exporters
    # ------------------------------------------------------------------

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[tuple[int, int]]) -> "Network":
        """Build a network from an edge list. Duplicate edges are ignored."""
        net = cls(n)
        for u, v in edges:
            if not net.has_edge(u, v):
                net.add_edge(u, v)
        return net

    @classmethod
    def from_networkx(cls, graph: nx.Graph) -> "Network":
        """Build a network from a networkx graph.

        Nodes are relabelled to 1..n in sorted order. Self-loops are dropped.
        Directed graphs are rejected since the chain state is undirected.
        """
        if graph.is_directed():
            raise ValueError("Directed graphs are not supported")
        nodes = sorted(graph.nodes())
        index = {node: i + 1 for i, node in enumerate(nodes)}
        return cls.from_edges(
            len(nodes),
            ((index[a], index[b]) for a, b in graph.edges() if a != b),
        )

    @classmethod
    def from_sparse(cls, adjacency: scipy.sparse.spmatrix) -> "Network":
        """Build a network from a symmetric 0-indexed sparse adjacency matrix."""
        n_rows, n_cols = adjacency.shape
        if n_rows != n_cols:
            raise ValueError(
                f"Adjacency must be square, got shape {adjacency.shape}"
            )
        coo = scipy.sparse.triu(adjacency, k=1).tocoo()
        return cls.from_edges(
            n_rows,
            ((int(i) + 1, int(j) + 1) for i, j in zip(coo.row, coo.col)),
        )

    @classmethod
    def erdos_renyi(cls, n: int, m: int, rng: np.random.Generator) -> "Network":
        """Sample a uniform G(n, m) graph with exactly m edges.

        Args:
            n: Number of vertices.
            m: Number of edges, at most n * (n - 1) / 2.
            rng: numpy random Generator for reproducibility.

        Returns:
            A new Network with m distinct edges.
        """
        max_edges = n * (n - 1) // 2
        if not 0 <= m <= max_edges:
            raise ValueError(
                f"m ({m}) must be in [0, {max_edges}] for n={n}"
            )
        # Pair index p in [0, max_edges) maps to the p-th (u, v) with u < v
        chosen = rng.choice(max_edges, size=m, replace=False)
        iu, iv = np.triu_indices(n, k=1)
        return cls.from_edges(
            n, ((int(iu[p]) + 1, int(iv[p]) + 1) for p in chosen)
        )

    def to_sparse(self) -> scipy.sparse.csr_matrix:
        """Symmetric 0-indexed CSR adjacency matrix of dtype int64."""
        rows: list[int] = []
        cols: list[int] = []
        for u, v in self.edges():
            rows.extend((u - 1, v - 1))
            cols.extend((v - 1, u - 1))
        data = np.ones(len(rows), dtype=np.int64)
        return scipy.sparse.csr_matrix(
            (data, (rows, cols)), shape=(self._n, self._n)
        )

    def to_networkx(self) -> nx.Graph:
        """Export as a networkx Graph with nodes 1..n."""
        graph = nx.Graph()
        graph.add_nodes_from(range(1, self._n + 1))
        graph.add_edges_from(self.edges())
        return graph

    def copy(self) -> "Network":
        """Independent deep copy of the adjacency state."""
        clone = Network.__new__(Network)
        clone._n = self._n
        clone._adj = [set(neigh) for neigh in self._adj]
        clone._num_edges = self._num_edges
        return clone

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def num_vertices(self) -> int:
        return self._n

    @property
    def num_edges(self) -> int:
        return self._num_edges

    def check_vertex(self, v: int) -> None:
        """Raise VertexIndexError unless 1 <= v <= n."""
        if not 1 <= v <= self._n:
            raise VertexIndexError(
                f"Vertex {v} out of range for network with {self._n} vertices"
            )

    def has_edge(self, u: int, v: int) -> bool:
        self.check_vertex(u)
        self.check_vertex(v)
        return v in self._adj[u]

    def degree(self, v: int) -> int:
        self.check_vertex(v)
        return len(self._adj[v])

    def degrees(self) -> np.ndarray:
        """Degree vector of length n; entry i-1 is the degree of vertex i."""
        return np.fromiter(
            (len(self._adj[v]) for v in range(1, self._n + 1)),
            dtype=np.int64,
            count=self._n,
        )

    def neighbors(self, v: int) -> frozenset[int]:
        self.check_vertex(v)
        return frozenset(self._adj[v])

    def common_neighbors(self, u: int, v: int) -> list[int]:
        """Sorted common neighbours of u and v in O(min(deg u, deg v))."""
        self.check_vertex(u)
        self.check_vertex(v)
        small, large = self._adj[u], self._adj[v]
        if len(small) > len(large):
            small, large = large, small
        return sorted(w for w in small if w in large)

    def num_common_neighbors(self, u: int, v: int) -> int:
        """Number of common neighbours of u and v in O(min(deg u, deg v))."""
        self.check_vertex(u)
        self.check_vertex(v)
        small, large = self._adj[u], self._adj[v]
        if len(small) > len(large):
            small, large = large, small
        return sum(1 for w in small if w in large)

    def edges(self) -> Iterator[tuple[int, int]]:
        """Iterate edges as (u, v) with u < v, in increasing order of u."""
        for u in range(1, self._n + 1):
            for v in sorted(self._adj[u]):
                if v > u:
                    yield (u, v)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_edge(self, u: int, v: int) -> None:
        self._check_pair(u, v)
        if v in self._adj[u]:
            raise ValueError(f"Edge ({u}, {v}) already present")
        self._adj[u].add(v)
        self._adj[v].add(u)
        self._num_edges += 1

    def remove_edge(self, u: int, v: int) -> None:
        self._check_pair(u, v)
        if v not in self._adj[u]:
            raise ValueError(f"Edge ({u}, {v}) not present")
        self._adj[u].discard(v)
        self._adj[v].discard(u)
        self._num_edges -= 1

    def toggle(self, u: int, v: int) -> bool:
        """Add (u, v) if absent, remove it if present.

        Returns:
            True if the edge was added, False if it was removed.
        """
        self._check_pair(u, v)
        if v in self._adj[u]:
            self._adj[u].discard(v)
            self._adj[v].discard(u)
            self._num_edges -= 1
            return False
        self._adj[u].add(v)
        self._adj[v].add(u)
        self._num_edges += 1
        return True

    def _check_pair(self, u: int, v: int) -> None:
        self.check_vertex(u)
        self.check_vertex(v)
        if u == v:
            raise ValueError(f"Self-loop ({u}, {v}) not allowed")

    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Network):
            return NotImplemented
        return self._n == other._n and self._adj == other._adj

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Network(n={self._n}, edges={self._num_edges})"

"""Sampler configuration dataclasses — all frozen and slotted for immutability."""

from dataclasses import dataclass, field

from ergm.terms.types import Term


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """Initial network parameters."""

    n: int = 10  # number of vertices
    initial_edges: int = 0  # edges of the uniform G(n, m) starting graph


@dataclass(frozen=True, slots=True)
class ModelConfig:
    """ERGM terms by name ('edges', 'degree<k>', 'triangles') and coefficients."""

    terms: tuple[str, ...] = ("edges",)
    params: tuple[float, ...] = (-2.0,)


@dataclass(frozen=True, slots=True)
class ChainConfig:
    """Sampler driver parameters."""

    n_samples: int = 5000
    burn_in: int = 1000
    thinning: int = 1  # steps per recorded sample; burn-in is never thinned
    keep_graphs: bool = False


@dataclass(frozen=True, slots=True)
class SamplerConfig:
    """Top-level configuration composing all sub-configs.

    All fields are frozen and typed. Cross-parameter validation runs
    in __post_init__ to reject invalid configurations early.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    model: ModelConfig = field(default_factory=ModelConfig)
    chain: ChainConfig = field(default_factory=ChainConfig)
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Cross-parameter validation."""
        if self.graph.n < 2:
            raise ValueError(f"n must be >= 2, got {self.graph.n}")
        max_edges = self.graph.n * (self.graph.n - 1) // 2
        if not 0 <= self.graph.initial_edges <= max_edges:
            raise ValueError(
                f"initial_edges ({self.graph.initial_edges}) must be in "
                f"[0, {max_edges}] for n={self.graph.n}"
            )
        if len(self.model.terms) != len(self.model.params):
            raise ValueError(
                f"model has {len(self.model.terms)} terms but "
                f"{len(self.model.params)} params"
            )
        for name in self.model.terms:
            Term.from_name(name)
        if self.chain.n_samples < 0:
            raise ValueError(
                f"n_samples must be >= 0, got {self.chain.n_samples}"
            )
        if self.chain.burn_in < 0:
            raise ValueError(f"burn_in must be >= 0, got {self.chain.burn_in}")
        if self.chain.thinning < 1:
            raise ValueError(
                f"thinning must be >= 1, got {self.chain.thinning}"
            )

"""ERGM model definition: terms and their coefficients."""

from dataclasses import dataclass

import numpy as np

from ergm.terms.types import Term


@dataclass(frozen=True, eq=False)
class Model:
    """Parallel (terms, params) pair defining an ERGM.

    The probability of a graph is proportional to exp(params . stats(graph)).
    Repeated terms are kept as given; nothing is deduplicated. Validation
    runs once here so the sampling loop never re-checks it.

    Attributes:
        terms: Statistics included in the model, in column order.
        params: Read-only float64 coefficient vector, one per term.
    """

    terms: tuple[Term, ...]
    params: np.ndarray

    def __post_init__(self) -> None:
        """Normalize and validate (uses object.__setattr__ since frozen)."""
        terms = tuple(self.terms)
        params = np.array(self.params, dtype=np.float64).reshape(-1)
        if len(terms) != len(params):
            raise ValueError(
                f"Model has {len(terms)} terms but {len(params)} params"
            )
        for term in terms:
            if not isinstance(term, Term):
                raise TypeError(f"Expected Term, got {type(term).__name__}")
        params.setflags(write=False)
        object.__setattr__(self, "terms", terms)
        object.__setattr__(self, "params", params)

    @property
    def num_terms(self) -> int:
        return len(self.terms)

    @property
    def term_names(self) -> tuple[str, ...]:
        return tuple(term.name for term in self.terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return self.terms == other.terms and np.array_equal(
            self.params, other.params
        )

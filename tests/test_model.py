"""Tests for the Model (terms, params) pair."""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from ergm.model import Model
from ergm.terms import DegreeTerm, EdgeTerm, TriangleTerm


class TestModelConstruction:
    """Validation happens once, at construction."""

    def test_valid_model(self) -> None:
        model = Model([EdgeTerm(), DegreeTerm(2), TriangleTerm()], [-1.0, 0.5, 0.1])
        assert model.num_terms == 3
        assert model.term_names == ("edges", "degree2", "triangles")
        assert model.params.dtype == np.float64
        assert isinstance(model.terms, tuple)

    def test_length_mismatch_rejected(self) -> None:
        with pytest.raises(ValueError, match="2 terms but 1 params"):
            Model([EdgeTerm(), TriangleTerm()], [1.0])

    def test_non_term_rejected(self) -> None:
        with pytest.raises(TypeError, match="Expected Term"):
            Model(["edges"], [1.0])  # type: ignore[list-item]

    def test_repeated_terms_kept(self) -> None:
        model = Model([EdgeTerm(), EdgeTerm()], [0.5, 0.5])
        assert model.num_terms == 2

    def test_integer_params_coerced(self) -> None:
        model = Model([EdgeTerm()], [2])
        assert model.params.dtype == np.float64
        assert model.params[0] == 2.0

    def test_empty_model(self) -> None:
        model = Model([], [])
        assert model.num_terms == 0
        assert model.params.shape == (0,)


class TestModelImmutability:
    """Frozen dataclass with a read-only params array."""

    def test_fields_frozen(self) -> None:
        model = Model([EdgeTerm()], [1.0])
        with pytest.raises(FrozenInstanceError):
            model.params = np.array([2.0])  # type: ignore[misc]

    def test_params_read_only(self) -> None:
        model = Model([EdgeTerm()], [1.0])
        with pytest.raises(ValueError):
            model.params[0] = 2.0

    def test_params_copied_from_input(self) -> None:
        source = np.array([1.0, 2.0])
        model = Model([EdgeTerm(), TriangleTerm()], source)
        source[0] = 99.0
        assert model.params[0] == 1.0

    def test_equality(self) -> None:
        a = Model([EdgeTerm()], [1.0])
        b = Model([EdgeTerm()], [1.0])
        c = Model([EdgeTerm()], [2.0])
        assert a == b
        assert a != c

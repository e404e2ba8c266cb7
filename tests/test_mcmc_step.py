"""Tests for the single Metropolis-Hastings toggle step."""

import math

import numpy as np
import pytest

from ergm.graph import Change, Network
from ergm.mcmc.step import (
    SamplerPreconditionError,
    acceptance_probability,
    check_sampler_preconditions,
    log_acceptance_ratio,
    mcmc_step,
    propose_change,
)
from ergm.model import Model
from ergm.terms import (
    DegreeTerm,
    EdgeTerm,
    TriangleTerm,
    compute_statistics,
    fill_deltas,
)

MIXED_MODEL = Model([EdgeTerm(), DegreeTerm(3), TriangleTerm()], [-0.5, 0.3, 0.2])


def _make_state(net: Network, model: Model) -> tuple[np.ndarray, np.ndarray]:
    """Fresh (delta_buffer, stats) pair for ``net``."""
    return np.zeros(model.num_terms), compute_statistics(net, model.terms)


class TestAcceptanceProbability:
    """min(1, exp(log_ratio)) without overflow."""

    @pytest.mark.parametrize("log_ratio", [0.0, 0.5, 50.0, 1e308, math.inf])
    def test_non_negative_is_one(self, log_ratio: float) -> None:
        assert acceptance_probability(log_ratio) == 1.0

    def test_negative_is_exp(self) -> None:
        assert acceptance_probability(-1.0) == pytest.approx(math.exp(-1.0))

    def test_very_negative_underflows_to_zero(self) -> None:
        assert acceptance_probability(-1e6) == 0.0

    def test_log_ratio_is_dot_product(self) -> None:
        params = np.array([-1.0, 0.5, 2.0])
        deltas = np.array([1.0, -2.0, 3.0])
        assert log_acceptance_ratio(params, deltas) == pytest.approx(4.0)


class TestProposal:
    """Uniform pair proposal with diagonal rejection."""

    def test_two_vertex_graph_is_deterministic(self) -> None:
        net = Network(2)
        rng = np.random.default_rng(0)
        for _ in range(100):
            change = propose_change(net, rng)
            assert {change.u, change.v} == {1, 2}
            assert change.add is True

    def test_direction_follows_presence(self) -> None:
        net = Network.from_edges(2, [(1, 2)])
        change = propose_change(net, np.random.default_rng(0))
        assert change.add is False

    def test_endpoints_in_range_and_distinct(self) -> None:
        net = Network(7)
        rng = np.random.default_rng(1)
        seen = set()
        for _ in range(2000):
            change = propose_change(net, rng)
            assert change.u != change.v
            assert 1 <= change.u <= 7 and 1 <= change.v <= 7
            seen.add(frozenset((change.u, change.v)))
        assert len(seen) == 21

    @pytest.mark.parametrize("n", [0, 1])
    def test_fewer_than_two_vertices_rejected(self, n: int) -> None:
        with pytest.raises(SamplerPreconditionError):
            propose_change(Network(n), np.random.default_rng(0))


class TestMCMCStep:
    """State and running statistics move together."""

    def test_certain_acceptance_adds_edge(self) -> None:
        net = Network(5)
        model = Model([EdgeTerm()], [50.0])
        buffer, stats = _make_state(net, model)
        assert mcmc_step(net, model, buffer, stats, np.random.default_rng(0))
        assert net.num_edges == 1
        assert buffer.tolist() == [1.0]
        assert stats.tolist() == [1.0]

    def test_rejection_leaves_state_untouched(self) -> None:
        net = Network(6)
        model = Model([EdgeTerm()], [-1e6])
        buffer, stats = _make_state(net, model)
        rng = np.random.default_rng(0)
        for _ in range(200):
            assert not mcmc_step(net, model, buffer, stats, rng)
        assert net.num_edges == 0
        assert stats.tolist() == [0.0]

    def test_buffer_and_stats_updated_in_place(self) -> None:
        net = Network(5)
        model = Model([EdgeTerm()], [50.0])
        buffer, stats = _make_state(net, model)
        buffer_id, stats_id = id(buffer), id(stats)
        mcmc_step(net, model, buffer, stats, np.random.default_rng(0))
        assert id(buffer) == buffer_id
        assert id(stats) == stats_id

    def test_running_statistics_match_recount_every_step(self) -> None:
        net = Network.erdos_renyi(15, 30, np.random.default_rng(2))
        buffer, stats = _make_state(net, MIXED_MODEL)
        rng = np.random.default_rng(3)
        accepted = 0
        for _ in range(500):
            accepted += mcmc_step(net, MIXED_MODEL, buffer, stats, rng)
            np.testing.assert_array_equal(
                stats, compute_statistics(net, MIXED_MODEL.terms)
            )
        assert accepted > 0

    def test_toggle_twice_restores_graph_and_stats(self) -> None:
        net = Network.erdos_renyi(12, 25, np.random.default_rng(4))
        buffer, stats = _make_state(net, MIXED_MODEL)
        original_net, original_stats = net.copy(), stats.copy()
        # Zero params accept every proposal, so each step toggles once.
        model = Model(MIXED_MODEL.terms, [0.0, 0.0, 0.0])
        rng = np.random.default_rng(5)
        assert mcmc_step(net, model, buffer, stats, rng)
        u, v = next(
            (u, v)
            for u in range(1, 13)
            for v in range(u + 1, 13)
            if net.has_edge(u, v) != original_net.has_edge(u, v)
        )
        second = fill_deltas(
            net, Change.for_pair(net, u, v), model.terms, np.zeros(3)
        )
        np.testing.assert_array_equal(second, -buffer)
        net.toggle(u, v)
        stats += second
        assert net == original_net
        np.testing.assert_array_equal(stats, original_stats)


class TestPreconditions:
    """Shape and size checks run before any mutation."""

    def test_too_few_vertices(self) -> None:
        net = Network(1)
        buffer, stats = _make_state(net, MIXED_MODEL)
        with pytest.raises(SamplerPreconditionError, match="at least 2"):
            check_sampler_preconditions(net, MIXED_MODEL, buffer, stats)

    def test_buffer_shape_mismatch(self) -> None:
        net = Network(4)
        _, stats = _make_state(net, MIXED_MODEL)
        with pytest.raises(SamplerPreconditionError, match="delta_buffer"):
            check_sampler_preconditions(net, MIXED_MODEL, np.zeros(2), stats)

    def test_stats_shape_mismatch(self) -> None:
        net = Network(4)
        buffer, _ = _make_state(net, MIXED_MODEL)
        with pytest.raises(SamplerPreconditionError, match="stats"):
            check_sampler_preconditions(net, MIXED_MODEL, buffer, np.zeros(1))

    def test_is_value_error(self) -> None:
        assert issubclass(SamplerPreconditionError, ValueError)

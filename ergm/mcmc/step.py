"""Single Metropolis-Hastings toggle step.

The proposal picks an ordered pair (u, v), u != v, uniformly and toggles it.
Toggling is its own inverse and the pair distribution is uniform, so the
proposal is symmetric and the acceptance ratio reduces to
exp(params . delta).
"""

import math

import numpy as np

from ergm.graph.change import Change
from ergm.graph.network import Network
from ergm.model.types import Model
from ergm.terms.change_stats import fill_deltas


class SamplerPreconditionError(ValueError):
    """Raised when a sampler input violates a precondition (e.g. n < 2)."""


def check_sampler_preconditions(
    network: Network, model: Model, delta_buffer: np.ndarray, stats: np.ndarray
) -> None:
    """Validate step inputs once, before any state is mutated."""
    if network.num_vertices < 2:
        raise SamplerPreconditionError(
            f"Sampler requires at least 2 vertices, got {network.num_vertices}"
        )
    if delta_buffer.shape != (model.num_terms,):
        raise SamplerPreconditionError(
            f"delta_buffer shape {delta_buffer.shape} does not match "
            f"{model.num_terms} model terms"
        )
    if stats.shape != (model.num_terms,):
        raise SamplerPreconditionError(
            f"stats shape {stats.shape} does not match "
            f"{model.num_terms} model terms"
        )


def propose_change(network: Network, rng: np.random.Generator) -> Change:
    """Draw a uniform pair u != v and the toggle it implies.

    Redraws while u == v. For n >= 2 this terminates almost surely after
    n / (n - 1) expected draws; n < 2 is rejected instead of looping.
    """
    n = network.num_vertices
    if n < 2:
        raise SamplerPreconditionError(
            f"Cannot propose a toggle on {n} vertices"
        )
    u, v = rng.integers(1, n + 1, size=2)
    while u == v:
        u, v = rng.integers(1, n + 1, size=2)
    return Change.for_pair(network, int(u), int(v))


def log_acceptance_ratio(params: np.ndarray, deltas: np.ndarray) -> float:
    return float(np.dot(params, deltas))


def acceptance_probability(log_ratio: float) -> float:
    """min(1, exp(log_ratio)); exp is only evaluated for negative input."""
    if log_ratio >= 0.0:
        return 1.0
    return math.exp(log_ratio)


def mcmc_step(
    network: Network,
    model: Model,
    delta_buffer: np.ndarray,
    stats: np.ndarray,
    rng: np.random.Generator,
) -> bool:
    """Perform one Metropolis-Hastings step, mutating state in place.

    Fills ``delta_buffer`` with the change statistics of the proposed
    toggle. On acceptance the toggle is applied to ``network`` and the
    buffer is added into ``stats``; on rejection neither is touched, so
    ``stats`` always matches a from-scratch recomputation.

    Args:
        network: Chain state, mutated on acceptance.
        model: Terms and parameters.
        delta_buffer: Reusable float64 buffer of length num_terms.
        stats: Running statistics vector, advanced on acceptance.
        rng: Chain-owned random Generator.

    Returns:
        True if the proposal was accepted.
    """
    change = propose_change(network, rng)
    fill_deltas(network, change, model.terms, delta_buffer)

    alpha = acceptance_probability(log_acceptance_ratio(model.params, delta_buffer))
    if rng.random() < alpha:
        network.toggle(change.u, change.v)
        stats += delta_buffer
        return True
    return False

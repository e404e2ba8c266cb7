"""Metropolis-Hastings sampling of ERGMs via incremental change statistics."""

from ergm.mcmc.chains import run_chains
from ergm.mcmc.fitting import fit
from ergm.mcmc.runner import model_from_config, simulate_from_config
from ergm.mcmc.sampler import (
    StatisticsDriftError,
    mcmc_sampler,
    run_sampler,
    verify_running_statistics,
)
from ergm.mcmc.step import (
    SamplerPreconditionError,
    acceptance_probability,
    check_sampler_preconditions,
    log_acceptance_ratio,
    mcmc_step,
    propose_change,
)
from ergm.mcmc.types import MCMCResult

__all__ = [
    "MCMCResult",
    "SamplerPreconditionError",
    "StatisticsDriftError",
    "acceptance_probability",
    "check_sampler_preconditions",
    "fit",
    "log_acceptance_ratio",
    "mcmc_sampler",
    "mcmc_step",
    "model_from_config",
    "propose_change",
    "run_chains",
    "run_sampler",
    "simulate_from_config",
    "verify_running_statistics",
]

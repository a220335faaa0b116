"""
Monte Carlo Random Number Engine

Pseudo-random generators, low-discrepancy sequences and normal transforms
for quantitative-finance simulation.
"""

from mc_rng._version import __version__

# Core contract and sequence driver
from mc_rng.driver import RandomStream, iterate, take, take_with_state
from mc_rng.errors import (
    DomainGapError,
    ParameterValidationError,
    RetryLimitExceededError,
    RngError,
)
from mc_rng.generators import new_mersenne_state, step
from mc_rng.generators.registry import GENERATORS, create_stream, seed_state

# Quasi-random sequences
from mc_rng.qmc import SobolGenerator, halton_points, latin_hypercube_sample

# Transforms
from mc_rng.distributions import (
    box_muller_transform,
    inverse_normal_cdf,
    marsaglia_polar_transform,
    normal_cdf,
    normal_variates,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "RngError",
    "ParameterValidationError",
    "RetryLimitExceededError",
    "DomainGapError",
    # Driver
    "RandomStream",
    "iterate",
    "take",
    "take_with_state",
    "step",
    # Generators
    "GENERATORS",
    "create_stream",
    "seed_state",
    "new_mersenne_state",
    # QMC
    "SobolGenerator",
    "halton_points",
    "latin_hypercube_sample",
    # Distributions
    "box_muller_transform",
    "marsaglia_polar_transform",
    "normal_cdf",
    "inverse_normal_cdf",
    "normal_variates",
]

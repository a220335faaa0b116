"""
Latin hypercube sampling.

Each dimension of the unit cube is cut into ``n`` equal strata and every
stratum receives exactly one sample. The order in which strata are paired
across dimensions, and the position inside each stratum, come from a
pseudo-random stream.
"""

from typing import Any

import numpy as np

from mc_rng.driver import StepFunction, take_with_state
from mc_rng.errors import ParameterValidationError
from mc_rng.generators.base import step


def latin_permutation(jitter: np.ndarray) -> np.ndarray:
    """
    Turn ``n`` uniform jitters into one stratified column.

    Jitter ``k`` is placed in stratum ``k`` at ``(k + jitter[k]) / n``; the
    column is then ordered by jitter, which shuffles the strata.
    """
    n = jitter.size
    order = np.argsort(jitter, kind="stable")
    return (order + jitter[order]) / n


def latin_hypercube_sample(
    n_samples: int,
    dimension: int,
    state: Any,
    step_fn: StepFunction = step,
) -> tuple[Any, np.ndarray]:
    """
    Draw a Latin hypercube sample.

    Parameters
    ----------
    n_samples : int
        Number of samples, which is also the number of strata per dimension
    dimension : int
        Number of dimensions
    state
        Generator state feeding the jitters; ``n_samples`` variates are
        consumed per dimension
    step_fn : callable, optional
        Step function for ``state``

    Returns
    -------
    tuple
        ``(final_state, samples)`` with samples of shape
        ``(n_samples, dimension)``
    """
    if n_samples < 1:
        raise ParameterValidationError(f"n_samples must be positive, got {n_samples}")
    if dimension < 1:
        raise ParameterValidationError(f"dimension must be positive, got {dimension}")

    samples = np.empty((n_samples, dimension), dtype=np.float64)
    for d in range(dimension):
        state, jitter = take_with_state(state, n_samples, step_fn)
        samples[:, d] = latin_permutation(jitter)
    return state, samples

"""
Sequence driver: turns a step function into lazy or bounded streams.

Every helper threads the state forward one value at a time, so pulling
``n`` variates costs exactly ``n`` state transitions. Restarting a sequence
means starting again from a retained seed state.
"""

from collections.abc import Callable, Iterator
from itertools import islice
from typing import Any

import numpy as np

from mc_rng.errors import ParameterValidationError
from mc_rng.generators.base import step

StepFunction = Callable[[Any], tuple[Any, float]]


def _check_count(count: int) -> None:
    if count < 0:
        raise ParameterValidationError(f"count must be non-negative, got {count}")


def iterate(state: Any, step_fn: StepFunction = step) -> Iterator[float]:
    """
    Yield variates forever, starting from ``state``.

    The caller stops the sequence simply by no longer pulling from it.
    """
    while True:
        state, value = step_fn(state)
        yield value


def take_with_state(
    state: Any, count: int, step_fn: StepFunction = step
) -> tuple[Any, np.ndarray]:
    """
    Draw ``count`` variates and return them together with the final state.

    Parameters
    ----------
    state
        Starting generator state
    count : int
        Number of variates to draw (may be zero)
    step_fn : callable, optional
        Step function; defaults to the generic dispatcher

    Returns
    -------
    tuple
        ``(final_state, values)`` with ``values`` of shape ``(count,)``
    """
    _check_count(count)
    values = np.empty(count, dtype=np.float64)
    for i in range(count):
        state, values[i] = step_fn(state)
    return state, values


def take(state: Any, count: int, step_fn: StepFunction = step) -> np.ndarray:
    """Draw the first ``count`` variates starting from ``state``."""
    return take_with_state(state, count, step_fn)[1]


class RandomStream:
    """
    A seeded stream of uniform variates that owns its current state.

    Calling the stream returns the next variate, which makes it usable as
    the ``source`` argument of the distribution transforms. Iterating over
    it starts a fresh pass from the seed state without disturbing the
    stream's own position.

    Parameters
    ----------
    seed_state
        Initial generator state, retained for restarts
    step_fn : callable, optional
        Step function; defaults to the generic dispatcher
    """

    def __init__(self, seed_state: Any, step_fn: StepFunction = step):
        self.seed_state = seed_state
        self.step_fn = step_fn
        self.state = seed_state
        self.n_drawn = 0

    def __call__(self) -> float:
        self.state, value = self.step_fn(self.state)
        self.n_drawn += 1
        return value

    def __iter__(self) -> Iterator[float]:
        return iterate(self.seed_state, self.step_fn)

    def take(self, count: int) -> np.ndarray:
        """Draw the next ``count`` variates and advance the stream."""
        self.state, values = take_with_state(self.state, count, self.step_fn)
        self.n_drawn += count
        return values

    def peek(self, count: int) -> list[float]:
        """Return the next ``count`` variates without advancing."""
        _check_count(count)
        return list(islice(iterate(self.state, self.step_fn), count))

    def reset(self) -> None:
        """Rewind the stream to its seed state."""
        self.state = self.seed_state
        self.n_drawn = 0

    def __repr__(self) -> str:
        return f"RandomStream({type(self.seed_state).__name__}, drawn={self.n_drawn})"

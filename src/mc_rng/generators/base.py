"""
Shared pieces of the generator contract.

Every pseudo-random generator in this package is a pair of plain functions:
a seeding function that validates its parameters and returns an immutable
state, and a step function ``(state) -> (new_state, variate)``. The generic
:func:`step` dispatches on the state type, so callers that only hold a state
value never need to know which algorithm produced it.
"""

from dataclasses import dataclass
from functools import singledispatch

from mc_rng.errors import ParameterValidationError

UINT32_MASK = 0xFFFFFFFF
UINT32_MAX = 0xFFFFFFFF


def to_uniform(k: int, max_value: int) -> float:
    """
    Map an integer on the closed range [0, max_value] into the open interval (0, 1).

    Uses ``(k + 1) / (max_value + 2)`` so that neither endpoint can be reached,
    even for ``k = 0`` or ``k = max_value``.
    """
    return (k + 1) / (max_value + 2)


def uint32_to_uniform(k: int) -> float:
    """Map a full-range 32-bit unsigned integer into (0, 1)."""
    return to_uniform(k, UINT32_MAX)


@singledispatch
def step(state):
    """
    Advance any generator state by one variate.

    Parameters
    ----------
    state
        A state value created by one of the ``new_*_state`` functions.

    Returns
    -------
    tuple
        ``(new_state, variate)`` where variate lies in (0, 1).
    """
    raise TypeError(f"no step function registered for {type(state).__name__}")


@dataclass(frozen=True)
class PredefinedSequenceState:
    """Cyclic list of values, returned in order."""

    values: tuple[float, ...]


def new_predefined_sequence_state(values) -> PredefinedSequenceState:
    """
    Create a generator that replays a fixed list of values forever.

    The period equals the length of the list. Mostly useful to inject
    deterministic sources into samplers under test.
    """
    values = tuple(float(v) for v in values)
    if not values:
        raise ParameterValidationError("predefined sequence must not be empty")
    return PredefinedSequenceState(values=values)


def next_predefined_sequence_value(
    state: PredefinedSequenceState,
) -> tuple[PredefinedSequenceState, float]:
    head, *tail = state.values
    return PredefinedSequenceState(values=(*tail, head)), head


step.register(PredefinedSequenceState, next_predefined_sequence_value)

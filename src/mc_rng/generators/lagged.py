"""
Lagged Fibonacci generators over 32-bit words.

The history is split into two windows::

    [ ancient            ] [ recent                  ]   next
    [-10, -9, -8, -7     ] [-6, -5, -4, -3, -2, -1   ]   {0}

Each step combines the heads of ``recent`` and ``ancient``, migrates the
head of ``recent`` to the tail of ``ancient`` and appends the new word to
``recent``. The two window lengths, and therefore the lags, never change.
"""

import operator
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from mc_rng.errors import ParameterValidationError
from mc_rng.generators.base import UINT32_MASK, step, uint32_to_uniform
from mc_rng.generators.linear import new_park_miller_state, next_lehmer_value

# Lags of the subtractive generator popularised by Knuth (k = 55, j = 24)
SUBTRACTIVE_LONG_LAG = 55
SUBTRACTIVE_SHORT_LAG = 24


@dataclass(frozen=True)
class LaggedHistory:
    """
    Ordered history windows.

    Attributes
    ----------
    ancient : tuple[int, ...]
        Oldest ``k - j`` words, oldest first
    recent : tuple[int, ...]
        Newest ``j`` words, oldest first
    """

    ancient: tuple[int, ...]
    recent: tuple[int, ...]


@dataclass(frozen=True)
class LaggedFibonacciState:
    """History plus the binary operator used to combine the two lagged words."""

    history: LaggedHistory
    operation: Callable[[int, int], int]


def _as_words(name: str, values: Sequence[int]) -> tuple[int, ...]:
    words = tuple(int(v) for v in values)
    if not words:
        raise ParameterValidationError(f"{name} history window must not be empty")
    if any(not 0 <= w <= UINT32_MASK for w in words):
        raise ParameterValidationError(f"{name} history must hold 32-bit unsigned words")
    return words


def new_lagged_history(ancient: Sequence[int], recent: Sequence[int]) -> LaggedHistory:
    """Validate and freeze an explicit pair of history windows."""
    return LaggedHistory(
        ancient=_as_words("ancient", ancient),
        recent=_as_words("recent", recent),
    )


def next_lagged_fibonacci_history(
    operation: Callable[[int, int], int], history: LaggedHistory
) -> tuple[LaggedHistory, float]:
    """
    Advance a lagged history with an arbitrary combining operator.

    Parameters
    ----------
    operation : callable
        ``operation(recent_head, ancient_head)``; the result is reduced
        modulo 2^32
    history : LaggedHistory
        Current windows

    Returns
    -------
    tuple[LaggedHistory, float]
        Shifted windows and the new word mapped into (0, 1)
    """
    ancient_head, *ancient_tail = history.ancient
    recent_head, *recent_tail = history.recent
    new_word = operation(recent_head, ancient_head) & UINT32_MASK
    shifted = LaggedHistory(
        ancient=(*ancient_tail, recent_head),
        recent=(*recent_tail, new_word),
    )
    return shifted, uint32_to_uniform(new_word)


def new_lagged_fibonacci_state(
    operation: Callable[[int, int], int],
    ancient: Sequence[int],
    recent: Sequence[int],
) -> LaggedFibonacciState:
    """Generalised lagged Fibonacci generator with a caller-chosen operator."""
    return LaggedFibonacciState(
        history=new_lagged_history(ancient, recent), operation=operation
    )


def next_lagged_fibonacci_value(
    state: LaggedFibonacciState,
) -> tuple[LaggedFibonacciState, float]:
    history, value = next_lagged_fibonacci_history(state.operation, state.history)
    return LaggedFibonacciState(history=history, operation=state.operation), value


def new_additive_state(ancient: Sequence[int], recent: Sequence[int]) -> LaggedFibonacciState:
    return new_lagged_fibonacci_state(operator.add, ancient, recent)


def new_gfsr_state(ancient: Sequence[int], recent: Sequence[int]) -> LaggedFibonacciState:
    """Two-tap generalised feedback shift register (XOR combination)."""
    return new_lagged_fibonacci_state(operator.xor, ancient, recent)


def new_subtractive_state(
    seed: int | None = None,
    ancient: Sequence[int] | None = None,
    recent: Sequence[int] | None = None,
) -> LaggedFibonacciState:
    """
    Subtractive lagged Fibonacci generator with lags (55, 24).

    Either pass explicit ``ancient``/``recent`` windows or a ``seed``; with a
    seed the 55 history words are filled from a Park-Miller stream and split
    into an ancient window of 31 words and a recent window of 24.
    """
    if seed is None:
        if ancient is None or recent is None:
            raise ParameterValidationError(
                "subtractive generator needs a seed or both history windows"
            )
        long_window = SUBTRACTIVE_LONG_LAG - SUBTRACTIVE_SHORT_LAG
        if len(ancient) != long_window or len(recent) != SUBTRACTIVE_SHORT_LAG:
            raise ParameterValidationError(
                f"subtractive windows must hold {long_window} ancient and "
                f"{SUBTRACTIVE_SHORT_LAG} recent words, got {len(ancient)} and {len(recent)}"
            )
        return new_lagged_fibonacci_state(operator.sub, ancient, recent)

    if ancient is not None or recent is not None:
        raise ParameterValidationError("pass either a seed or explicit windows, not both")

    filler = new_park_miller_state(seed)
    words = []
    for _ in range(SUBTRACTIVE_LONG_LAG):
        filler, u = next_lehmer_value(filler)
        words.append(int(u * 2**32) & UINT32_MASK)
    split = SUBTRACTIVE_LONG_LAG - SUBTRACTIVE_SHORT_LAG
    return new_lagged_fibonacci_state(operator.sub, words[:split], words[split:])


step.register(LaggedFibonacciState, next_lagged_fibonacci_value)

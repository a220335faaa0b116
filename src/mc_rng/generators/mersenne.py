"""
Mersenne Twister MT19937 (Matsumoto & Nishimura, 1998).

The 624-word table is held in a read-only numpy array owned by the state.
A twist pass builds a fresh table instead of overwriting the old one, so
every :class:`MersenneState` stays valid after it has been stepped and two
streams never alias a writable buffer. Reads between twists are O(1), which
keeps the cost per variate amortised constant.
"""

from dataclasses import dataclass

import numpy as np

from mc_rng.errors import ParameterValidationError
from mc_rng.generators.base import UINT32_MASK, step, uint32_to_uniform

N = 624
M = 397
MATRIX_A = np.uint32(0x9908B0DF)
UPPER_MASK = np.uint32(0x80000000)
LOWER_MASK = np.uint32(0x7FFFFFFF)

# Tempering parameters
TEMPER_U = 11
TEMPER_S = 7
TEMPER_T = 15
TEMPER_L = 18
TEMPER_B = 0x9D2C5680
TEMPER_C = 0xEFC60000

SEED_MULTIPLIER = 69069


@dataclass(frozen=True, eq=False)
class MersenneState:
    """
    Word table plus cursor.

    Attributes
    ----------
    mt : np.ndarray
        624 unsigned 32-bit words, read-only
    mti : int
        Index of the next word to temper; ``mti == 624`` means the table is
        exhausted and must be twisted before the next read
    """

    mt: np.ndarray
    mti: int

    def __post_init__(self):
        if self.mt.shape != (N,) or self.mt.dtype != np.uint32:
            raise ParameterValidationError("Mersenne table must hold 624 uint32 words")
        if not 0 <= self.mti <= N:
            raise ParameterValidationError(f"Mersenne cursor must lie in [0, {N}]")
        if self.mt.flags.writeable:
            # Never freeze an array the caller still holds
            object.__setattr__(self, "mt", self.mt.copy())
            self.mt.flags.writeable = False


def _bump(seed: int) -> int:
    return (SEED_MULTIPLIER * seed + 1) & UINT32_MASK


def new_mersenne_state(seed: int) -> MersenneState:
    """
    Seed the table with the linear recurrence ``seed' = 69069 * seed + 1``.

    Each word takes its upper 16 bits from one iterate and its lower 16 bits
    from the upper half of the next one.

    Parameters
    ----------
    seed : int
        Non-negative 32-bit seed

    Returns
    -------
    MersenneState
        State whose first step performs a twist
    """
    if not 0 <= seed <= UINT32_MASK:
        raise ParameterValidationError(f"Mersenne seed must be a 32-bit value, got {seed}")

    words = np.empty(N, dtype=np.uint32)
    for i in range(N):
        reseed = _bump(seed)
        words[i] = (seed & 0xFFFF0000) | (reseed >> 16)
        seed = _bump(reseed)
    return MersenneState(mt=words, mti=N)


def _mix(upper: np.ndarray, lower: np.ndarray, far: np.ndarray) -> np.ndarray:
    y = (upper & UPPER_MASK) | (lower & LOWER_MASK)
    mag = np.where(y & np.uint32(1), MATRIX_A, np.uint32(0))
    return far ^ (y >> np.uint32(1)) ^ mag


def twist(mt: np.ndarray) -> np.ndarray:
    """
    Return the next generation of the word table.

    Equivalent to the sequential in-place loop of the reference code. Word
    ``i`` depends on words ``i + 1`` and ``i + 397`` (mod 624); once ``i``
    passes 227 the far word has already been regenerated, so the pass is
    split into blocks whose inputs are all available.
    """
    old = np.asarray(mt, dtype=np.uint32)
    new = old.copy()
    gap = N - M

    new[:gap] = _mix(old[:gap], old[1 : gap + 1], old[M:])
    new[gap : 2 * gap] = _mix(old[gap : 2 * gap], old[gap + 1 : 2 * gap + 1], new[:gap])
    new[2 * gap : N - 1] = _mix(old[2 * gap : N - 1], old[2 * gap + 1 : N], new[gap : M - 1])
    new[N - 1] = _mix(old[N - 1 :], new[:1], new[M - 1 : M])[0]
    return new


def temper(y: int) -> int:
    """Apply the MT19937 output tempering to a 32-bit word."""
    y ^= y >> TEMPER_U
    y ^= (y << TEMPER_S) & TEMPER_B
    y ^= (y << TEMPER_T) & TEMPER_C
    y ^= y >> TEMPER_L
    return y & UINT32_MASK


def next_mersenne_integer(state: MersenneState) -> tuple[MersenneState, int]:
    """Advance the state and return the tempered 32-bit output."""
    mt, mti = state.mt, state.mti
    if mti == N:
        mt, mti = twist(mt), 0
    y = temper(int(mt[mti]))
    return MersenneState(mt=mt, mti=mti + 1), y


def next_mersenne_value(state: MersenneState) -> tuple[MersenneState, float]:
    new_state, y = next_mersenne_integer(state)
    return new_state, uint32_to_uniform(y)


step.register(MersenneState, next_mersenne_value)

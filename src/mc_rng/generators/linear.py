"""
Linear congruential family of pseudo-random generators.

All generators here follow the recurrence

    x' = (a * x + b) mod m

or one of its bit-shifting relatives (Marsaglia's multiply-with-carry and
3-shift-register). States are frozen dataclasses; each ``next_*`` function
returns a fresh state together with a uniform variate on (0, 1).
"""

from dataclasses import dataclass, replace

from mc_rng.errors import ParameterValidationError
from mc_rng.generators.base import UINT32_MASK, step, to_uniform, uint32_to_uniform

# Park & Miller (1988) "minimal standard"
PARK_MILLER_A = 16807
PARK_MILLER_M = 2**31 - 1

# IBM System/360 RANDU
RANDU_A = 65539
RANDU_M = 2**31

# Microsoft Visual C++ rand()
VISUALCPP_A = 214013
VISUALCPP_B = 2531011
VISUALCPP_M = 2**32

# java.util.Random
JAVA_A = 25214903917
JAVA_B = 11
JAVA_M = 2**48
JAVA_SCRAMBLE = 0x5DEECE66D

WICHMANN_HILL_MODULI = (30269, 30307, 30323)
WICHMANN_HILL_MULTIPLIERS = (171, 172, 170)


@dataclass(frozen=True)
class LinearCongruentialState:
    """State of a general LCG: multiplier, current value, increment, modulus."""

    a: int
    x: int
    b: int
    m: int


@dataclass(frozen=True)
class LehmerState:
    """State of a multiplicative (Lehmer) generator, i.e. an LCG with b = 0."""

    a: int
    x: int
    m: int


@dataclass(frozen=True)
class WichmannHillState:
    """Three independent LCG lanes combined by Wichmann & Hill (1982)."""

    a: int
    b: int
    c: int


@dataclass(frozen=True)
class MultiplyWithCarryState:
    """Marsaglia multiply-with-carry pair of 32-bit words."""

    z: int
    w: int


@dataclass(frozen=True)
class ShiftRegisterState:
    """Marsaglia xorshift register (single 32-bit word)."""

    s: int


def _check_modulus(a: int, x: int, m: int) -> None:
    if m < 2:
        raise ParameterValidationError(f"modulus must be at least 2, got {m}")
    if not 0 < a < m:
        raise ParameterValidationError(f"multiplier must lie in (0, {m}), got {a}")
    if not 0 <= x < m:
        raise ParameterValidationError(f"seed must lie in [0, {m}), got {x}")


def new_lcg_state(seed: int, a: int, b: int, m: int) -> LinearCongruentialState:
    """
    Create a general linear congruential generator state.

    Parameters
    ----------
    seed : int
        Initial value, 0 <= seed < m
    a : int
        Multiplier, 0 < a < m
    b : int
        Increment, 0 <= b < m
    m : int
        Modulus

    Returns
    -------
    LinearCongruentialState
    """
    _check_modulus(a, seed, m)
    if not 0 <= b < m:
        raise ParameterValidationError(f"increment must lie in [0, {m}), got {b}")
    return LinearCongruentialState(a=a, x=seed, b=b, m=m)


def next_lcg_value(
    state: LinearCongruentialState,
) -> tuple[LinearCongruentialState, float]:
    x1 = (state.a * state.x + state.b) % state.m
    return replace(state, x=x1), to_uniform(x1, state.m)


def new_visualcpp_state(seed: int) -> LinearCongruentialState:
    """LCG with the constants of the Visual C++ runtime ``rand()``."""
    return new_lcg_state(seed & UINT32_MASK, VISUALCPP_A, VISUALCPP_B, VISUALCPP_M)


def new_java_state(seed: int) -> LinearCongruentialState:
    """LCG with the constants of ``java.util.Random``, seed scrambled the same way."""
    return new_lcg_state((seed ^ JAVA_SCRAMBLE) % JAVA_M, JAVA_A, JAVA_B, JAVA_M)


def new_lehmer_state(seed: int, a: int, m: int) -> LehmerState:
    """
    Create a multiplicative congruential generator state.

    A zero seed is a fixed point of ``x' = a * x mod m`` and is rejected.
    """
    _check_modulus(a, seed, m)
    if seed == 0:
        raise ParameterValidationError("Lehmer generator seed must be non-zero")
    return LehmerState(a=a, x=seed, m=m)


def next_lehmer_value(state: LehmerState) -> tuple[LehmerState, float]:
    x1 = (state.a * state.x) % state.m
    return replace(state, x=x1), to_uniform(x1, state.m)


def new_park_miller_state(seed: int) -> LehmerState:
    """Park-Miller minimal standard generator (a = 16807, m = 2^31 - 1)."""
    return new_lehmer_state(seed, PARK_MILLER_A, PARK_MILLER_M)


def new_randu_state(seed: int) -> LehmerState:
    """
    IBM RANDU (a = 65539, m = 2^31).

    Kept for historical comparison; its triples are known to fall on 15
    planes. Even modulus means an odd seed is required for full period.
    """
    if seed % 2 == 0:
        raise ParameterValidationError(f"RANDU seed must be odd, got {seed}")
    return new_lehmer_state(seed, RANDU_A, RANDU_M)


def new_wichmann_hill_state(a: int, b: int, c: int) -> WichmannHillState:
    """Create a Wichmann-Hill state; each lane seed must be in [1, modulus)."""
    for name, seed, modulus in zip("abc", (a, b, c), WICHMANN_HILL_MODULI):
        if not 0 < seed < modulus:
            raise ParameterValidationError(
                f"Wichmann-Hill seed {name} must lie in [1, {modulus}), got {seed}"
            )
    return WichmannHillState(a=a, b=b, c=c)


def next_wichmann_hill_value(
    state: WichmannHillState,
) -> tuple[WichmannHillState, float]:
    ma, mb, mc = WICHMANN_HILL_MODULI
    ka, kb, kc = WICHMANN_HILL_MULTIPLIERS
    a1 = (ka * state.a) % ma
    b1 = (kb * state.b) % mb
    c1 = (kc * state.c) % mc
    x = (a1 / ma + b1 / mb + c1 / mc) % 1.0
    return WichmannHillState(a=a1, b=b1, c=c1), x


def new_multiply_with_carry_state(z: int, w: int) -> MultiplyWithCarryState:
    """Create a Marsaglia MWC state from two non-zero 32-bit seeds."""
    for name, seed in (("z", z), ("w", w)):
        if not 0 < seed <= UINT32_MASK:
            raise ParameterValidationError(
                f"multiply-with-carry seed {name} must be a non-zero 32-bit value"
            )
    return MultiplyWithCarryState(z=z, w=w)


def next_multiply_with_carry_value(
    state: MultiplyWithCarryState,
) -> tuple[MultiplyWithCarryState, float]:
    z1 = (36969 * (state.z & 0xFFFF) + (state.z >> 16)) & UINT32_MASK
    w1 = (18000 * (state.w & 0xFFFF) + (state.w >> 16)) & UINT32_MASK
    k = ((z1 << 16) + (w1 & 0xFFFF)) & UINT32_MASK
    return MultiplyWithCarryState(z=z1, w=w1), uint32_to_uniform(k)


def new_shift_register_state(seed: int) -> ShiftRegisterState:
    """Create a Marsaglia 3-shift-register state; zero is a fixed point."""
    if not 0 < seed <= UINT32_MASK:
        raise ParameterValidationError(
            f"shift register seed must be a non-zero 32-bit value, got {seed}"
        )
    return ShiftRegisterState(s=seed)


def next_shift_register_value(
    state: ShiftRegisterState,
) -> tuple[ShiftRegisterState, float]:
    s = state.s
    s ^= (s << 17) & UINT32_MASK
    s ^= s >> 13
    s ^= (s << 5) & UINT32_MASK
    return ShiftRegisterState(s=s), uint32_to_uniform(s)


step.register(LinearCongruentialState, next_lcg_value)
step.register(LehmerState, next_lehmer_value)
step.register(WichmannHillState, next_wichmann_hill_value)
step.register(MultiplyWithCarryState, next_multiply_with_carry_value)
step.register(ShiftRegisterState, next_shift_register_value)

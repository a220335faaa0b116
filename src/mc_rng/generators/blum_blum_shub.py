"""
Blum-Blum-Shub quadratic residue generator.

Slow, but its output is as hard to predict as factoring ``m = p * q``.
"""

import math
from dataclasses import dataclass

from mc_rng.errors import ParameterValidationError
from mc_rng.generators.base import step, to_uniform


@dataclass(frozen=True)
class BlumBlumShubState:
    """Modulus ``m = p * q`` and the current residue ``x``."""

    m: int
    x: int


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    for d in range(3, math.isqrt(n) + 1, 2):
        if n % d == 0:
            return False
    return True


def new_blum_blum_shub_state(p: int, q: int, seed: int) -> BlumBlumShubState:
    """
    Create a Blum-Blum-Shub state.

    Parameters
    ----------
    p, q : int
        Distinct primes, both congruent to 3 mod 4
    seed : int
        Starting residue; must not be 0 or 1 and must be coprime with p * q

    Raises
    ------
    ParameterValidationError
        If any of the constraints above is violated
    """
    if p == q:
        raise ParameterValidationError("Blum-Blum-Shub primes must be distinct")
    for name, factor in (("p", p), ("q", q)):
        if not _is_prime(factor):
            raise ParameterValidationError(f"{name}={factor} is not prime")
        if factor % 4 != 3:
            raise ParameterValidationError(f"{name}={factor} is not congruent to 3 mod 4")
    m = p * q
    if seed in (0, 1) or not 0 < seed < m:
        raise ParameterValidationError(f"seed must lie in [2, {m}), got {seed}")
    if seed % p == 0 or seed % q == 0:
        raise ParameterValidationError(f"seed {seed} shares a factor with the modulus")
    return BlumBlumShubState(m=m, x=seed)


def next_blum_blum_shub_value(
    state: BlumBlumShubState,
) -> tuple[BlumBlumShubState, float]:
    x1 = (state.x * state.x) % state.m
    return BlumBlumShubState(m=state.m, x=x1), to_uniform(x1, state.m)


step.register(BlumBlumShubState, next_blum_blum_shub_value)

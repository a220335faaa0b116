"""
Name-based lookup of seedable generators.

Each entry maps a single non-negative integer seed onto valid parameters
for its algorithm, so front ends (CLI, experiments) can treat every
generator the same way.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mc_rng.driver import RandomStream
from mc_rng.errors import ParameterValidationError
from mc_rng.generators.blum_blum_shub import new_blum_blum_shub_state
from mc_rng.generators.lagged import new_subtractive_state
from mc_rng.generators.linear import (
    PARK_MILLER_M,
    RANDU_M,
    WICHMANN_HILL_MODULI,
    new_java_state,
    new_multiply_with_carry_state,
    new_park_miller_state,
    new_randu_state,
    new_shift_register_state,
    new_visualcpp_state,
    new_wichmann_hill_state,
    next_lehmer_value,
)
from mc_rng.generators.mersenne import new_mersenne_state

# Default Blum-Blum-Shub primes, both congruent to 3 mod 4
BBS_P = 10007
BBS_Q = 10039


@dataclass(frozen=True)
class GeneratorSpec:
    """Registry entry: name, one-line description and seed-to-state factory."""

    name: str
    description: str
    seed_state: Callable[[int], Any]


def _park_miller_seed(seed: int) -> int:
    return seed % (PARK_MILLER_M - 1) + 1


def _lane_seeds(seed: int, moduli: tuple[int, ...]) -> list[int]:
    filler = new_park_miller_state(_park_miller_seed(seed))
    lanes = []
    for modulus in moduli:
        filler, u = next_lehmer_value(filler)
        lanes.append(int(u * (modulus - 1)) + 1)
    return lanes


def _wichmann_hill(seed: int):
    return new_wichmann_hill_state(*_lane_seeds(seed, WICHMANN_HILL_MODULI))


def _multiply_with_carry(seed: int):
    z, w = _lane_seeds(seed, (2**32, 2**32))
    return new_multiply_with_carry_state(z, w)


def _blum_blum_shub(seed: int):
    m = BBS_P * BBS_Q
    x = seed % (m - 2) + 2
    while math.gcd(x, m) != 1:
        x = 2 if x + 1 >= m else x + 1
    return new_blum_blum_shub_state(BBS_P, BBS_Q, x)


GENERATORS: dict[str, GeneratorSpec] = {
    spec.name: spec
    for spec in (
        GeneratorSpec(
            "mersenne",
            "Mersenne Twister MT19937",
            lambda seed: new_mersenne_state(seed & 0xFFFFFFFF),
        ),
        GeneratorSpec(
            "park_miller",
            "Park-Miller minimal standard Lehmer generator",
            lambda seed: new_park_miller_state(_park_miller_seed(seed)),
        ),
        GeneratorSpec(
            "randu",
            "IBM RANDU (historical, poor quality)",
            lambda seed: new_randu_state((2 * seed + 1) % RANDU_M),
        ),
        GeneratorSpec("visualcpp", "Visual C++ rand() LCG", new_visualcpp_state),
        GeneratorSpec("java", "java.util.Random LCG", new_java_state),
        GeneratorSpec("wichmann_hill", "Wichmann-Hill triple LCG", _wichmann_hill),
        GeneratorSpec("mwc", "Marsaglia multiply-with-carry", _multiply_with_carry),
        GeneratorSpec(
            "shift_register",
            "Marsaglia 3-shift register",
            lambda seed: new_shift_register_state(seed % 0xFFFFFFFF + 1),
        ),
        GeneratorSpec(
            "subtractive",
            "Subtractive lagged Fibonacci (55, 24)",
            lambda seed: new_subtractive_state(seed=_park_miller_seed(seed)),
        ),
        GeneratorSpec(
            "blum_blum_shub",
            f"Blum-Blum-Shub over {BBS_P} * {BBS_Q}",
            _blum_blum_shub,
        ),
    )
}


def get_generator(name: str) -> GeneratorSpec:
    """Look up a generator by name."""
    try:
        return GENERATORS[name]
    except KeyError:
        known = ", ".join(sorted(GENERATORS))
        raise ParameterValidationError(
            f"unknown generator '{name}' (known: {known})"
        ) from None


def seed_state(name: str, seed: int) -> Any:
    """Create the initial state of generator ``name`` from an integer seed."""
    if seed < 0:
        raise ParameterValidationError(f"seed must be non-negative, got {seed}")
    return get_generator(name).seed_state(seed)


def create_stream(name: str, seed: int) -> RandomStream:
    """Create a restartable :class:`RandomStream` for generator ``name``."""
    return RandomStream(seed_state(name, seed))

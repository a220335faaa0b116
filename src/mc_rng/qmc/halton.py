"""
Van der Corput and Halton low-discrepancy sequences.
"""

from collections.abc import Sequence

import numpy as np

from mc_rng.errors import DomainGapError, ParameterValidationError

# First 64 primes, used as default Halton bases
PRIMES = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53,
    59, 61, 67, 71, 73, 79, 83, 89, 97, 101, 103, 107, 109, 113, 127, 131,
    137, 139, 149, 151, 157, 163, 167, 173, 179, 181, 191, 193, 197, 199, 211, 223,
    227, 229, 233, 239, 241, 251, 257, 263, 269, 271, 277, 281, 283, 293, 307, 311,
)


def van_der_corput(i: int, base: int) -> float:
    """
    Radical inverse of ``i`` in the given base.

    The base-``b`` digits of ``i`` are mirrored around the radix point, so
    ``van_der_corput(11, 2)`` (binary 1011) is 0.1101 = 0.8125.

    Parameters
    ----------
    i : int
        Non-negative sequence index; index 0 maps to 0.0
    base : int
        Base, at least 2
    """
    if i < 0:
        raise ParameterValidationError(f"sequence index must be non-negative, got {i}")
    if base < 2:
        raise ParameterValidationError(f"base must be at least 2, got {base}")

    value = 0.0
    exponent = 1
    while i > 0:
        i, digit = divmod(i, base)
        value += digit * float(base) ** -exponent
        exponent += 1
    return value


def halton_bases(dimension: int) -> tuple[int, ...]:
    """Default Halton bases: the first ``dimension`` primes."""
    if dimension < 1:
        raise ParameterValidationError(f"dimension must be positive, got {dimension}")
    if dimension > len(PRIMES):
        raise DomainGapError("Halton prime table", dimension, len(PRIMES))
    return PRIMES[:dimension]


def halton(i: int, bases: Sequence[int]) -> list[float]:
    """Halton point ``i``: one van der Corput value per base."""
    return [van_der_corput(i, b) for b in bases]


def halton_points(
    n_points: int,
    dimension: int | None = None,
    bases: Sequence[int] | None = None,
    skip: int = 0,
) -> np.ndarray:
    """
    Generate consecutive Halton points.

    Parameters
    ----------
    n_points : int
        Number of points
    dimension : int, optional
        Number of dimensions; selects the first ``dimension`` primes as bases
    bases : sequence of int, optional
        Explicit bases, overriding ``dimension``
    skip : int, optional
        Index of the first point (default: 0, the origin)

    Returns
    -------
    np.ndarray
        Array of shape (n_points, d)
    """
    if n_points < 0:
        raise ParameterValidationError(f"n_points must be non-negative, got {n_points}")
    if skip < 0:
        raise ParameterValidationError(f"skip must be non-negative, got {skip}")
    if bases is None:
        if dimension is None:
            raise ParameterValidationError("either dimension or bases is required")
        bases = halton_bases(dimension)
    elif not bases:
        raise ParameterValidationError("bases must not be empty")

    points = np.empty((n_points, len(bases)), dtype=np.float64)
    for row, i in enumerate(range(skip, skip + n_points)):
        points[row] = halton(i, bases)
    return points

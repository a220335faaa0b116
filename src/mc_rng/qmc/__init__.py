"""
Quasi-random (low-discrepancy) sequences and stratified sampling.
"""

from mc_rng.qmc.halton import PRIMES, halton, halton_bases, halton_points, van_der_corput
from mc_rng.qmc.lhs import latin_hypercube_sample, latin_permutation
from mc_rng.qmc.sobol import (
    MAX_DIMENSION,
    SobolCursor,
    SobolGenerator,
    direction_matrix,
    direction_vector,
    gray_code,
    next_sobol_point,
    rightmost_zero_bit,
    sobol_sequence,
)

__all__ = [
    "MAX_DIMENSION",
    "PRIMES",
    "SobolCursor",
    "SobolGenerator",
    "direction_matrix",
    "direction_vector",
    "gray_code",
    "halton",
    "halton_bases",
    "halton_points",
    "latin_hypercube_sample",
    "latin_permutation",
    "next_sobol_point",
    "rightmost_zero_bit",
    "sobol_sequence",
    "van_der_corput",
]

"""
Pseudo-random number generators.

Name-based lookup lives in :mod:`mc_rng.generators.registry`.
"""

from mc_rng.generators.base import (
    PredefinedSequenceState,
    new_predefined_sequence_state,
    next_predefined_sequence_value,
    step,
    to_uniform,
    uint32_to_uniform,
)
from mc_rng.generators.blum_blum_shub import (
    BlumBlumShubState,
    new_blum_blum_shub_state,
    next_blum_blum_shub_value,
)
from mc_rng.generators.lagged import (
    LaggedFibonacciState,
    LaggedHistory,
    new_additive_state,
    new_gfsr_state,
    new_lagged_fibonacci_state,
    new_subtractive_state,
    next_lagged_fibonacci_history,
    next_lagged_fibonacci_value,
)
from mc_rng.generators.linear import (
    LehmerState,
    LinearCongruentialState,
    MultiplyWithCarryState,
    ShiftRegisterState,
    WichmannHillState,
    new_java_state,
    new_lcg_state,
    new_lehmer_state,
    new_multiply_with_carry_state,
    new_park_miller_state,
    new_randu_state,
    new_shift_register_state,
    new_visualcpp_state,
    new_wichmann_hill_state,
    next_lcg_value,
    next_lehmer_value,
    next_multiply_with_carry_value,
    next_shift_register_value,
    next_wichmann_hill_value,
)
from mc_rng.generators.mersenne import (
    MersenneState,
    new_mersenne_state,
    next_mersenne_value,
)

__all__ = [
    "step",
    "to_uniform",
    "uint32_to_uniform",
    # Predefined
    "PredefinedSequenceState",
    "new_predefined_sequence_state",
    "next_predefined_sequence_value",
    # Linear family
    "LinearCongruentialState",
    "LehmerState",
    "WichmannHillState",
    "MultiplyWithCarryState",
    "ShiftRegisterState",
    "new_lcg_state",
    "new_lehmer_state",
    "new_park_miller_state",
    "new_randu_state",
    "new_visualcpp_state",
    "new_java_state",
    "new_wichmann_hill_state",
    "new_multiply_with_carry_state",
    "new_shift_register_state",
    "next_lcg_value",
    "next_lehmer_value",
    "next_wichmann_hill_value",
    "next_multiply_with_carry_value",
    "next_shift_register_value",
    # Mersenne Twister
    "MersenneState",
    "new_mersenne_state",
    "next_mersenne_value",
    # Lagged Fibonacci
    "LaggedHistory",
    "LaggedFibonacciState",
    "new_lagged_fibonacci_state",
    "new_additive_state",
    "new_gfsr_state",
    "new_subtractive_state",
    "next_lagged_fibonacci_history",
    "next_lagged_fibonacci_value",
    # Blum-Blum-Shub
    "BlumBlumShubState",
    "new_blum_blum_shub_state",
    "next_blum_blum_shub_value",
]

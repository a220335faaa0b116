"""
Experiments package for reproducible generator runs.
"""

from mc_rng.experiments.io import load_config, load_results, save_results
from mc_rng.experiments.run import chi_square_uniformity, run_experiment
from mc_rng.experiments.types import (
    ExperimentConfig,
    ExperimentMetadata,
    ExperimentResult,
)

__all__ = [
    "ExperimentConfig",
    "ExperimentMetadata",
    "ExperimentResult",
    "chi_square_uniformity",
    "load_config",
    "load_results",
    "run_experiment",
    "save_results",
]

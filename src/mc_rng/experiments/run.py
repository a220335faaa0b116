"""
Experiment execution engine for reproducible generator runs.
"""

import logging
import platform
import subprocess
import sys
import time
from datetime import datetime

import numpy as np

from mc_rng.distributions.transforms import NORMAL_METHODS, normal_variates
from mc_rng.errors import ParameterValidationError, RngError
from mc_rng.experiments.types import ExperimentConfig, ExperimentMetadata, ExperimentResult
from mc_rng.generators.registry import create_stream, get_generator

logger = logging.getLogger(__name__)


def get_git_commit() -> str | None:
    """Get current git commit hash if available."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            capture_output=True,
            text=True,
            timeout=1,
            check=False
        )
        if result.returncode == 0:
            return result.stdout.strip()
    except (subprocess.TimeoutExpired, FileNotFoundError):
        pass
    return None


def create_metadata(config: ExperimentConfig, seed: int, count: int) -> ExperimentMetadata:
    """Create metadata for reproducibility."""
    return ExperimentMetadata(
        timestamp=datetime.now().isoformat(),
        python_version=f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
        numpy_version=np.__version__,
        os_platform=platform.platform(),
        git_commit=get_git_commit(),
        generator=config.generator,
        seed=seed,
        count=count,
    )


def chi_square_uniformity(values: np.ndarray, n_buckets: int) -> float:
    """
    Pearson chi-square statistic of ``values`` against U(0, 1).

    With ``n_buckets`` buckets the statistic has ``n_buckets - 1`` degrees of
    freedom under the null hypothesis.
    """
    observed, _ = np.histogram(values, bins=n_buckets, range=(0.0, 1.0))
    expected = values.size / n_buckets
    return float(np.sum((observed - expected) ** 2) / expected)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_int_list(values) -> bool:
    return isinstance(values, list) and all(_is_int(v) for v in values)


def validate_config(config: ExperimentConfig) -> None:
    """Raise ParameterValidationError for an unusable configuration."""
    get_generator(config.generator)
    if not _is_int_list(config.counts) or not config.counts or any(c < 2 for c in config.counts):
        raise ParameterValidationError("counts must be a non-empty list of integers >= 2")
    if not _is_int_list(config.seeds) or not config.seeds:
        raise ParameterValidationError("seeds must be a non-empty list of integers")
    if not _is_int(config.n_buckets) or config.n_buckets < 2:
        raise ParameterValidationError("n_buckets must be at least 2")
    if config.normal_method is not None and config.normal_method not in NORMAL_METHODS:
        raise ParameterValidationError(f"unknown normal method '{config.normal_method}'")


def run_experiment(config: ExperimentConfig) -> list[ExperimentResult]:
    """
    Run experiment with given configuration.

    Draws one stream per (count, seed) combination and summarises it.

    Parameters
    ----------
    config : ExperimentConfig
        Experiment configuration

    Returns
    -------
    list[ExperimentResult]
        List of results, one per (count, seed) combination

    Raises
    ------
    ParameterValidationError
        If configuration is invalid
    """
    validate_config(config)
    results = []

    for count in config.counts:
        for seed in config.seeds:
            metadata = create_metadata(config, seed, count)
            notes = config.generator
            if config.normal_method:
                notes += f"+{config.normal_method}"

            start_time = time.perf_counter()
            try:
                stream = create_stream(config.generator, seed)
                values = stream.take(count)
                runtime = time.perf_counter() - start_time

                normal_mean = normal_std = None
                if config.normal_method:
                    stream.reset()
                    normals = normal_variates(stream, count, config.normal_method)
                    normal_mean = float(np.mean(normals))
                    normal_std = float(np.std(normals, ddof=1))
            except RngError as e:
                # One bad seed must not abort the remaining runs
                logger.warning(
                    "Error in experiment %s (count=%d, seed=%d): %s", config.name, count, seed, e
                )
                continue

            logger.debug("%s seed=%d count=%d done in %.3fs", notes, seed, count, runtime)
            results.append(
                ExperimentResult(
                    config_name=config.name,
                    mean=float(np.mean(values)),
                    variance=float(np.var(values, ddof=1)),
                    minimum=float(np.min(values)),
                    maximum=float(np.max(values)),
                    chi_square=chi_square_uniformity(values, config.n_buckets),
                    n_buckets=config.n_buckets,
                    runtime_seconds=runtime,
                    normal_mean=normal_mean,
                    normal_std=normal_std,
                    metadata=metadata,
                    notes=notes,
                )
            )

    return results

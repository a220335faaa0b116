"""
I/O utilities for experiment configurations and results.
"""

import json
from dataclasses import fields
from pathlib import Path

from mc_rng.errors import ParameterValidationError
from mc_rng.experiments.types import ExperimentConfig, ExperimentResult


def load_config(path: Path) -> ExperimentConfig:
    """
    Load an experiment configuration from a JSON file.

    The file holds one object whose keys are the fields of
    :class:`ExperimentConfig`; unknown keys are rejected.
    """
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ParameterValidationError(f"{path}: invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise ParameterValidationError(f"{path}: expected a JSON object")
    known = {f.name for f in fields(ExperimentConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ParameterValidationError(f"{path}: unknown keys {', '.join(unknown)}")
    try:
        return ExperimentConfig(**data)
    except TypeError as e:
        raise ParameterValidationError(f"{path}: {e}") from e


def save_results(
    results: list[ExperimentResult],
    out_dir: Path,
    experiment_name: str
) -> None:
    """
    Save experiment results to JSON and summary text files.

    Creates:
    - results.json: Full machine-readable results
    - summary.txt: Human-readable table summary

    Parameters
    ----------
    results : list[ExperimentResult]
        Experiment results to save
    out_dir : Path
        Output directory
    experiment_name : str
        Name of experiment for headers
    """
    out_dir.mkdir(parents=True, exist_ok=True)

    json_path = out_dir / "results.json"
    json_data = {
        "experiment_name": experiment_name,
        "n_results": len(results),
        "results": [r.to_dict() for r in results]
    }

    with open(json_path, "w") as f:
        json.dump(json_data, f, indent=2)

    summary_path = out_dir / "summary.txt"
    with open(summary_path, "w") as f:
        f.write("=" * 110 + "\n")
        f.write(f"Experiment: {experiment_name}\n")
        f.write("=" * 110 + "\n")
        f.write(f"\nTotal runs: {len(results)}\n")

        if results:
            meta = results[0].metadata
            f.write("\nMetadata:\n")
            f.write(f"  Timestamp:      {meta.timestamp}\n")
            f.write(f"  Python:         {meta.python_version}\n")
            f.write(f"  NumPy:          {meta.numpy_version}\n")
            f.write(f"  Platform:       {meta.os_platform}\n")
            f.write(f"  Git commit:     {meta.git_commit or 'N/A'}\n")
            f.write(f"  Generator:      {meta.generator}\n")

        f.write("\n" + "-" * 110 + "\n")
        f.write(f"{'Method':<28} {'Seed':>8} {'Count':>10} {'Mean':>10} {'Variance':>10} "
                f"{'Min':>12} {'Max':>12} {'Chi^2':>8} {'Runtime (s)':>12}\n")
        f.write("-" * 110 + "\n")

        for r in results:
            f.write(f"{r.notes:<28} {r.metadata.seed:>8} {r.metadata.count:>10} "
                    f"{r.mean:>10.6f} {r.variance:>10.6f} {r.minimum:>12.4e} "
                    f"{r.maximum:>12.10f} {r.chi_square:>8.2f} {r.runtime_seconds:>12.3f}\n")

        f.write("-" * 110 + "\n")
        f.write("Expected for U(0,1): mean 0.5, variance 0.083333, "
                "chi^2 close to n_buckets - 1\n")

    print(f"\n✓ Results saved to {out_dir}")
    print(f"  - {json_path.name}")
    print(f"  - {summary_path.name}")


def load_results(results_dir: Path) -> dict:
    """
    Load experiment results from JSON file.

    Parameters
    ----------
    results_dir : Path
        Directory containing results.json

    Returns
    -------
    dict
        Loaded experiment data
    """
    json_path = results_dir / "results.json"
    with open(json_path) as f:
        return json.load(f)

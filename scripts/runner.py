#!/usr/bin/env python
"""
Reproducible experiment runner.

Usage:
    python scripts/runner.py --experiment lcg_family
    python scripts/runner.py --experiment normal_methods
    python scripts/runner.py --experiment all
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mc_rng.distributions import NORMAL_METHODS
from mc_rng.experiments import ExperimentConfig, run_experiment, save_results

COUNTS = [10000, 100000]
SEEDS = [42, 123, 456]


def run_generator_family(results_dir: Path, key: str, title: str, generators: list[str]) -> None:
    """Run the same uniformity grid for several generators and save one table."""
    print("\n" + "=" * 80)
    print(f"BENCHMARK: {title}")
    print("=" * 80)

    all_results = []
    for i, generator in enumerate(generators, 1):
        print(f"{i}. {generator}...")
        config = ExperimentConfig(
            name=f"{key}_{generator}",
            generator=generator,
            counts=COUNTS,
            seeds=SEEDS,
            n_buckets=20,
        )
        all_results.extend(run_experiment(config))

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = results_dir / key / timestamp
    save_results(all_results, out_dir, title)


def run_normal_methods(results_dir: Path) -> None:
    """Compare normal transforms fed by the same Mersenne Twister streams."""
    print("\n" + "=" * 80)
    print("BENCHMARK: Normal Transforms")
    print("=" * 80)

    all_results = []
    for i, method in enumerate(NORMAL_METHODS, 1):
        print(f"{i}. {method}...")
        config = ExperimentConfig(
            name=f"normal_{method}",
            generator="mersenne",
            counts=COUNTS,
            seeds=SEEDS,
            normal_method=method,
        )
        all_results.extend(run_experiment(config))

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = results_dir / "normal_methods" / timestamp
    save_results(all_results, out_dir, "Normal Transforms")

    print(f"\n{'Method':<28} {'Seed':>8} {'Count':>10} {'Mean':>10} {'Std':>10}")
    print("-" * 80)
    for r in all_results:
        print(f"{r.notes:<28} {r.metadata.seed:>8} {r.metadata.count:>10} "
              f"{r.normal_mean:>10.6f} {r.normal_std:>10.6f}")
    print("=" * 80)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Run reproducible experiments",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--experiment",
        type=str,
        required=True,
        choices=["lcg_family", "modern", "normal_methods", "all"],
        help="Experiment to run",
    )

    parser.add_argument(
        "--results_dir", type=Path, default=Path("results"), help="Directory for results output"
    )

    args = parser.parse_args()

    args.results_dir.mkdir(exist_ok=True)

    print("\n" + "=" * 80)
    print("REPRODUCIBLE EXPERIMENT RUNNER")
    print("=" * 80)
    print(f"Results directory: {args.results_dir.absolute()}")

    if args.experiment in ("lcg_family", "all"):
        run_generator_family(
            args.results_dir,
            "lcg_family",
            "Linear Congruential Family",
            ["randu", "park_miller", "visualcpp", "java", "wichmann_hill"],
        )

    if args.experiment in ("modern", "all"):
        run_generator_family(
            args.results_dir,
            "modern",
            "Shift, Carry, Lagged and Twister Generators",
            ["mwc", "shift_register", "subtractive", "mersenne", "blum_blum_shub"],
        )

    if args.experiment in ("normal_methods", "all"):
        run_normal_methods(args.results_dir)

    print("\n" + "=" * 80)
    print("✓ All experiments complete")
    print("=" * 80)


if __name__ == "__main__":
    main()

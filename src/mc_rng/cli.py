#!/usr/bin/env python
"""
Command-line interface for the random number engine.

This module provides the main CLI entrypoint for the mc-rng command.

Example usage:
    mc-rng list
    mc-rng uniform --generator mersenne --seed 0 --count 5
    mc-rng uniform --generator park_miller --seed 7 --count 4 --normal polar
    mc-rng sobol --dimension 3 --count 8
    mc-rng lhs --samples 5 --dimension 2 --generator mersenne --seed 1
    mc-rng experiment --config experiments/mersenne.json --out results/mersenne
"""

import argparse
import logging
from pathlib import Path

import numpy as np

from mc_rng.distributions.transforms import NORMAL_METHODS, normal_variates
from mc_rng.errors import RngError
from mc_rng.experiments import load_config, run_experiment, save_results
from mc_rng.generators.registry import GENERATORS, create_stream, seed_state
from mc_rng.qmc import SobolGenerator, halton_points, latin_hypercube_sample


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Pseudo-random and quasi-random number engine",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List available pseudo-random generators")

    uniform = commands.add_parser(
        "uniform",
        help="Draw variates from a pseudo-random generator",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    uniform.add_argument(
        "--generator",
        type=str,
        choices=sorted(GENERATORS),
        default="mersenne",
        help="Generator name",
    )
    uniform.add_argument("--seed", type=int, default=0, help="Integer seed")
    uniform.add_argument("--count", type=int, default=10, help="Number of variates")
    uniform.add_argument(
        "--normal",
        type=str,
        choices=NORMAL_METHODS,
        default=None,
        help="Transform the stream to standard normals with this method",
    )

    sobol = commands.add_parser(
        "sobol",
        help="Generate Sobol points",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    sobol.add_argument("--dimension", type=int, default=1, help="Number of dimensions")
    sobol.add_argument("--count", type=int, default=10, help="Number of points")
    sobol.add_argument("--skip", type=int, default=0, help="Index of the first point")
    sobol.add_argument(
        "--scramble",
        action="store_true",
        help="Apply digital shift scrambling",
    )
    sobol.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the scrambling shift (required with --scramble)",
    )
    sobol.add_argument(
        "--normal",
        action="store_true",
        help="Map points through the inverse normal CDF",
    )

    halton = commands.add_parser(
        "halton",
        help="Generate Halton points",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    halton.add_argument("--dimension", type=int, default=2, help="Number of dimensions")
    halton.add_argument("--count", type=int, default=10, help="Number of points")
    halton.add_argument("--skip", type=int, default=0, help="Index of the first point")

    lhs = commands.add_parser(
        "lhs",
        help="Draw a Latin hypercube sample",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    lhs.add_argument("--samples", type=int, default=10, help="Number of samples (strata)")
    lhs.add_argument("--dimension", type=int, default=2, help="Number of dimensions")
    lhs.add_argument(
        "--generator",
        type=str,
        choices=sorted(GENERATORS),
        default="mersenne",
        help="Generator supplying the jitter",
    )
    lhs.add_argument("--seed", type=int, default=0, help="Integer seed")

    experiment = commands.add_parser(
        "experiment",
        help="Run a uniformity experiment described by a JSON config",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    experiment.add_argument("--config", type=Path, required=True, help="JSON config file")
    experiment.add_argument(
        "--out",
        type=Path,
        default=Path("results"),
        help="Output directory",
    )

    return parser.parse_args(args)


def _print_header(title: str) -> None:
    print("=" * 70)
    print(title)
    print("=" * 70)


def _print_points(points: np.ndarray) -> None:
    for i, row in enumerate(points):
        coords = "  ".join(f"{x:.10f}" for x in np.atleast_1d(row))
        print(f"  {i:>6}  {coords}")


def _run_list() -> None:
    _print_header("Available generators")
    for name in sorted(GENERATORS):
        print(f"  {name:<16} {GENERATORS[name].description}")


def _run_uniform(parsed: argparse.Namespace) -> None:
    _print_header("Pseudo-random variates")
    print(f"  Generator:              {parsed.generator}")
    print(f"  Seed:                   {parsed.seed}")
    print(f"  Count:                  {parsed.count:,}")
    stream = create_stream(parsed.generator, parsed.seed)
    if parsed.normal:
        print(f"  Normal Transform:       {parsed.normal}")
        values = normal_variates(stream, parsed.count, parsed.normal)
    else:
        values = stream.take(parsed.count)
    print()
    _print_points(values)


def _run_sobol(parsed: argparse.Namespace) -> None:
    _print_header("Sobol sequence")
    print(f"  Dimension:              {parsed.dimension}")
    print(f"  Count:                  {parsed.count:,}")
    print(f"  Skip:                   {parsed.skip}")
    print(f"  Scrambling:             {parsed.scramble}")
    generator = SobolGenerator(
        dimension=parsed.dimension, seed=parsed.seed, scramble=parsed.scramble
    )
    if parsed.normal:
        points = generator.generate_normal(parsed.count, skip=parsed.skip)
    else:
        points = generator.generate(parsed.count, skip=parsed.skip)
    print()
    _print_points(points)


def _run_halton(parsed: argparse.Namespace) -> None:
    _print_header("Halton sequence")
    print(f"  Dimension:              {parsed.dimension}")
    print(f"  Count:                  {parsed.count:,}")
    points = halton_points(parsed.count, dimension=parsed.dimension, skip=parsed.skip)
    print()
    _print_points(points)


def _run_lhs(parsed: argparse.Namespace) -> None:
    _print_header("Latin hypercube sample")
    print(f"  Samples:                {parsed.samples}")
    print(f"  Dimension:              {parsed.dimension}")
    print(f"  Generator:              {parsed.generator} (seed {parsed.seed})")
    state = seed_state(parsed.generator, parsed.seed)
    _, samples = latin_hypercube_sample(parsed.samples, parsed.dimension, state)
    print()
    _print_points(samples)


def _run_experiment(parsed: argparse.Namespace) -> None:
    config = load_config(parsed.config)
    _print_header(f"Experiment: {config.name}")
    results = run_experiment(config)
    for r in results:
        print(f"  seed={r.metadata.seed:<8} count={r.metadata.count:<10} "
              f"mean={r.mean:.6f} var={r.variance:.6f} chi2={r.chi_square:.2f}")
    save_results(results, parsed.out, config.name)


def main(args: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    int
        Exit code (0 for success, non-zero for errors).
    """
    parsed = parse_args(args)
    if parsed.verbose:
        logging.basicConfig(level=logging.DEBUG)

    handlers = {
        "uniform": _run_uniform,
        "sobol": _run_sobol,
        "halton": _run_halton,
        "lhs": _run_lhs,
        "experiment": _run_experiment,
    }

    try:
        if parsed.command == "list":
            _run_list()
        else:
            handlers[parsed.command](parsed)
    except RngError as e:
        print(f"Error: {e}")
        return 1
    except OSError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

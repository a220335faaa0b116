"""
Tests for experiment infrastructure.
"""

import json
import logging

import numpy as np
import pytest

from mc_rng.errors import ParameterValidationError
from mc_rng.experiments import (
    ExperimentConfig,
    chi_square_uniformity,
    load_config,
    load_results,
    run_experiment,
    save_results,
)


class TestExperimentConfig:
    """Test experiment configuration."""

    def test_config_creation(self):
        """Test basic config creation and defaults."""
        config = ExperimentConfig(name="test", generator="mersenne")

        assert config.name == "test"
        assert config.counts == [10000]
        assert config.seeds == [42]
        assert config.n_buckets == 10
        assert config.normal_method is None

    def test_load_config(self, tmp_path):
        """Test loading a config from JSON."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "name": "from_file",
            "generator": "park_miller",
            "counts": [100, 200],
            "seeds": [1],
            "normal_method": "polar",
        }))

        config = load_config(path)

        assert config.generator == "park_miller"
        assert config.counts == [100, 200]
        assert config.normal_method == "polar"

    def test_load_config_unknown_key(self, tmp_path):
        """Test that unknown keys are rejected."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"name": "x", "generator": "mersenne", "n_paths": 5}))

        with pytest.raises(ParameterValidationError, match="unknown keys n_paths"):
            load_config(path)

    def test_load_config_missing_key(self, tmp_path):
        """Test that a missing required field is reported."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"name": "x"}))

        with pytest.raises(ParameterValidationError, match="generator"):
            load_config(path)

    def test_load_config_not_an_object(self, tmp_path):
        """Test that a top-level JSON array is rejected."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")

        with pytest.raises(ParameterValidationError, match="expected a JSON object"):
            load_config(path)

    def test_load_config_malformed_json(self, tmp_path):
        """Test that a file that is not valid JSON is reported."""
        path = tmp_path / "config.json"
        path.write_text('{"name": "x", "generator": ')

        with pytest.raises(ParameterValidationError, match="invalid JSON"):
            load_config(path)


class TestChiSquare:
    """Test the uniformity statistic."""

    def test_perfectly_flat(self):
        """Test that evenly spread values give zero."""
        values = (np.arange(1000) + 0.5) / 1000
        assert chi_square_uniformity(values, 10) == pytest.approx(0.0)

    def test_all_in_one_bucket(self):
        """Test the statistic for a degenerate sample."""
        values = np.full(100, 0.05)
        # expected 10 per bucket: (90^2 + 9 * 10^2) / 10
        assert chi_square_uniformity(values, 10) == pytest.approx(900.0)


class TestExperimentRunner:
    """Test experiment runner."""

    def test_deterministic_output(self):
        """Test that same seed produces identical results."""
        config = ExperimentConfig(name="determinism_test", generator="mersenne",
                                  counts=[5000], seeds=[42])

        results1 = run_experiment(config)
        results2 = run_experiment(config)

        assert len(results1) == len(results2) == 1
        assert results1[0].mean == results2[0].mean
        assert results1[0].chi_square == results2[0].chi_square

    def test_grid_shape(self):
        """Test that grid produces expected number of results."""
        config = ExperimentConfig(name="grid_test", generator="park_miller",
                                  counts=[100, 500, 1000], seeds=[42, 123, 456])

        results = run_experiment(config)

        # Should have 3 counts × 3 seeds = 9 results
        assert len(results) == 9
        assert {r.metadata.count for r in results} == {100, 500, 1000}
        assert {r.metadata.seed for r in results} == {42, 123, 456}

    def test_uniform_statistics(self):
        """Test that a good generator gives U(0,1) moments."""
        config = ExperimentConfig(name="moments", generator="mersenne",
                                  counts=[20000], seeds=[7])

        result = run_experiment(config)[0]

        assert abs(result.mean - 0.5) < 0.01
        assert abs(result.variance - 1 / 12) < 0.005
        assert 0.0 < result.minimum < result.maximum < 1.0
        # 9 degrees of freedom
        assert result.chi_square < 40.0

    def test_metadata_fields(self):
        """Test that results contain required metadata."""
        config = ExperimentConfig(name="metadata_test", generator="wichmann_hill",
                                  counts=[100], seeds=[42])

        result = run_experiment(config)[0]

        assert result.metadata.timestamp is not None
        assert result.metadata.python_version is not None
        assert result.metadata.numpy_version is not None
        assert result.metadata.os_platform is not None
        assert result.metadata.seed == 42
        assert result.metadata.generator == "wichmann_hill"
        assert result.metadata.count == 100

    def test_runtime_measurement(self):
        """Test that runtime is measured."""
        config = ExperimentConfig(name="runtime_test", generator="mersenne",
                                  counts=[1000], seeds=[42])

        result = run_experiment(config)[0]

        assert result.runtime_seconds > 0
        assert result.runtime_seconds < 10  # Should be fast

    def test_normal_transform_recorded(self):
        """Test that a normal method adds normal moments."""
        config = ExperimentConfig(name="normal_test", generator="mersenne",
                                  counts=[10000], seeds=[3], normal_method="box_muller")

        result = run_experiment(config)[0]

        assert result.notes == "mersenne+box_muller"
        assert abs(result.normal_mean) < 0.05
        assert abs(result.normal_std - 1.0) < 0.05

    def test_bad_seed_skipped(self, caplog):
        """Test that a failing run is logged and skipped."""
        config = ExperimentConfig(name="skip_test", generator="mersenne",
                                  counts=[100], seeds=[-1, 5])

        with caplog.at_level(logging.WARNING, logger="mc_rng.experiments.run"):
            results = run_experiment(config)

        assert [r.metadata.seed for r in results] == [5]
        assert "seed=-1" in caplog.text

    @pytest.mark.parametrize(
        "kwargs,match",
        [
            ({"generator": "nope"}, "unknown generator"),
            ({"generator": "mersenne", "counts": []}, "counts"),
            ({"generator": "mersenne", "counts": [1]}, "counts"),
            ({"generator": "mersenne", "seeds": []}, "seeds"),
            ({"generator": "mersenne", "n_buckets": 1}, "n_buckets"),
            ({"generator": "mersenne", "normal_method": "ziggurat"}, "normal method"),
        ],
    )
    def test_invalid_config_raises_error(self, kwargs, match):
        """Test that invalid config raises error."""
        config = ExperimentConfig(name="invalid_test", **kwargs)

        with pytest.raises(ValueError, match=match):
            run_experiment(config)

    @pytest.mark.parametrize(
        "kwargs,match",
        [
            ({"counts": ["a"]}, "counts must be a non-empty list of integers"),
            ({"counts": 100}, "counts must be a non-empty list of integers"),
            ({"counts": [True, 100]}, "counts must be a non-empty list of integers"),
            ({"seeds": ["x"]}, "seeds must be a non-empty list of integers"),
            ({"seeds": 7}, "seeds must be a non-empty list of integers"),
            ({"n_buckets": "10"}, "n_buckets"),
        ],
    )
    def test_wrongly_typed_fields_rejected(self, kwargs, match):
        """Test that non-integer counts, seeds and bucket numbers are rejected."""
        config = ExperimentConfig(name="typed_test", generator="mersenne", **kwargs)

        with pytest.raises(ParameterValidationError, match=match):
            run_experiment(config)


class TestExperimentIO:
    """Test experiment I/O."""

    def test_save_and_load_results(self, tmp_path):
        """Test saving and loading results."""
        config = ExperimentConfig(name="io_test", generator="mersenne",
                                  counts=[1000], seeds=[42])
        results = run_experiment(config)

        out_dir = tmp_path / "test_results"
        save_results(results, out_dir, "test_experiment")

        assert (out_dir / "results.json").exists()
        assert (out_dir / "summary.txt").exists()

        loaded = load_results(out_dir)
        assert loaded["experiment_name"] == "test_experiment"
        assert loaded["n_results"] == 1
        assert len(loaded["results"]) == 1

        result_dict = loaded["results"][0]
        assert "mean" in result_dict
        assert "chi_square" in result_dict
        assert result_dict["metadata"]["generator"] == "mersenne"

    def test_summary_table_format(self, tmp_path):
        """Test that summary table is properly formatted."""
        config = ExperimentConfig(name="table_test", generator="randu",
                                  counts=[1000], seeds=[42])
        results = run_experiment(config)

        out_dir = tmp_path / "table_test"
        save_results(results, out_dir, "table_test")

        content = (out_dir / "summary.txt").read_text()

        assert "Experiment: table_test" in content
        assert "Mean" in content
        assert "Chi^2" in content
        assert "Runtime" in content
        assert "randu" in content

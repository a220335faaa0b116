"""Tests for uniform-to-normal transforms and rejection sampling."""

import numpy as np
import pytest

from mc_rng.distributions import (
    affine_transform,
    box_muller_transform,
    central_limit_normal_transform,
    generalized_rejection_sample,
    inverse_normal_cdf,
    marsaglia_polar_filter,
    marsaglia_polar_transform,
    normal_cdf,
    normal_variates,
    uniform_to_integer,
)
from mc_rng.driver import RandomStream
from mc_rng.errors import ParameterValidationError, RetryLimitExceededError
from mc_rng.generators import new_mersenne_state, new_predefined_sequence_state


def fixed_source(*values):
    """Source replaying the given uniforms forever."""
    return RandomStream(new_predefined_sequence_state(values))


class TestSimpleTransforms:
    """Test affine and integer mappings."""

    def test_affine(self):
        """Test stretch-then-shift."""
        assert affine_transform(0.25, 2.0, -1.0) == -0.5

    def test_uniform_to_integer(self):
        """Test mapping onto an inclusive integer range."""
        assert uniform_to_integer(0.01, 1, 6) == 1
        assert uniform_to_integer(0.99, 1, 6) == 6

    def test_empty_integer_range(self):
        """Test that an inverted range is rejected."""
        with pytest.raises(ParameterValidationError, match="empty integer range"):
            uniform_to_integer(0.5, 3, 2)


class TestBoxMuller:
    """Test the Box-Muller transform."""

    def test_known_pair(self):
        """Test a hand-computed pair."""
        z1, z2 = box_muller_transform(0.38, 0.41)
        assert z1 == pytest.approx(-1.17454726, abs=1e-8)
        assert z2 == pytest.approx(0.7453903574, abs=1e-9)


class TestMarsagliaPolar:
    """Test the polar method and its rejection filter."""

    def test_filter_rejects_outside_circle(self):
        """Test that the first candidate outside the unit circle is skipped."""
        s, u, v = marsaglia_polar_filter(fixed_source(1.2, 1.4, 0.2, 0.4))
        assert s == pytest.approx(0.4)
        assert u == pytest.approx(-0.6)
        assert v == pytest.approx(-0.2)

    def test_transform(self):
        """Test a hand-computed pair."""
        z1, z2 = marsaglia_polar_transform(fixed_source(0.2, 0.4))
        assert z1 == pytest.approx(-1.284259833, abs=1e-9)
        assert z2 == pytest.approx(-0.428086611, abs=1e-9)

    def test_retry_limit(self):
        """Test that a source never inside the circle hits the retry ceiling."""
        with pytest.raises(RetryLimitExceededError, match="rejected 5 consecutive") as exc:
            marsaglia_polar_filter(fixed_source(0.99), max_retries=5)
        assert exc.value.attempts == 5

    def test_invalid_retry_limit(self):
        """Test that a non-positive ceiling is rejected."""
        with pytest.raises(ParameterValidationError, match="max_retries"):
            marsaglia_polar_filter(fixed_source(0.5), max_retries=0)


class TestCentralLimit:
    """Test the central-limit approximation."""

    def test_midpoint_gives_zero(self):
        """Test that uniforms at 1/2 map to 0."""
        assert central_limit_normal_transform([0.5] * 12) == pytest.approx(0.0)

    def test_scaling(self):
        """Test a single uniform is rescaled to unit variance."""
        assert central_limit_normal_transform([1.0]) == pytest.approx(np.sqrt(3.0))

    def test_empty(self):
        """Test that an empty input is rejected."""
        with pytest.raises(ParameterValidationError, match="at least one"):
            central_limit_normal_transform([])


class TestRejectionSampling:
    """Test the generalised rejection sampler."""

    def test_first_candidate_accepted(self):
        """Test acceptance when the density exceeds the scaled uniform."""
        x = generalized_rejection_sample(fixed_source(0.4), lambda x: 0.81, 0.0, 100.0, 0.8)
        assert x == pytest.approx(40.0)

    def test_rejected_then_accepted(self):
        """Test that a low-density candidate is rejected."""
        x = generalized_rejection_sample(
            fixed_source(0.2, 0.9, 0.3, 0.6),
            lambda x: 0.01 if x < 25 else 0.99,
            0.0,
            100.0,
            1.0,
        )
        assert x == pytest.approx(30.0)

    def test_retry_limit(self):
        """Test that a zero density raises after the retry ceiling."""
        with pytest.raises(RetryLimitExceededError, match="generalized_rejection_sample"):
            generalized_rejection_sample(
                fixed_source(0.5), lambda x: 0.0, 0.0, 1.0, 1.0, max_retries=10
            )

    @pytest.mark.parametrize(
        "xmin,xmax,pdfmax,match",
        [(1.0, 1.0, 1.0, "empty sampling interval"), (0.0, 1.0, 0.0, "pdfmax")],
    )
    def test_invalid_arguments(self, xmin, xmax, pdfmax, match):
        """Test interval and bound validation."""
        with pytest.raises(ParameterValidationError, match=match):
            generalized_rejection_sample(fixed_source(0.5), lambda x: 1.0, xmin, xmax, pdfmax)


class TestNormalCDF:
    """Test the CDF approximation."""

    def test_known_values(self):
        """Test against tabulated probabilities."""
        assert normal_cdf(0.0) == pytest.approx(0.5, abs=1e-7)
        assert normal_cdf(1.96) == pytest.approx(0.9750021, abs=1e-6)
        assert normal_cdf(-1.0) == pytest.approx(0.1586553, abs=1e-6)

    def test_symmetry(self):
        """Test Φ(-x) = 1 - Φ(x)."""
        x = np.linspace(-4.0, 4.0, 17)
        np.testing.assert_allclose(normal_cdf(-x), 1.0 - normal_cdf(x), atol=1e-7)

    def test_scalar_returns_float(self):
        """Test that scalar input gives a Python float."""
        assert isinstance(normal_cdf(0.3), float)


class TestInverseNormalCDF:
    """Test inverse_normal_cdf function."""

    def test_median(self):
        """Test that inverse_normal_cdf(0.5) = 0."""
        assert abs(inverse_normal_cdf(0.5)) < 1e-9

    def test_symmetry(self):
        """Test symmetry: Φ⁻¹(1-u) = -Φ⁻¹(u)."""
        for u in [0.01, 0.1, 0.25, 0.4]:
            assert abs(inverse_normal_cdf(u) + inverse_normal_cdf(1.0 - u)) < 1e-9

    def test_known_values(self):
        """Test against known quantiles."""
        assert inverse_normal_cdf(0.975) == pytest.approx(1.959964, abs=1e-5)
        assert inverse_normal_cdf(0.025) == pytest.approx(-1.959964, abs=1e-5)

    def test_extreme_values(self):
        """Test behavior at extreme probabilities."""
        assert inverse_normal_cdf(1e-10) < -6.0
        assert inverse_normal_cdf(1.0 - 1e-10) > 6.0

    def test_round_trip(self):
        """Test that the CDF undoes its inverse."""
        p = np.linspace(0.001, 0.999, 101)
        np.testing.assert_allclose(normal_cdf(inverse_normal_cdf(p)), p, atol=1e-6)

    def test_array_input(self):
        """Test that function works with array input."""
        result = inverse_normal_cdf(np.array([0.1, 0.3, 0.5, 0.7, 0.9]))
        assert result.shape == (5,)
        assert np.all(np.diff(result) > 0)

    def test_invalid_input(self):
        """Test that invalid inputs raise errors."""
        with pytest.raises(ValueError, match="probabilities must be in"):
            inverse_normal_cdf(0.0)
        with pytest.raises(ValueError, match="probabilities must be in"):
            inverse_normal_cdf(np.array([0.5, 1.1]))


class TestNormalVariates:
    """Test batch normal generation."""

    @pytest.mark.parametrize("method", ["box_muller", "polar", "inverse_cdf", "central_limit"])
    def test_moments(self, method):
        """Test that every method gives roughly standard normal moments."""
        source = RandomStream(new_mersenne_state(2024))
        z = normal_variates(source, 20000, method)
        assert z.shape == (20000,)
        assert abs(np.mean(z)) < 0.03
        assert abs(np.std(z) - 1.0) < 0.03

    def test_odd_count_box_muller(self):
        """Test that an odd count discards the second value of the last pair."""
        z = normal_variates(fixed_source(0.38, 0.41), 3, "box_muller")
        assert z[0] == pytest.approx(-1.17454726, abs=1e-8)
        assert z[2] == z[0]

    def test_unknown_method(self):
        """Test that an unknown method name is rejected."""
        with pytest.raises(ParameterValidationError, match="unknown normal method"):
            normal_variates(fixed_source(0.5), 2, "ziggurat")

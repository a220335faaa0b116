"""Tests for the sequence driver and RandomStream."""

from itertools import islice

import numpy as np
import pytest

from mc_rng.driver import RandomStream, iterate, take, take_with_state
from mc_rng.errors import ParameterValidationError
from mc_rng.generators import (
    new_park_miller_state,
    new_predefined_sequence_state,
    next_lehmer_value,
)


class TestIterate:
    """Test lazy iteration."""

    def test_lazy_prefix(self):
        """Test that iterate yields values on demand."""
        state = new_predefined_sequence_state([0.1, 0.2])
        values = list(islice(iterate(state), 5))
        assert values == [0.1, 0.2, 0.1, 0.2, 0.1]

    def test_explicit_step_function(self):
        """Test iteration with a family-specific step function."""
        state = new_park_miller_state(1)
        first = next(iterate(state, next_lehmer_value))
        assert first == pytest.approx(16808 / (2**31 + 1))


class TestTake:
    """Test bounded draws."""

    def test_take_matches_iterate(self):
        """Test that take(n) equals the first n values of iterate."""
        state = new_park_miller_state(11)
        np.testing.assert_array_equal(take(state, 20), list(islice(iterate(state), 20)))

    def test_take_with_state_continues(self):
        """Test that the returned state continues where the draw stopped."""
        state = new_park_miller_state(11)
        mid_state, head = take_with_state(state, 10)
        tail = take(mid_state, 10)
        np.testing.assert_array_equal(np.concatenate([head, tail]), take(state, 20))

    def test_take_zero(self):
        """Test that a zero-length draw returns an empty array and the same state."""
        state = new_park_miller_state(11)
        final, values = take_with_state(state, 0)
        assert values.shape == (0,)
        assert final == state

    def test_negative_count(self):
        """Test that a negative count is rejected."""
        with pytest.raises(ParameterValidationError, match="non-negative"):
            take(new_park_miller_state(1), -1)


class TestRandomStream:
    """Test the stateful stream wrapper."""

    def test_call_advances(self):
        """Test that calling the stream returns successive variates."""
        stream = RandomStream(new_predefined_sequence_state([0.25, 0.75]))
        assert [stream(), stream(), stream()] == [0.25, 0.75, 0.25]
        assert stream.n_drawn == 3

    def test_take_and_reset(self):
        """Test that reset rewinds to the seed state."""
        stream = RandomStream(new_park_miller_state(3))
        first = stream.take(5)
        assert stream.n_drawn == 5
        stream.reset()
        assert stream.n_drawn == 0
        np.testing.assert_array_equal(stream.take(5), first)

    def test_peek_does_not_advance(self):
        """Test that peek leaves the stream position unchanged."""
        stream = RandomStream(new_park_miller_state(3))
        peeked = stream.peek(4)
        np.testing.assert_array_equal(stream.take(4), peeked)

    def test_iteration_restarts(self):
        """Test that iterating starts again from the seed state."""
        stream = RandomStream(new_park_miller_state(3))
        stream.take(10)
        assert list(islice(stream, 3)) == list(take(new_park_miller_state(3), 3))
        assert stream.n_drawn == 10

    def test_repr(self):
        """Test the stream representation."""
        stream = RandomStream(new_park_miller_state(3))
        stream()
        assert repr(stream) == "RandomStream(LehmerState, drawn=1)"

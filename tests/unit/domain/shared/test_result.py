"""Tests for the Success / Failure result type."""

import pytest

from workshop.domain.shared import Failure, Success


class TestSuccess:
    """Tests for Success."""

    def test_success_carries_value(self):
        """Test: Success exposes its value and reports success."""
        result = Success(42)

        assert result.is_success is True
        assert result.is_failure is False
        assert result.unwrap() == 42
        assert result.unwrap_or(0) == 42

    def test_map_and_flat_map(self):
        """Test: map transforms the value, flat_map chains another Result."""
        result = Success(2).map(lambda v: v * 10).flat_map(lambda v: Success(v + 1))

        assert result == Success(21)


class TestFailure:
    """Tests for Failure."""

    def test_failure_short_circuits(self):
        """Test: map / flat_map on a Failure return the same Failure."""
        error = ValueError("boom")
        result = Failure(error)

        assert result.is_failure is True
        assert result.map(lambda v: v * 10) is result
        assert result.flat_map(lambda v: Success(v)) is result
        assert result.unwrap_or("default") == "default"

    def test_unwrap_raises_carried_exception(self):
        """Test: unwrap re-raises the carried exception unchanged."""
        error = KeyError("missing")

        with pytest.raises(KeyError) as exc_info:
            Failure(error).unwrap()

        assert exc_info.value is error

    def test_unwrap_non_exception_error(self):
        """Test: unwrap on a non-exception error raises ValueError."""
        with pytest.raises(ValueError, match="Called unwrap"):
            Failure("not an exception").unwrap()

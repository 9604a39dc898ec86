"""Tests for the Result type."""

import pytest

from valuegate.domain.common.result import DONE, Failure, Success


class TestSuccess:
    def test_flags_and_unwrap(self) -> None:
        result = Success(3)
        assert result.is_success
        assert not result.is_failure
        assert result.unwrap() == 3
        with pytest.raises(ValueError):
            result.unwrap_error()

    def test_map_and_flat_map(self) -> None:
        assert Success(3).map(lambda x: x * 2) == Success(6)
        assert Success(3).flat_map(lambda x: Failure(f"bad {x}")) == Failure("bad 3")
        assert Success(3).map_error(str.upper) == Success(3)

    def test_value_or_ignores_default(self) -> None:
        assert Success(3).value_or(0) == 3


class TestFailure:
    def test_flags_and_unwrap(self) -> None:
        result = Failure("nope")
        assert result.is_failure
        assert not result.is_success
        assert result.unwrap_error() == "nope"
        with pytest.raises(ValueError):
            result.unwrap()

    def test_map_is_noop(self) -> None:
        failure = Failure("nope")
        assert failure.map(lambda x: x * 2) is failure
        assert failure.flat_map(lambda x: Success(x)) is failure
        assert failure.map_error(str.upper) == Failure("NOPE")

    def test_value_or_returns_default(self) -> None:
        assert Failure("nope").value_or(0) == 0


def test_done_marker() -> None:
    assert Success(DONE) == Success(DONE)
    assert repr(Success(DONE)) == "Success(DONE)"

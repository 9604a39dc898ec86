"""
Result type for validation outcomes.

Construction entry points that must not raise return a Result instead:
either Success carrying a value, or Failure carrying an Error.

Example:
    result = MeetingTitle.make_result("Weekly sync")
    match result:
        case Success(value):
            print(f"Valid: {value}")
        case Failure(error):
            print(f"Invalid: {error}")

A caller that only needs to know a value is valid gets ``Success(DONE)``.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped value type


@dataclass(frozen=True)
class Done:
    """Success marker that carries no value."""

    def __repr__(self) -> str:
        return "DONE"


DONE = Done()


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    is_success = True
    is_failure = False

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> None:
        raise ValueError("Cannot get error from Success result")

    def value_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Success[U]":
        """Transform the value."""
        return Success(fn(self.value))

    def flat_map(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """Chain a step that can itself fail."""
        return fn(self.value)

    def map_error(self, fn: Callable[[E], U]) -> "Success[T]":
        return self

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    is_success = False
    is_failure = True

    def unwrap(self) -> None:
        raise ValueError("Cannot get value from Failure result")

    def unwrap_error(self) -> E:
        return self.error

    def value_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[T], U]) -> "Failure[E]":
        return self

    def flat_map(self, fn: Callable[[T], "Result[U, E]"]) -> "Failure[E]":
        return self

    def map_error(self, fn: Callable[[E], U]) -> "Failure[U]":
        """Transform the error."""
        return Failure(fn(self.error))

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


Result = Success[T] | Failure[E]

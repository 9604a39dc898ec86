"""
Structured error descriptions.

An Error is the failure payload carried by Failure results. It describes
what went wrong as data, so callers can inspect the code and kind without
catching anything.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Self

from .exceptions import DomainError, ValidationError


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class Error:
    """A single failure: a stable code, a human-readable description and its kind."""

    code: str
    description: str
    kind: ErrorKind = ErrorKind.VALIDATION
    metadata: Mapping[str, object] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        # copied and read-only; catalogue errors are shared
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @classmethod
    def validation(cls, code: str, description: str) -> Self:
        return cls(code=code, description=description, kind=ErrorKind.VALIDATION)

    @classmethod
    def business_rule(cls, code: str, description: str) -> Self:
        return cls(code=code, description=description, kind=ErrorKind.BUSINESS_RULE)

    @classmethod
    def from_exception(cls, exc: BaseException) -> Self:
        """
        Convert a caught exception into an Error.

        ValidationError maps to a VALIDATION error, anything else (including a
        broken factory) to UNEXPECTED. The exception type is kept in metadata.

        Args:
            exc: The exception raised during construction

        Returns:
            Error describing the exception
        """
        metadata: dict[str, object] = {"exception": type(exc).__name__}
        if isinstance(exc, DomainError):
            metadata.update(exc.details)
            description = exc.message
        else:
            description = str(exc) or type(exc).__name__

        if isinstance(exc, ValidationError):
            return cls(
                code="General.Validation",
                description=description,
                kind=ErrorKind.VALIDATION,
                metadata=metadata,
            )
        return cls(
            code="General.Unexpected",
            description=description,
            kind=ErrorKind.UNEXPECTED,
            metadata=metadata,
        )

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"

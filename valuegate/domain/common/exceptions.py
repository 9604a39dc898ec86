"""
Domain layer exceptions.

These exceptions represent domain-level errors raised while a value is
being turned into a domain object. The raising construction path lets them
propagate; the boolean and result paths convert them into their own
"invalid" signal.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when a value violates the invariant of its value object type.

    Example: empty meeting title, negative attendee limit.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class ConstructionError(DomainError):
    """
    Raised when a value object type cannot produce a blank instance.

    Example: a registered factory that returns an instance of the wrong type.
    """

    def __init__(self, type_name: str, reason: str) -> None:
        message = f"Cannot construct {type_name}: {reason}"
        super().__init__(message, {"type": type_name})
        self.type_name = type_name
        self.reason = reason


class BusinessRuleViolationError(DomainError):
    """
    Raised by hosts that turn a rule set report into an exception.

    Rule sets never raise this themselves; see ValidationReport.raise_if_invalid.
    """

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, {"rule": rule})
        self.rule = rule

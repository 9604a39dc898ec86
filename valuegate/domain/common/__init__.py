"""
Domain common module.

Contains base classes for domain modeling:
- ValidatedValueObject: Single-value objects guarded by one validation hook
- Result: Success / Failure union returned by the non-raising entry points
- RuleSet: Declarative business rules for multi-field objects
- Clock: Injectable time source for time-dependent rules
"""

from .clock import Clock, FixedClock, SystemClock, to_utc
from .errors import Error, ErrorKind
from .exceptions import (
    BusinessRuleViolationError,
    ConstructionError,
    DomainError,
    ValidationError,
)
from .result import DONE, Done, Failure, Result, Success
from .rules import Rule, RuleContext, RuleSet, RuleViolation, ValidationReport
from .value_object import ValidatedValueObject, equals, value_hash

__all__ = [
    "DONE",
    "BusinessRuleViolationError",
    "Clock",
    "ConstructionError",
    "Done",
    "DomainError",
    "Error",
    "ErrorKind",
    "Failure",
    "FixedClock",
    "Result",
    "Rule",
    "RuleContext",
    "RuleSet",
    "RuleViolation",
    "Success",
    "SystemClock",
    "ValidatedValueObject",
    "ValidationError",
    "ValidationReport",
    "equals",
    "to_utc",
    "value_hash",
]

"""
Declarative business rules for multi-field domain objects.

A RuleSet is an ordered collection of named rules. Each rule is a predicate
over the candidate object plus a fixed message, optionally guarded by a
precondition. Evaluating a rule set never raises for a failing rule: the
violations come back as data in a ValidationReport.

Example:
    rules = (
        RuleSet[Meeting](clock=SystemClock())
        .rule(
            "too_many_attendees",
            lambda m, ctx: m.attendee_count <= m.max_attendees.value,
            "Too many attendees",
        )
        .rule(
            "completed_meetings_in_the_past",
            lambda m, ctx: to_utc(m.takes_place_when) <= ctx.now,
            "Completed meetings must be in the past",
            when=lambda m: m.already_happened,
        )
    )
    report = rules.validate(meeting)
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Generic, Self, TypeVar

from .clock import Clock, SystemClock, to_utc
from .errors import Error
from .exceptions import BusinessRuleViolationError

T = TypeVar("T")


@dataclass(frozen=True)
class RuleContext:
    """Values shared by every rule in one evaluation pass."""

    now: datetime


@dataclass(frozen=True)
class RuleViolation:
    """A rule whose predicate failed for a candidate."""

    rule: str
    code: str
    message: str

    def to_error(self) -> Error:
        return Error.business_rule(self.code, self.message)


@dataclass(frozen=True)
class Rule(Generic[T]):
    """
    A named predicate with its violation message.

    When ``when`` is set the rule only applies to candidates for which the
    guard holds; for every other candidate it is satisfied.
    """

    name: str
    predicate: Callable[[T, RuleContext], bool]
    message: str
    code: str | None = None
    when: Callable[[T], bool] | None = None

    def applies_to(self, candidate: T) -> bool:
        return self.when is None or bool(self.when(candidate))

    def check(self, candidate: T, context: RuleContext) -> RuleViolation | None:
        if not self.applies_to(candidate):
            return None
        if self.predicate(candidate, context):
            return None
        return RuleViolation(rule=self.name, code=self.code or self.name, message=self.message)


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of evaluating a rule set against one candidate."""

    violations: tuple[RuleViolation, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def messages(self) -> list[str]:
        return [violation.message for violation in self.violations]

    @property
    def errors(self) -> list[Error]:
        return [violation.to_error() for violation in self.violations]

    def raise_if_invalid(self) -> None:
        """
        Raise for hosts that want an exception instead of a report.

        Raises:
            BusinessRuleViolationError: Carrying the first violated rule and
                every violation message
        """
        if self.is_valid:
            return
        first = self.violations[0]
        raise BusinessRuleViolationError(first.rule, "; ".join(self.messages))


class RuleSet(Generic[T]):
    """
    Ordered, named business rules for one kind of candidate.

    Rules are evaluated in registration order. The clock is read exactly
    once per evaluation and normalized to UTC, so every rule in a pass sees
    the same "now".
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()
        self._rules: list[Rule[T]] = []

    def rule(
        self,
        name: str,
        predicate: Callable[[T, RuleContext], bool],
        message: str,
        *,
        code: str | None = None,
        when: Callable[[T], bool] | None = None,
    ) -> Self:
        """
        Register a rule.

        Args:
            name: Unique rule name
            predicate: Returns True when the candidate satisfies the rule
            message: Violation message
            code: Stable error code, defaults to ``name``
            when: Optional guard; the rule is skipped when it returns False

        Returns:
            The rule set, for chaining

        Raises:
            ValueError: If a rule with the same name is already registered
        """
        if any(existing.name == name for existing in self._rules):
            raise ValueError(f"Rule '{name}' is already registered")
        self._rules.append(Rule(name=name, predicate=predicate, message=message, code=code, when=when))
        return self

    @property
    def rules(self) -> tuple[Rule[T], ...]:
        return tuple(self._rules)

    def _context(self) -> RuleContext:
        return RuleContext(now=to_utc(self._clock.now()))

    def validate(self, candidate: T) -> ValidationReport:
        """Evaluate every applicable rule and collect all violations."""
        context = self._context()
        violations = []
        for rule in self._rules:
            violation = rule.check(candidate, context)
            if violation is not None:
                violations.append(violation)
        return ValidationReport(violations=tuple(violations))

    def first_violation(self, candidate: T) -> RuleViolation | None:
        """Evaluate rules in order and stop at the first violation."""
        context = self._context()
        for rule in self._rules:
            violation = rule.check(candidate, context)
            if violation is not None:
                return violation
        return None

    def is_valid(self, candidate: T) -> bool:
        return self.first_violation(candidate) is None

"""Use case for scheduling a meeting from raw input."""

from dataclasses import dataclass
from datetime import datetime

import structlog

from valuegate.application.common.command import Command, CommandHandler
from valuegate.config import get_settings
from valuegate.domain.common.errors import Error
from valuegate.domain.common.result import Failure, Result, Success
from valuegate.domain.meetings.entities import Meeting
from valuegate.domain.meetings.rules import MeetingRules
from valuegate.domain.meetings.value_objects import AttendeeId, AttendeeLimit, MeetingTitle

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ScheduleMeetingCommand(Command):
    """Raw meeting input, as received from a caller."""

    title: str
    max_attendees: int
    takes_place_when: datetime
    attendees_user_ids: list[int] | None = None
    already_happened: bool = False


class ScheduleMeetingUseCase(CommandHandler[ScheduleMeetingCommand, Result[Meeting, list[Error]]]):
    """
    Build a Meeting out of value objects and check the meeting rules.

    Every field is validated before the rules run, and every invalid field
    is reported. Rule violations are only evaluated for meetings whose
    fields are all valid.
    """

    def __init__(self, rules: MeetingRules | None = None, fail_fast: bool | None = None) -> None:
        """
        Initialize use case.

        Args:
            rules: Meeting rule set, defaults to one on the system clock
            fail_fast: Report only the first rule violation; defaults to
                the RULES_FAIL_FAST setting
        """
        self.rules = rules or MeetingRules()
        self.fail_fast = get_settings().RULES_FAIL_FAST if fail_fast is None else fail_fast

    def handle(self, command: ScheduleMeetingCommand) -> Result[Meeting, list[Error]]:
        """
        Schedule a meeting.

        Args:
            command: Raw meeting input

        Returns:
            Success with the meeting, or Failure with every field error
            or every rule violation
        """
        title = MeetingTitle.create_result(command.title)
        limit = AttendeeLimit.create_result(command.max_attendees)
        attendees = [
            AttendeeId.create_result(user_id) for user_id in command.attendees_user_ids or []
        ]

        field_errors = [
            result.unwrap_error() for result in [title, limit, *attendees] if result.is_failure
        ]
        if field_errors:
            logger.info(
                "meeting_rejected",
                stage="fields",
                errors=[error.description for error in field_errors],
            )
            return Failure(field_errors)

        meeting = Meeting(
            title=title.unwrap(),
            max_attendees=limit.unwrap(),
            takes_place_when=command.takes_place_when,
            attendees_user_ids=(
                tuple(result.unwrap() for result in attendees)
                if command.attendees_user_ids is not None
                else None
            ),
            already_happened=command.already_happened,
        )

        rule_errors = self._check_rules(meeting)
        if rule_errors:
            logger.info(
                "meeting_rejected",
                stage="rules",
                title=str(meeting.title),
                errors=[error.code for error in rule_errors],
            )
            return Failure(rule_errors)

        logger.info(
            "meeting_scheduled",
            title=str(meeting.title),
            attendees=meeting.attendee_count,
            already_happened=meeting.already_happened,
        )
        return Success(meeting)

    def _check_rules(self, meeting: Meeting) -> list[Error]:
        if self.fail_fast:
            violation = self.rules.first_violation(meeting)
            return [violation.to_error()] if violation is not None else []
        return self.rules.validate(meeting).errors

"""
Business rules for meetings.

- A meeting cannot have more attendees than its limit
- A meeting that already happened must be scheduled at or before now
"""

from valuegate.domain.common.clock import Clock, to_utc
from valuegate.domain.common.rules import RuleContext, RuleSet
from valuegate.domain.meetings.entities import Meeting
from valuegate.domain.meetings.errors import MeetingErrors

TOO_MANY_ATTENDEES = "too_many_attendees"
COMPLETED_MEETINGS_IN_THE_PAST = "completed_meetings_in_the_past"


def _within_attendee_limit(meeting: Meeting, context: RuleContext) -> bool:
    return meeting.max_attendees.allows(meeting.attendee_count)


def _scheduled_in_the_past(meeting: Meeting, context: RuleContext) -> bool:
    return to_utc(meeting.takes_place_when) <= context.now


def _already_happened(meeting: Meeting) -> bool:
    return meeting.already_happened


class MeetingRules(RuleSet[Meeting]):
    """Rule set every meeting must satisfy."""

    def __init__(self, clock: Clock | None = None) -> None:
        super().__init__(clock)
        self.rule(
            TOO_MANY_ATTENDEES,
            _within_attendee_limit,
            MeetingErrors.TOO_MANY_ATTENDEES.description,
            code=MeetingErrors.TOO_MANY_ATTENDEES.code,
        )
        self.rule(
            COMPLETED_MEETINGS_IN_THE_PAST,
            _scheduled_in_the_past,
            MeetingErrors.COMPLETED_MEETINGS_IN_THE_PAST.description,
            code=MeetingErrors.COMPLETED_MEETINGS_IN_THE_PAST.code,
            when=_already_happened,
        )

"""Value objects for the meetings module."""

from .attendee_limit import AttendeeLimit
from .ids import AttendeeId
from .meeting_title import MeetingTitle

__all__ = [
    "AttendeeId",
    "AttendeeLimit",
    "MeetingTitle",
]

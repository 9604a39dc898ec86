"""Meetings module domain layer."""

from .entities import Meeting
from .errors import MeetingErrors
from .rules import MeetingRules
from .value_objects import AttendeeId, AttendeeLimit, MeetingTitle

__all__ = [
    "AttendeeId",
    "AttendeeLimit",
    "Meeting",
    "MeetingErrors",
    "MeetingRules",
    "MeetingTitle",
]

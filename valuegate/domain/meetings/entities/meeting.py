"""
Meeting record validated by MeetingRules.
"""

from dataclasses import dataclass
from datetime import datetime

from valuegate.domain.meetings.value_objects import AttendeeId, AttendeeLimit, MeetingTitle


@dataclass(frozen=True)
class Meeting:
    """
    A scheduled meeting.

    Each field is already a valid value on its own; cross-field rules
    (attendee count against the limit, "already happened" against the
    schedule) are checked by MeetingRules.
    """

    title: MeetingTitle
    max_attendees: AttendeeLimit
    takes_place_when: datetime
    attendees_user_ids: tuple[AttendeeId, ...] | None = None
    already_happened: bool = False

    @property
    def attendee_count(self) -> int:
        """Number of attendees; an absent list counts as zero."""
        return len(self.attendees_user_ids or ())

    @classmethod
    def create(
        cls,
        title: str,
        max_attendees: int,
        takes_place_when: datetime,
        attendees_user_ids: list[int] | None = None,
        already_happened: bool = False,
    ) -> "Meeting":
        """
        Create a meeting from raw values.

        Raises:
            ValidationError: If any field is not a valid value
        """
        return cls(
            title=MeetingTitle.from_value(title),
            max_attendees=AttendeeLimit.from_value(max_attendees),
            takes_place_when=takes_place_when,
            attendees_user_ids=(
                tuple(AttendeeId.from_value(user_id) for user_id in attendees_user_ids)
                if attendees_user_ids is not None
                else None
            ),
            already_happened=already_happened,
        )

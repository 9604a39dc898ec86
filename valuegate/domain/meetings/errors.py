"""Error catalogue for the meetings module."""

from valuegate.domain.common.errors import Error


class MeetingErrors:
    """Known meeting errors, referenced by code."""

    TOO_MANY_ATTENDEES = Error.business_rule(
        "Meetings.TooManyAttendees",
        "The meeting has more attendees than its maximum allows",
    )
    COMPLETED_MEETINGS_IN_THE_PAST = Error.business_rule(
        "Meetings.CompletedMeetingsInThePast",
        "A meeting that already happened must be scheduled in the past",
    )

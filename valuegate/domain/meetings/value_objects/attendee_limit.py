"""AttendeeLimit value object."""

from valuegate.domain.common.exceptions import ValidationError
from valuegate.domain.common.value_object import ValidatedValueObject

MIN_ATTENDEES = 1
MAX_ATTENDEES = 1000


class AttendeeLimit(ValidatedValueObject[int]):
    """Maximum number of attendees a meeting accepts, between MIN_ATTENDEES and MAX_ATTENDEES."""

    def validate(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                "Attendee limit must be an integer", field="max_attendees", value=self.value
            )
        if not MIN_ATTENDEES <= self.value <= MAX_ATTENDEES:
            raise ValidationError(
                f"Attendee limit must be between {MIN_ATTENDEES} and {MAX_ATTENDEES}",
                field="max_attendees",
                value=self.value,
            )

    def allows(self, count: int) -> bool:
        return count <= self.value

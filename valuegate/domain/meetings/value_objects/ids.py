from valuegate.domain.common.exceptions import ValidationError
from valuegate.domain.common.value_object import ValidatedValueObject


class AttendeeId(ValidatedValueObject[int]):
    """Strongly-typed identifier of a user attending a meeting."""

    def validate(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError("AttendeeId must be an integer", field="attendee_id", value=self.value)
        if self.value <= 0:
            raise ValidationError("AttendeeId must be positive", field="attendee_id", value=self.value)

"""MeetingTitle value object."""

from valuegate.domain.common.exceptions import ValidationError
from valuegate.domain.common.value_object import ValidatedValueObject

MAX_TITLE_LENGTH = 200


class MeetingTitle(ValidatedValueObject[str]):
    """
    Human-readable meeting title.

    Business Rules:
    - Must be a string
    - Cannot be empty or whitespace only
    - At most MAX_TITLE_LENGTH characters
    """

    def validate(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError("Meeting title must be a string", field="title", value=self.value)
        if not self.value.strip():
            raise ValidationError("Meeting title cannot be empty", field="title")
        if len(self.value) > MAX_TITLE_LENGTH:
            raise ValidationError(
                f"Meeting title cannot exceed {MAX_TITLE_LENGTH} characters", field="title"
            )

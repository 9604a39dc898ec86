from .schedule_meeting_use_case import ScheduleMeetingCommand, ScheduleMeetingUseCase

__all__ = ["ScheduleMeetingCommand", "ScheduleMeetingUseCase"]

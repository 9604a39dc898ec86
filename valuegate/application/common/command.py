"""
Command and CommandHandler base classes.

Commands carry raw, unvalidated input into the application layer.
They are named in imperative form: ScheduleMeeting, CancelMeeting, etc.

Example:
    @dataclass(frozen=True)
    class ScheduleMeetingCommand(Command):
        title: str
        max_attendees: int

    class ScheduleMeetingUseCase(CommandHandler[ScheduleMeetingCommand, Result[Meeting, list[Error]]]):
        def handle(self, command: ScheduleMeetingCommand) -> Result[Meeting, list[Error]]:
            ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

# Input type (the command)
TCommand = TypeVar("TCommand", bound="Command")
# Output type (the result of handling the command)
TResult = TypeVar("TResult")


@dataclass(frozen=True)
class Command:
    """
    Base class for Commands.

    Commands are:
    - Immutable (frozen dataclass)
    - Named in imperative form (ScheduleMeeting, not MeetingScheduling)
    - Carry raw values; handlers turn them into value objects
    """


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """
    Base class for Command Handlers.

    Each command should have exactly one handler.
    """

    @abstractmethod
    def handle(self, command: TCommand) -> TResult:
        """Handle the command and return the result."""
        raise NotImplementedError

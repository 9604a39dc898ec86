"""
Application common module.

Contains base classes for application layer:
- Command: Raw input for a use case
- CommandHandler: Handles command execution
"""

from .command import Command, CommandHandler

__all__ = [
    "Command",
    "CommandHandler",
]

"""Validated value objects and declarative business rules."""

__version__ = "0.1.0"

"""
Application layer.

Use cases that turn raw input into validated domain objects and report
every problem found along the way.
"""

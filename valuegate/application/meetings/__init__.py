"""Meetings module application layer."""

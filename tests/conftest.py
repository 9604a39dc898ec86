"""Pytest configuration and fixtures."""

from datetime import UTC, datetime

import pytest

from valuegate.config import get_settings
from valuegate.domain.common.clock import FixedClock
from valuegate.domain.meetings.rules import MeetingRules

NOW = datetime(2024, 5, 17, 12, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def meeting_rules(clock: FixedClock) -> MeetingRules:
    return MeetingRules(clock=clock)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Settings are cached; make every test read the environment afresh."""
    get_settings.cache_clear()

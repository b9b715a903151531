from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
import structlog

JST = timezone(timedelta(hours=9))


@pytest.fixture(scope="session")
def t0() -> datetime:
    return datetime(2026, 1, 15, 9, 0, tzinfo=JST)


@pytest.fixture(scope="session")
def at(t0):
    def _at(hours: float) -> datetime:
        return t0 + timedelta(hours=hours)
    return _at


@pytest.fixture()
def reset_structlog():
    yield
    structlog.reset_defaults()

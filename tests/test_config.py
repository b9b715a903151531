from __future__ import annotations

import pytest
from pydantic import ValidationError

from freeslots.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("FREESLOTS_LOG_LEVEL", "FREESLOTS_LOG_JSON", "FREESLOTS_DATETIME_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.LOG_LEVEL == "INFO"
    assert s.LOG_JSON is False
    assert s.DATETIME_FORMAT == "%Y-%m-%d %H:%M:%S"


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("FREESLOTS_LOG_LEVEL", "debug")
    monkeypatch.setenv("FREESLOTS_LOG_JSON", "true")
    s = Settings(_env_file=None)
    assert s.LOG_LEVEL == "DEBUG"
    assert s.LOG_JSON is True


def test_ignores_host_application_variables(monkeypatch):
    monkeypatch.delenv("FREESLOTS_LOG_LEVEL", raising=False)
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "trace")
    s = Settings(_env_file=None)
    assert s.LOG_LEVEL == "INFO"
    assert not hasattr(s, "APP_ENV")


def test_rejects_unknown_log_level():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, LOG_LEVEL="chatty")


def test_datetime_format_drives_describe(monkeypatch, at):
    from freeslots import Block, describe
    from freeslots.core import config

    monkeypatch.setattr(config.settings, "DATETIME_FORMAT", "%H:%M")
    assert describe(Block(at(0), at(1))) == "start: 09:00, end: 10:00, duration: 1h 0m"

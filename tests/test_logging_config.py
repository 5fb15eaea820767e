"""Tests for root logger configuration."""

import json
import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from id3_tlbx.utils.logging_config import LOG_FORMAT_ENV, configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_plain_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)
    configure_logging(level="DEBUG")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)


def test_json_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_FORMAT_ENV, "JSON")
    configure_logging()
    assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)


def test_argument_overrides_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_FORMAT_ENV, "json")
    configure_logging(force_format="plain")
    assert not isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)


def test_json_records_carry_extra_fields() -> None:
    configure_logging(force_format="json")
    formatter = logging.getLogger().handlers[0].formatter
    record = logging.makeLogRecord(
        {"name": "id3_tlbx.data", "levelname": "INFO", "msg": "Loading CSV table", "csv_path": "weather.csv"},
    )

    payload = json.loads(formatter.format(record))
    assert payload["message"] == "Loading CSV table"
    assert payload["csv_path"] == "weather.csv"


def test_repeated_calls_do_not_stack_handlers() -> None:
    configure_logging()
    configure_logging()
    assert len(logging.getLogger().handlers) == 1


def test_invalid_format() -> None:
    with pytest.raises(ValueError, match="Invalid log format"):
        configure_logging(force_format="xml")

"""Tests for logging setup."""

from __future__ import annotations

import io
import logging

import orjson
import pytest

from idforge.core.config import Settings
from idforge.core.logging import JsonFormatter, configure_logging
from idforge.utils.ids import IdentifierGenerator


def test_json_records_carry_context_fields() -> None:
    stream = io.StringIO()
    configure_logging(Settings(log_level="info", log_json=True), stream=stream)
    logging.getLogger("idforge.test").info("issued %s", "abc", extra={"ctx_prefix": "user"})
    record = orjson.loads(stream.getvalue().strip())
    assert record["level"] == "INFO"
    assert record["logger"] == "idforge.test"
    assert record["msg"] == "issued abc"
    assert record["context"] == {"prefix": "user"}
    assert isinstance(record["ts_ms"], int)


def test_plain_text_format_respects_level() -> None:
    stream = io.StringIO()
    configure_logging(Settings(log_level="WARNING", log_json=False), stream=stream)
    logging.getLogger("idforge.test").info("hidden")
    logging.getLogger("idforge.test").warning("careful")
    assert "hidden" not in stream.getvalue()
    assert "WARNING idforge.test: careful" in stream.getvalue()


def test_defaults_to_cached_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IDF_LOG_LEVEL", "debug")
    monkeypatch.setenv("IDF_LOG_JSON", "false")
    configure_logging(stream=io.StringIO())
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)


class _FailingSource:
    def token_bytes(self, nbytes: int) -> bytes:
        raise OSError("no entropy")


def test_random_source_failure_is_logged_with_context() -> None:
    stream = io.StringIO()
    configure_logging(Settings(log_json=True), stream=stream)
    with pytest.raises(OSError):
        IdentifierGenerator(random_source=_FailingSource()).short()
    record = orjson.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["level"] == "ERROR"
    assert record["context"] == {"nbytes": 6, "source": "_FailingSource"}
    assert "no entropy" in record["exc_info"]

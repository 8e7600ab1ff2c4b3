"""Logging setup for idforge, driven by ``Settings``."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import orjson

from idforge.core.config import Settings, get_settings

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``ctx_*`` extras are copied through without the prefix."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_ms": int(record.created * 1000),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        context = {
            key[len("ctx_") :]: value
            for key, value in record.__dict__.items()
            if key.startswith("ctx_")
        }
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str).decode("utf-8")


def configure_logging(settings: Settings | None = None, stream: TextIO | None = None) -> None:
    """Install a single root handler using the configured level and format.

    Output goes to stderr unless ``stream`` is given, so identifiers printed on
    stdout stay clean.
    """
    settings = settings or get_settings()
    logging.captureWarnings(True)
    root = logging.getLogger()
    root.setLevel(settings.log_level)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter() if settings.log_json else logging.Formatter(PLAIN_FORMAT))
    root.handlers = [handler]


__all__ = ["JsonFormatter", "configure_logging"]

"""Test fixtures for idforge."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))


@pytest.fixture(autouse=True)
def reset_state(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset cached settings, logging and environment between tests."""
    monkeypatch.setenv("IDF_CONFIG", str(tmp_path / "missing.yaml"))
    for key in ("IDF_LOG_LEVEL", "IDF_LOG_JSON", "IDF_DEFAULT_PREFIX", "IDF_DEFAULT_COUNT"):
        monkeypatch.delenv(key, raising=False)

    from idforge.core.config import get_settings

    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    root.handlers = saved_handlers
    root.setLevel(saved_level)



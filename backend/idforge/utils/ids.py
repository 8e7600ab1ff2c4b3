"""ID helpers.

Module-level ``generate``, ``short``, ``uuid``, ``timestamp`` and ``token``
are bound to a shared :class:`IdentifierGenerator` backed by the OS CSPRNG
and the system clock. Build your own generator to inject other sources.
"""

from __future__ import annotations

import logging
from uuid import UUID

from idforge.utils.encoding import to_hex
from idforge.utils.random_source import RandomSource, SecureRandomSource
from idforge.utils.time import Clock, SystemClock

logger = logging.getLogger(__name__)

GENERATE_BYTES = 12
SHORT_BYTES = 6
UUID_BYTES = 16
TIMESTAMP_SUFFIX_BYTES = 4


class IdentifierGenerator:
    """Random and time-derived string identifiers."""

    def __init__(
        self,
        random_source: RandomSource | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.random_source = SecureRandomSource() if random_source is None else random_source
        self.clock = SystemClock() if clock is None else clock

    def token(self, nbytes: int, prefix: str = "") -> str:
        """Return ``nbytes`` random bytes as hex, joined to ``prefix`` with ``_`` if given."""
        if nbytes < 1:
            raise ValueError("nbytes must be at least 1")
        value = to_hex(self._random_bytes(nbytes))
        return f"{prefix}_{value}" if prefix else value

    def generate(self, prefix: str = "") -> str:
        """24 hex chars, optionally as ``<prefix>_<hex>``."""
        return self.token(GENERATE_BYTES, prefix)

    def short(self) -> str:
        """12 hex chars. Meant for human-facing codes, not secrets."""
        return self.token(SHORT_BYTES)

    def uuid(self) -> str:
        """Canonical version-4 UUID drawn from the same random source."""
        return str(UUID(bytes=self._random_bytes(UUID_BYTES), version=4))

    def timestamp(self) -> str:
        """``<epoch millis>-<hex8>``; sorts by time, suffix breaks same-ms ties."""
        millis = self.clock.now_ms()
        suffix = to_hex(self._random_bytes(TIMESTAMP_SUFFIX_BYTES))
        return f"{millis}-{suffix}"

    def _random_bytes(self, nbytes: int) -> bytes:
        try:
            return self.random_source.token_bytes(nbytes)
        except Exception:
            logger.exception(
                "Random source failed while drawing %s bytes",
                nbytes,
                extra={"ctx_nbytes": nbytes, "ctx_source": type(self.random_source).__name__},
            )
            raise


_DEFAULT = IdentifierGenerator()


def get_generator() -> IdentifierGenerator:
    """Return the process-wide default generator."""
    return _DEFAULT


def token(nbytes: int, prefix: str = "") -> str:
    """Random hex token of ``nbytes`` bytes with optional prefix."""
    return _DEFAULT.token(nbytes, prefix)


def generate(prefix: str = "") -> str:
    """Generate a 24-char random hex ID with optional prefix."""
    return _DEFAULT.generate(prefix)


def short() -> str:
    """Generate a 12-char random hex code."""
    return _DEFAULT.short()


def uuid() -> str:
    """Generate a version-4 UUID string."""
    return _DEFAULT.uuid()


def timestamp() -> str:
    """Generate a ``<epoch millis>-<hex8>`` identifier."""
    return _DEFAULT.timestamp()


__all__ = [
    "IdentifierGenerator",
    "get_generator",
    "generate",
    "short",
    "uuid",
    "timestamp",
    "token",
]

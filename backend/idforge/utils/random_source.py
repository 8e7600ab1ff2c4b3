"""Random byte sources used by the identifier generator."""

from __future__ import annotations

import random
import secrets
import threading
from typing import Protocol


class RandomSource(Protocol):
    def token_bytes(self, nbytes: int) -> bytes:
        ...


class SecureRandomSource:
    """OS-backed CSPRNG. Errors from the platform propagate to the caller."""

    def token_bytes(self, nbytes: int) -> bytes:
        return secrets.token_bytes(nbytes)


class DeterministicRandomSource:
    """Seeded, reproducible byte source for tests. Not cryptographically secure."""

    def __init__(self, seed: int | str | bytes = 0) -> None:
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def token_bytes(self, nbytes: int) -> bytes:
        with self._lock:
            return self._rng.randbytes(nbytes)


__all__ = ["RandomSource", "SecureRandomSource", "DeterministicRandomSource"]

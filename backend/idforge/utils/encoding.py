"""Encoding utilities."""

from __future__ import annotations


def to_hex(data: bytes) -> str:
    """Return lowercase hex for bytes input."""
    return data.hex()

"""Fingerprint helpers for naming log records."""

from __future__ import annotations

from blake3 import blake3

FINGERPRINT_LENGTH = 6


def fingerprint(project: str, timestamp: str, log: bytes | str) -> str:
    """Return the short hex fingerprint of a record.

    The BLAKE3 digest covers project, timestamp and log body in that order
    with no separators, and is truncated to ``FINGERPRINT_LENGTH`` hex
    characters. The result is a lookup key, not a unique identifier.
    """
    hasher = blake3()
    hasher.update(project.encode("utf-8"))
    hasher.update(timestamp.encode("utf-8"))
    hasher.update(log.encode("utf-8") if isinstance(log, str) else log)
    return hasher.hexdigest()[:FINGERPRINT_LENGTH]


__all__ = ["FINGERPRINT_LENGTH", "fingerprint"]

"""Resolve partial fingerprints to stored log records."""

from __future__ import annotations

import logging
from typing import Protocol

from persistence.errors import RecordNotFoundError
from persistence.models import LogRecord

logger = logging.getLogger(__name__)


class PrefixLookup(Protocol):
    def find_by_prefix(self, prefix: str) -> list[LogRecord]: ...


class PrefixResolver:
    """Pick one record for a hash prefix.

    Fingerprints are truncated and may collide, so when several records match
    the most recently inserted one (highest id) wins.
    """

    def __init__(self, store: PrefixLookup) -> None:
        self._store = store

    def resolve(self, prefix: str) -> LogRecord | None:
        if not prefix:
            raise ValueError("hash prefix must not be empty")
        matches = self._store.find_by_prefix(prefix)
        if not matches:
            return None
        if len(matches) > 1:
            logger.warning(
                "Hash prefix '%s' matches %d logs; using the most recent (id %d)",
                prefix,
                len(matches),
                max(record.id for record in matches),
            )
        return max(matches, key=lambda record: record.id)

    def resolve_or_raise(self, prefix: str) -> LogRecord:
        record = self.resolve(prefix)
        if record is None:
            raise RecordNotFoundError(prefix)
        return record


__all__ = ["PrefixLookup", "PrefixResolver"]

"""Lightweight persistence records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LogRecord:
    id: int
    hash: str
    project: str
    timestamp: str
    tags: str
    log: str

    @property
    def tag_list(self) -> list[str]:
        if not self.tags:
            return []
        return self.tags.split(",")


__all__ = ["LogRecord"]

"""SQLite-backed store for captured build logs."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Iterator

from persistence.errors import StorageError
from persistence.hashing import fingerprint
from persistence.models import LogRecord

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS logs (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    hash TEXT NOT NULL,
    project TEXT NOT NULL,
    timestamp TEXT NOT NULL,
    tags TEXT,
    log TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_logs_hash ON logs(hash);
"""

_COLUMNS = "id, hash, project, timestamp, tags, log"


class SqliteLogStore:
    def __init__(
        self,
        path: str | Path,
        *,
        timeout: float = 5.0,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._path = Path(path)
        self._timeout = timeout
        self._clock = clock or datetime.now
        self.initialize_schema()

    @property
    def path(self) -> Path:
        return self._path

    def initialize_schema(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(
                f"Cannot create data directory {self._path.parent}", path=self._path
            ) from exc
        with self._connect() as conn:
            conn.executescript(_SCHEMA)

    def insert(self, project: str, tags: Iterable[str], log: str) -> int:
        return self.insert_record(project, tags, log).id

    def insert_record(self, project: str, tags: Iterable[str], log: str) -> LogRecord:
        if not project:
            raise ValueError("project must be a non-empty string")
        timestamp = self._clock().strftime(TIMESTAMP_FORMAT)
        tags_csv = join_tags(tags)
        log_hash = fingerprint(project, timestamp, log)
        with self._connect() as conn:
            cur = conn.execute(
                "INSERT INTO logs (hash, project, timestamp, tags, log) VALUES (?, ?, ?, ?, ?)",
                (log_hash, project, timestamp, tags_csv, log),
            )
            record_id = cur.lastrowid
        logger.debug("Inserted log %s for project %s as id %s", log_hash, project, record_id)
        return LogRecord(
            id=record_id,
            hash=log_hash,
            project=project,
            timestamp=timestamp,
            tags=tags_csv,
            log=log,
        )

    def get(self, record_id: int) -> LogRecord | None:
        row = self._fetch_one(f"SELECT {_COLUMNS} FROM logs WHERE id = ?", (record_id,))
        return _row_to_record(row) if row else None

    def latest(self) -> LogRecord | None:
        row = self._fetch_one(f"SELECT {_COLUMNS} FROM logs ORDER BY id DESC LIMIT 1")
        return _row_to_record(row) if row else None

    def list_recent(self, limit: int) -> list[LogRecord]:
        if limit < 1:
            raise ValueError("limit must be >= 1")
        rows = self._fetch_all(
            f"""
            SELECT {_COLUMNS} FROM logs
             ORDER BY timestamp DESC, id DESC
             LIMIT ?
            """,
            (limit,),
        )
        return [_row_to_record(row) for row in rows]

    def find_by_prefix(self, prefix: str) -> list[LogRecord]:
        # substr keeps the match case-sensitive and free of LIKE wildcards.
        rows = self._fetch_all(
            f"""
            SELECT {_COLUMNS} FROM logs
             WHERE substr(hash, 1, ?) = ?
             ORDER BY id DESC
            """,
            (len(prefix), prefix),
        )
        return [_row_to_record(row) for row in rows]

    def count(self) -> int:
        row = self._fetch_one("SELECT COUNT(*) AS count FROM logs")
        return int(row["count"]) if row else 0

    def delete_all(self) -> int:
        with self._connect() as conn:
            removed = conn.execute("DELETE FROM logs").rowcount
        logger.debug("Deleted %d logs from %s", removed, self._path)
        return removed

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = sqlite3.connect(self._path, timeout=self._timeout)
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot open database: {exc}", path=self._path) from exc
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        except sqlite3.Error as exc:
            raise StorageError(f"Database operation failed: {exc}", path=self._path) from exc
        finally:
            conn.close()

    def _fetch_one(self, query: str, params: tuple[object, ...] = ()) -> sqlite3.Row | None:
        with self._connect() as conn:
            cur = conn.execute(query, params)
            return cur.fetchone()

    def _fetch_all(self, query: str, params: tuple[object, ...] = ()) -> list[sqlite3.Row]:
        with self._connect() as conn:
            cur = conn.execute(query, params)
            return cur.fetchall()


def join_tags(tags: Iterable[str]) -> str:
    cleaned = [tag.strip() for tag in tags]
    return ",".join(tag for tag in cleaned if tag)


def _row_to_record(row: sqlite3.Row) -> LogRecord:
    return LogRecord(
        id=row["id"],
        hash=row["hash"],
        project=row["project"],
        timestamp=row["timestamp"],
        tags=row["tags"] or "",
        log=row["log"],
    )


__all__ = ["SqliteLogStore", "TIMESTAMP_FORMAT", "join_tags"]

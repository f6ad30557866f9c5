"""Persistence subsystem exports."""

from persistence.errors import ExportError, RecordNotFoundError, StorageError, TrazaError
from persistence.exporter import export_record
from persistence.hashing import fingerprint
from persistence.models import LogRecord
from persistence.resolver import PrefixResolver
from persistence.sqlite_store import SqliteLogStore

__all__ = [
    "ExportError",
    "LogRecord",
    "PrefixResolver",
    "RecordNotFoundError",
    "SqliteLogStore",
    "StorageError",
    "TrazaError",
    "export_record",
    "fingerprint",
]

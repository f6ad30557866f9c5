"""Error taxonomy for the log record store."""

from __future__ import annotations

from pathlib import Path


class TrazaError(Exception):
    pass


class StorageError(TrazaError):
    """The backing SQLite database could not be opened, read or written."""

    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        base = super().__str__()
        if self.path is None:
            return base
        return f"{base} (database: {self.path})"


class RecordNotFoundError(TrazaError, LookupError):
    def __init__(self, prefix: str) -> None:
        super().__init__(f"No log found with hash starting with '{prefix}'")
        self.prefix = prefix


class ExportError(TrazaError, OSError):
    """Writing an export or viewer file failed."""

    def __init__(self, message: str, *, path: str | Path) -> None:
        super().__init__(message)
        self.path = Path(path)

    def __str__(self) -> str:
        return f"{self.args[0]}: {self.path}"


__all__ = ["ExportError", "RecordNotFoundError", "StorageError", "TrazaError"]

# subtlex/DB/api.py
from __future__ import annotations
import os
from typing import Protocol, Iterator, Optional

from ..models import Record
from .scanner import Deadline


class CorpusStore(Protocol):
    path: str
    indexed: bool   # True when find() does not scan

    # Sequential access, corpus order, header excluded
    def iter_forms(self, deadline: Optional[Deadline] = None) -> Iterator[str]: ...
    def iter_records(self, deadline: Optional[Deadline] = None) -> Iterator[Record]: ...
    # Exact match on the case-folded surface form; first match wins
    def find(self, key: str, deadline: Optional[Deadline] = None) -> Optional[Record]: ...
    def count(self, deadline: Optional[Deadline] = None) -> int: ...
    # lifecycle
    def close(self) -> None: ...


def make_store(dsn: str, path: str | os.PathLike) -> CorpusStore:
    """
    Factory:
      - scan://          -> FileStore (re-reads the CSV on every query)
      - memory://        -> MemoryStore (CSV loaded once, dict index for lookups)
      - sqlite:///cache  -> SQLiteStore (CSV imported into an indexed SQLite file)
    """
    if dsn.startswith("scan://"):
        from .file_store import FileStore
        return FileStore(path)

    if dsn.startswith("memory://"):
        from .memory_store import MemoryStore
        return MemoryStore.from_file(path)

    if dsn.startswith("sqlite:///"):
        from .sqlite_store import SQLiteStore
        db_path = dsn.removeprefix("sqlite:///")
        if not db_path:
            raise ValueError("sqlite DSN needs a database path, e.g. sqlite:///./subtlex.sqlite")
        return SQLiteStore(db_path, source=path)

    raise ValueError(f"Unsupported store DSN: {dsn}")

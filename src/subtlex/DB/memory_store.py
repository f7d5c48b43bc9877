# subtlex/DB/memory_store.py
from __future__ import annotations
import os
import logging
from typing import Dict, Iterable, Iterator, List, Optional

from ..models import Record
from ..normalize import fold
from .scanner import CorpusScanner, Deadline, checked

log = logging.getLogger(__name__)


class MemoryStore:
    """
    Records held in a list (corpus order) plus a dict index for exact lookups.
    Same answers as FileStore; the file is read once, so later changes to it
    are not seen.
    """

    indexed = True

    def __init__(self, records: Iterable[Record], path: str = "<memory>") -> None:
        self.path = path
        self._rows: List[Record] = list(records)
        self._by_key: Dict[str, Record] = {}
        for r in self._rows:
            # first match wins, like a scan that stops at the first hit
            self._by_key.setdefault(fold(r.surface_form), r)

    @classmethod
    def from_file(cls, path: str | os.PathLike) -> "MemoryStore":
        scanner = CorpusScanner(path)
        store = cls(scanner.iter_records(), path=scanner.path)
        log.info("Loaded %d records into memory from %s", len(store._rows), scanner.path)
        return store

    def iter_forms(self, deadline: Optional[Deadline] = None) -> Iterator[str]:
        return (r.surface_form for r in checked(self._rows, deadline))

    def iter_records(self, deadline: Optional[Deadline] = None) -> Iterator[Record]:
        return checked(self._rows, deadline)

    def find(self, key: str, deadline: Optional[Deadline] = None) -> Optional[Record]:
        return self._by_key.get(key)

    def count(self, deadline: Optional[Deadline] = None) -> int:
        return len(self._rows)

    def close(self) -> None:
        self._rows.clear()
        self._by_key.clear()

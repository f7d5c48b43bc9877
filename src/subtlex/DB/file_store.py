# subtlex/DB/file_store.py
from __future__ import annotations
import os
from contextlib import closing
from typing import Iterator, Optional

from ..models import Record
from ..normalize import fold
from ..loader import parse_record, first_field
from .scanner import CorpusScanner, Deadline


class FileStore:
    """No index at all: every call is a fresh sequential scan of the file."""

    indexed = False

    def __init__(self, path: str | os.PathLike) -> None:
        self._scanner = CorpusScanner(path)
        self.path = self._scanner.path

    def iter_forms(self, deadline: Optional[Deadline] = None) -> Iterator[str]:
        return self._scanner.iter_forms(deadline)

    def iter_records(self, deadline: Optional[Deadline] = None) -> Iterator[Record]:
        return self._scanner.iter_records(deadline)

    def find(self, key: str, deadline: Optional[Deadline] = None) -> Optional[Record]:
        # compare on the first field and only split the row that matches
        with closing(self._scanner.iter_lines(deadline)) as lines:
            for line_no, line in lines:
                if fold(first_field(line)) == key:
                    return parse_record(line, line_no)
        return None

    def count(self, deadline: Optional[Deadline] = None) -> int:
        return sum(1 for _ in self._scanner.iter_lines(deadline))

    def close(self) -> None:
        pass

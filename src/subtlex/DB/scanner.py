# subtlex/DB/scanner.py
from __future__ import annotations
import os
import time
import logging
from typing import Iterable, Iterator, Optional, Tuple, TypeVar

from ..models import Record
from ..loader import first_field, parse_record
from .. import config as CFG

log = logging.getLogger(__name__)

T = TypeVar("T")


class ScanTimeout(TimeoutError):
    """A corpus scan ran past its deadline."""


class Deadline:
    """Wall-clock budget shared by every scan of one query."""

    def __init__(self, seconds: Optional[float] = None) -> None:
        if seconds is not None and seconds <= 0:
            raise ValueError("scan timeout must be positive")
        self.seconds = seconds
        self._expires = None if seconds is None else time.monotonic() + seconds

    def expired(self) -> bool:
        return self._expires is not None and time.monotonic() >= self._expires

    def check(self) -> None:
        if self.expired():
            raise ScanTimeout(f"corpus scan exceeded {self.seconds}s")


def checked(items: Iterable[T], deadline: Optional[Deadline]) -> Iterator[T]:
    """Re-yield items, checking the deadline every DEADLINE_CHECK_EVERY items."""
    if deadline is None or deadline.seconds is None:
        yield from items
        return
    every = CFG.DEADLINE_CHECK_EVERY
    deadline.check()
    for i, item in enumerate(items, 1):
        if i % every == 0:
            deadline.check()
        yield item


class CorpusScanner:
    """
    Sequential reader over the corpus file.

    Each iter_* call opens its own handle, skips the header line and closes the
    file when the generator is exhausted or closed, so callers may stop early
    (break / return) without leaking handles.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = os.fspath(path)

    # /* ~~~ (line_no, raw line) for every data row; line_no is 1-based like the file ~~~ */
    def iter_lines(self, deadline: Optional[Deadline] = None) -> Iterator[Tuple[int, str]]:
        if deadline is not None:
            deadline.check()
        with open(self.path, "r", encoding=CFG.ENCODING, errors="replace") as f:
            rows = 0
            for line_no, line in enumerate(f, 1):
                if line_no == 1:
                    continue  # column headings
                if not first_field(line).strip():
                    continue  # blank line or row without a word
                rows += 1
                if deadline is not None and rows % CFG.DEADLINE_CHECK_EVERY == 0:
                    deadline.check()
                if CFG.VERBOSE and rows % CFG.PROGRESS_EVERY_ROWS == 0:
                    print(f"[scanned] rows={rows:,}")
                yield line_no, line
        log.debug("scan of %s finished after %d rows", self.path, rows)

    def iter_forms(self, deadline: Optional[Deadline] = None) -> Iterator[str]:
        for _, line in self.iter_lines(deadline):
            yield first_field(line)

    def iter_records(self, deadline: Optional[Deadline] = None) -> Iterator[Record]:
        for line_no, line in self.iter_lines(deadline):
            yield parse_record(line, line_no)

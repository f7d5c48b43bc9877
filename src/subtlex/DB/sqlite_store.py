# subtlex/DB/sqlite_store.py
from __future__ import annotations
import os
import sqlite3
import logging
from typing import Iterator, Optional

from ..models import Record
from ..normalize import fold
from ..loader import parse_record, first_field
from .scanner import CorpusScanner, Deadline, checked

log = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS records (
  line_no INTEGER PRIMARY KEY,
  word TEXT NOT NULL,
  word_key TEXT NOT NULL,
  raw TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS records_word_key ON records(word_key, line_no);
CREATE TABLE IF NOT EXISTS meta (
  k TEXT PRIMARY KEY,
  v TEXT NOT NULL
);
"""


def _signature(path: str) -> str:
    st = os.stat(path)
    return f"{os.path.abspath(path)}|{st.st_size}|{st.st_mtime_ns}"


class SQLiteStore:
    """
    The CSV imported into a SQLite file with an index on the case-folded word.
    The import is redone whenever the source file's path/size/mtime changes.
    """

    indexed = True

    def __init__(self, db_path: str, *, source: str | os.PathLike) -> None:
        self.path = os.fspath(source)
        self.db_path = os.path.abspath(db_path)
        os.makedirs(os.path.dirname(self.db_path) or ".", exist_ok=True)
        # Flask serves requests from several threads; the store is read-only after import
        self.conn = sqlite3.connect(self.db_path, check_same_thread=False)
        self.conn.executescript(_SCHEMA)
        self._sync()

    # ---- import ----
    def _sync(self) -> None:
        sig = _signature(self.path)
        row = self.conn.execute("SELECT v FROM meta WHERE k='source'").fetchone()
        if row and row[0] == sig:
            log.info("SQLite store %s is current", self.db_path)
            return
        log.info("Importing %s into %s", self.path, self.db_path)
        scanner = CorpusScanner(self.path)
        rows = (
            (line_no, first_field(line), fold(first_field(line)), line.rstrip("\r\n"))
            for line_no, line in scanner.iter_lines()
        )
        with self.conn:
            self.conn.execute("DELETE FROM records")
            self.conn.executemany(
                "INSERT INTO records(line_no, word, word_key, raw) VALUES (?,?,?,?)", rows
            )
            self.conn.execute("INSERT OR REPLACE INTO meta(k, v) VALUES ('source', ?)", (sig,))
        log.info("Imported %d records", self.count())

    # ---- read ----
    def iter_forms(self, deadline: Optional[Deadline] = None) -> Iterator[str]:
        cur = self.conn.execute("SELECT word FROM records ORDER BY line_no")
        return (w for (w,) in checked(cur, deadline))

    def iter_records(self, deadline: Optional[Deadline] = None) -> Iterator[Record]:
        cur = self.conn.execute("SELECT line_no, raw FROM records ORDER BY line_no")
        return (parse_record(raw, n) for n, raw in checked(cur, deadline))

    def find(self, key: str, deadline: Optional[Deadline] = None) -> Optional[Record]:
        row = self.conn.execute(
            "SELECT line_no, raw FROM records WHERE word_key=? ORDER BY line_no LIMIT 1", (key,)
        ).fetchone()
        return parse_record(row[1], row[0]) if row else None

    def count(self, deadline: Optional[Deadline] = None) -> int:
        return self.conn.execute("SELECT COUNT(*) FROM records").fetchone()[0]

    # ---- lifecycle ----
    def close(self) -> None:
        self.conn.close()

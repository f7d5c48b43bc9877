from __future__ import annotations
from contextlib import closing
from typing import Dict, Iterable, Optional

from .models import Record, check_scale
from .normalize import fold
from .DB.api import CorpusStore
from .DB.scanner import Deadline


def find_record(store: CorpusStore, word: str,
                deadline: Optional[Deadline] = None) -> Optional[Record]:
    """First record whose surface form equals `word`, ignoring case."""
    return store.find(fold(word), deadline)


def exists(store: CorpusStore, word: str, deadline: Optional[Deadline] = None) -> bool:
    return find_record(store, word, deadline) is not None


def frequency(store: CorpusStore, word: str, scale: str = "raw",
              deadline: Optional[Deadline] = None) -> Optional[float]:
    """Value of `word` on `scale` ("raw" per million, "log" or "zipf"); None if absent."""
    check_scale(scale)
    rec = find_record(store, word, deadline)
    return rec.value(scale) if rec is not None else None


def part_of_speech(store: CorpusStore, word: str,
                   deadline: Optional[Deadline] = None) -> Optional[str]:
    rec = find_record(store, word, deadline)
    return rec.part_of_speech if rec is not None else None


def frequencies(store: CorpusStore, words: Iterable[str], scale: str = "raw",
                deadline: Optional[Deadline] = None) -> Dict[str, Optional[float]]:
    """
    Values for many words at once, keyed by the caller's strings.

    Indexed stores answer each word directly. A scanning store gets one pass:
    the wanted keys are collected first, the first row matching each key fills
    it, and the scan stops once every key is filled.
    """
    check_scale(scale)
    words = list(words)
    if getattr(store, "indexed", False):
        return {w: frequency(store, w, scale, deadline) for w in words}

    wanted: Dict[str, Optional[Record]] = {fold(w): None for w in words}
    pending = len(wanted)
    if pending:
        with closing(store.iter_records(deadline)) as records:
            for rec in records:
                key = fold(rec.surface_form)
                if key in wanted and wanted[key] is None:
                    wanted[key] = rec
                    pending -= 1
                    if pending == 0:
                        break
    out: Dict[str, Optional[float]] = {}
    for w in words:
        rec = wanted[fold(w)]
        out[w] = rec.value(scale) if rec is not None else None
    return out

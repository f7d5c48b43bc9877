"""
Orthographic neighbourhood measures computed by scanning the whole corpus.

Nothing is precomputed: every call walks the store once, so expect each call
to cost O(corpus_size x word_length).
"""
from __future__ import annotations
import bisect
import logging
from typing import List, Optional, Tuple

from .DB.api import CorpusStore
from .DB.scanner import Deadline
from .models import check_scale
from .normalize import fold
from .orthon import are_neighbors, edit_distance
from . import config as CFG

log = logging.getLogger(__name__)


def neighbor_count_and_list(store: CorpusStore, query: str,
                            deadline: Optional[Deadline] = None) -> Tuple[int, List[str]]:
    """Coltheart N of `query` and its neighbours (lower-cased, corpus order)."""
    word = fold(query)
    found: List[str] = []
    for form in store.iter_forms(deadline):
        test = fold(form)
        if are_neighbors(word, test):
            found.append(test)
    log.debug("neighbours of %r: %d", query, len(found))
    return len(found), found


def neighbor_count(store: CorpusStore, query: str,
                   deadline: Optional[Deadline] = None) -> int:
    return neighbor_count_and_list(store, query, deadline)[0]


def neighbor_field_values(store: CorpusStore, query: str, scale: str = "raw",
                          deadline: Optional[Deadline] = None) -> List[float]:
    """
    Frequency values (on `scale`) of each neighbour, corpus order.
    An empty list means no neighbours; rows with no value on that scale are skipped.
    """
    check_scale(scale)
    word = fold(query)
    values: List[float] = []
    for rec in store.iter_records(deadline):
        if are_neighbors(word, fold(rec.surface_form)):
            v = rec.value(scale)
            if v is not None:
                values.append(v)
    return values


def mean_distance_to_closest(store: CorpusStore, query: str,
                             limit: int = CFG.DEFAULT_LDIST_LIMIT,
                             deadline: Optional[Deadline] = None) -> Optional[float]:
    """
    Mean Levenshtein distance from `query` to its `limit` closest corpus words
    (any length). None when the corpus yields no rows at all.
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    word = fold(query)
    closest: List[int] = []   # sorted ascending, never longer than limit
    for form in store.iter_forms(deadline):
        d = edit_distance(word, fold(form))
        if len(closest) < limit:
            bisect.insort(closest, d)
        elif d < closest[-1]:
            closest.pop()
            bisect.insort(closest, d)
    if not closest:
        return None
    return sum(closest) / len(closest)

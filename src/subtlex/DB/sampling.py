# subtlex/DB/sampling.py
from __future__ import annotations
import random
from typing import Iterable, Optional, TypeVar

from ..models import Record
from .api import CorpusStore
from .scanner import Deadline

T = TypeVar("T")


def reservoir_pick(items: Iterable[T], rng: random.Random) -> Optional[T]:
    """Uniformly pick one item from a stream of unknown length (reservoir of size 1)."""
    chosen: Optional[T] = None
    for n, item in enumerate(items, 1):
        if rng.randrange(n) == 0:
            chosen = item
    return chosen


def random_record(store: CorpusStore, rng: Optional[random.Random] = None,
                  deadline: Optional[Deadline] = None) -> Record:
    rec = reservoir_pick(store.iter_records(deadline), rng or random.Random())
    if rec is None:
        raise LookupError(f"corpus {store.path} has no records to sample")
    return rec

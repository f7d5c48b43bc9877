# subtlex/engine.py
from __future__ import annotations

import os
import random
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from . import config as CFG
from . import lookup, neighborhood, search, stats
from .loader import resolve_corpus_path
from .models import Bound, FilterSpec, Record, check_scale
from .normalize import require_string, require_strings
from .DB.api import CorpusStore, make_store
from .DB.sampling import random_record
from .DB.scanner import Deadline

log = logging.getLogger(__name__)


class Norms:
    """
    Handle on one SUBTLEX-style frequency file.

    Glues together:
      - path resolution (data_dir/filename, checked at construction),
      - a CorpusStore ("scan://" per-query file scans, "memory://" or "sqlite:///path"),
      - the lookup, neighbourhood and filter functions.

    Every query validates its arguments before touching the corpus and runs
    under an optional per-call deadline (`scan_timeout` seconds).
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        data_dir: Optional[str | os.PathLike] = None,
        *,
        filename: Optional[str] = None,
        store: Optional[str] = None,            # "scan://" (default), "memory://", "sqlite:///x.sqlite"
        scan_timeout: Optional[float] = None,
        seed: Optional[int] = None,             # for random_word()/random_record()
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
        if scan_timeout is not None and scan_timeout <= 0:
            raise ValueError("scan_timeout must be positive")

        self.path = resolve_corpus_path(data_dir, filename)
        dsn = store or f"{CFG.DEFAULT_STORE}://"
        log.info("Initializing corpus store: %s", dsn)
        self._store: Optional[CorpusStore] = make_store(dsn, self.path)
        self.scan_timeout = scan_timeout
        self._rng = random.Random(seed)

    def close(self) -> None:
        try:
            if self._store:
                self._store.close()
        finally:
            self._store = None
            log.info("Norms handle closed")

    def __enter__(self) -> "Norms":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ------------- single words -------------

    def exists(self, string: str) -> bool:
        """Is `string` one of the corpus words (case-insensitive)?"""
        return lookup.exists(self.store, require_string(string), self._deadline())

    def frequency(self, string: str, scale: str = "raw") -> Optional[float]:
        """Frequency per million ("raw"), log frequency ("log") or Zipf ("zipf"); None if absent."""
        require_string(string)
        check_scale(scale)
        return lookup.frequency(self.store, string, scale, self._deadline())

    def log_frequency(self, string: str) -> Optional[float]:
        return self.frequency(string, "log")

    def zipf(self, string: str) -> Optional[float]:
        return self.frequency(string, "zipf")

    def part_of_speech(self, string: str) -> Optional[str]:
        return lookup.part_of_speech(self.store, require_string(string), self._deadline())

    # ------------- word lists -------------

    def frequencies(self, strings: Iterable[str], scale: str = "raw") -> Dict[str, Optional[float]]:
        """{word: value} for every given word, from a single corpus pass."""
        words = require_strings(strings)
        check_scale(scale)
        return lookup.frequencies(self.store, words, scale, self._deadline())

    def mean_frequency(self, strings: Iterable[str], scale: str = "raw") -> Optional[float]:
        return stats.mean_or_none(self.frequencies(strings, scale).values())

    def median_frequency(self, strings: Iterable[str], scale: str = "raw") -> Optional[float]:
        return stats.median_or_none(self.frequencies(strings, scale).values())

    def sd_frequency(self, strings: Iterable[str], scale: str = "raw") -> Optional[float]:
        return stats.stdev_or_none(self.frequencies(strings, scale).values())

    # ------------- orthographic neighbourhood -------------

    def neighbors(self, string: str) -> Tuple[int, List[str]]:
        """(Coltheart N, neighbours in corpus order)."""
        return neighborhood.neighbor_count_and_list(self.store, require_string(string), self._deadline())

    def neighbor_count(self, string: str) -> int:
        return self.neighbors(string)[0]

    def neighbor_frequency_max(self, string: str) -> Optional[float]:
        return stats.max_or_none(self._neighbor_values(string, "raw"))

    def neighbor_frequency_mean(self, string: str) -> Optional[float]:
        return stats.mean_or_none(self._neighbor_values(string, "raw"))

    def neighbor_log_frequency_mean(self, string: str) -> Optional[float]:
        return stats.mean_or_none(self._neighbor_values(string, "log"))

    def neighbor_zipf_mean(self, string: str) -> Optional[float]:
        return stats.mean_or_none(self._neighbor_values(string, "zipf"))

    def mean_closest_distance(self, string: str, limit: int = CFG.DEFAULT_LDIST_LIMIT) -> Optional[float]:
        """Mean Levenshtein distance to the `limit` closest corpus words (OLD20 for limit=20)."""
        return neighborhood.mean_distance_to_closest(
            self.store, require_string(string), limit, self._deadline()
        )

    # ------------- corpus-wide -------------

    def list_words(
        self,
        *,
        regex: Optional[str] = None,
        cv_pattern: Optional[str] = None,
        frequency: Optional[Sequence[Bound]] = None,
        zipf: Optional[Sequence[Bound]] = None,
        length: Optional[Sequence[Bound]] = None,
        neighbor_count: Optional[Sequence[Bound]] = None,
    ) -> List[str]:
        """
        Corpus words meeting every given constraint, in corpus order.
        Ranges are [min, max] with either bound omissible, e.g. [3], ["", 7], [4, 4].
        `neighbor_count` rescans the corpus once per candidate; narrow the list
        with regex/cv_pattern/length first when the corpus is large.
        """
        spec = FilterSpec.build(
            regex=regex, cv_pattern=cv_pattern, frequency=frequency,
            zipf=zipf, length=length, neighbor_count=neighbor_count,
        )
        # compile up front so bad patterns fail before any scan
        if spec.regex:
            search.compile_regex(spec.regex)
        if spec.cv_pattern:
            search.compile_cv_pattern(spec.cv_pattern)
        return search.list_words(self.store, spec, self._deadline())

    def all_words(self) -> List[str]:
        return list(self.store.iter_forms(self._deadline()))

    def count(self) -> int:
        """Number of words (data rows, header excluded)."""
        return self.store.count(self._deadline())

    def random_record(self) -> Record:
        return random_record(self.store, self._rng, self._deadline())

    def random_word(self) -> str:
        return self.random_record().surface_form

    # ------------- internals -------------

    @property
    def store(self) -> CorpusStore:
        if self._store is None:
            raise RuntimeError("Norms handle is closed")
        return self._store

    def _deadline(self) -> Deadline:
        return Deadline(self.scan_timeout)

    def _neighbor_values(self, string: str, scale: str) -> List[float]:
        return neighborhood.neighbor_field_values(
            self.store, require_string(string), scale, self._deadline()
        )

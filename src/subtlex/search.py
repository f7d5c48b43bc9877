from __future__ import annotations
import re
import logging
from typing import Iterable, List, Optional

from .models import FilterSpec, Range
from .DB.api import CorpusStore
from .DB.scanner import Deadline
from .neighborhood import neighbor_count
from . import config as CFG

log = logging.getLogger(__name__)

_CV_CLASS = {
    "C": f"[{CFG.CONSONANTS}]",
    "V": f"[{CFG.VOWELS}]",
}


def compile_cv_pattern(template: str) -> re.Pattern:
    """
    'CCVC' -> ^[consonant][consonant][vowel][consonant]$ (case-insensitive).
    'Y' is a consonant; any template letter other than C/V is rejected.
    """
    parts = []
    for ch in template.upper():
        cls = _CV_CLASS.get(ch)
        if cls is None:
            raise ValueError(f"cv_pattern may only contain 'C' and 'V', got {template!r}")
        parts.append(cls)
    return re.compile("".join(parts), re.IGNORECASE)


def compile_regex(pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ValueError(f"invalid regex {pattern!r}: {e}") from None


def _primary_pass(store: CorpusStore, spec: FilterSpec,
                  deadline: Optional[Deadline]) -> List[str]:
    """One scan applying the row-local tests: regex, cv_pattern, then frequency-or-zipf."""
    regex = compile_regex(spec.regex) if spec.regex else None
    cv = compile_cv_pattern(spec.cv_pattern) if spec.cv_pattern else None

    # frequency wins over zipf when both are given
    if spec.frequency is not None:
        value_range, scale = spec.frequency, "raw"
    elif spec.zipf is not None:
        value_range, scale = spec.zipf, "zipf"
    else:
        value_range, scale = None, None

    out: List[str] = []
    if value_range is None:
        # no numeric test: surface forms are enough
        for form in store.iter_forms(deadline):
            if regex is not None and not regex.search(form):
                continue
            if cv is not None and not cv.fullmatch(form):
                continue
            out.append(form)
        return out

    for rec in store.iter_records(deadline):
        form = rec.surface_form
        if regex is not None and not regex.search(form):
            continue
        if cv is not None and not cv.fullmatch(form):
            continue
        if not value_range.contains(rec.value(scale)):
            continue
        out.append(form)
    return out


def _by_length(words: Iterable[str], rng: Range) -> List[str]:
    return [w for w in words if rng.contains(len(w))]


def _by_neighbor_count(store: CorpusStore, words: List[str], rng: Range,
                       deadline: Optional[Deadline]) -> List[str]:
    # one full corpus scan per candidate: O(len(words) x corpus_size)
    log.info("neighbourhood-count filter over %d candidates (one corpus scan each)", len(words))
    return [w for w in words if rng.contains(neighbor_count(store, w, deadline))]


def list_words(store: CorpusStore, spec: FilterSpec,
               deadline: Optional[Deadline] = None) -> List[str]:
    """
    Words satisfying every constraint in `spec`, in corpus order.

    Order of work: cheap row-local tests in one pass (regex, cv_pattern,
    frequency/zipf), then length over the survivors, then the neighbourhood
    count last because it rescans the corpus for every survivor. An empty spec
    returns every word in the corpus.
    """
    words = _primary_pass(store, spec, deadline)
    log.debug("primary pass kept %d words", len(words))
    if spec.length is not None:
        words = _by_length(words, spec.length)
    if spec.neighbor_count is not None:
        words = _by_neighbor_count(store, words, spec.neighbor_count, deadline)
    return words

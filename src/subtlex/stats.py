from __future__ import annotations
import statistics
from typing import Iterable, List, Optional


def _present(values: Iterable[Optional[float]]) -> List[float]:
    return [v for v in values if v is not None]


def max_or_none(values: Iterable[Optional[float]]) -> Optional[float]:
    vals = _present(values)
    return max(vals) if vals else None


def mean_or_none(values: Iterable[Optional[float]]) -> Optional[float]:
    vals = _present(values)
    return statistics.fmean(vals) if vals else None


def median_or_none(values: Iterable[Optional[float]]) -> Optional[float]:
    vals = _present(values)
    return float(statistics.median(vals)) if vals else None


def stdev_or_none(values: Iterable[Optional[float]]) -> Optional[float]:
    # sample standard deviation; needs two values
    vals = _present(values)
    return statistics.stdev(vals) if len(vals) >= 2 else None

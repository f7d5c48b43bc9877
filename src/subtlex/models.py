from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

# scale name -> Record attribute
SCALES = {
    "raw": "frequency",
    "log": "log_frequency",
    "zipf": "zipf",
}

Bound = Union[int, float, str, None]


def check_scale(scale: str) -> str:
    if scale not in SCALES:
        raise ValueError(f"unknown scale {scale!r}; expected one of {sorted(SCALES)}")
    return scale


@dataclass(frozen=True)
class Record:
    surface_form: str
    frequency: Optional[float]        # per million
    log_frequency: Optional[float]
    part_of_speech: Optional[str]     # dominant PoS, e.g. "Noun"
    zipf: Optional[float]
    fields: Tuple[str, ...] = ()      # the raw row, as split from the file

    def value(self, scale: str = "raw") -> Optional[float]:
        return getattr(self, SCALES[check_scale(scale)])


@dataclass(frozen=True)
class Range:
    """Inclusive interval; a missing bound is left open."""
    min: Optional[float] = None
    max: Optional[float] = None

    @classmethod
    def from_spec(cls, spec: Optional[Sequence[Bound]]) -> Optional["Range"]:
        """
        Build a Range from a caller spec such as [2, 400], [3], ["", 7] or (None, 7).
        None (or an empty spec) means unconstrained and returns None.
        """
        if spec is None:
            return None
        if isinstance(spec, (str, bytes)) or not isinstance(spec, Sequence):
            raise ValueError(f"range must be a sequence of at most two bounds, got {spec!r}")
        if len(spec) > 2:
            raise ValueError(f"range takes at most two bounds, got {len(spec)}")
        bounds = [_bound(b) for b in spec] + [None, None]
        lo, hi = bounds[0], bounds[1]
        if lo is None and hi is None:
            return None
        return cls(lo, hi)

    def contains(self, v: Optional[float]) -> bool:
        if v is None:
            return False
        if self.min is not None and v < self.min:
            return False
        if self.max is not None and v > self.max:
            return False
        return True


def _bound(b: Bound) -> Optional[float]:
    if b is None:
        return None
    if isinstance(b, str):
        b = b.strip()
        if not b:
            return None
    try:
        return float(b)
    except (TypeError, ValueError):
        raise ValueError(f"range bound {b!r} is not a number") from None


@dataclass(frozen=True)
class FilterSpec:
    """Conjunction of optional constraints for list_words(); None = unconstrained."""
    regex: Optional[str] = None
    cv_pattern: Optional[str] = None
    frequency: Optional[Range] = None
    zipf: Optional[Range] = None
    length: Optional[Range] = None
    neighbor_count: Optional[Range] = None

    @classmethod
    def build(
        cls,
        *,
        regex: Optional[str] = None,
        cv_pattern: Optional[str] = None,
        frequency: Optional[Sequence[Bound]] = None,
        zipf: Optional[Sequence[Bound]] = None,
        length: Optional[Sequence[Bound]] = None,
        neighbor_count: Optional[Sequence[Bound]] = None,
    ) -> "FilterSpec":
        return cls(
            regex=regex or None,
            cv_pattern=cv_pattern or None,
            frequency=Range.from_spec(frequency),
            zipf=Range.from_spec(zipf),
            length=Range.from_spec(length),
            neighbor_count=Range.from_spec(neighbor_count),
        )

    def is_empty(self) -> bool:
        return all(v is None for v in (
            self.regex, self.cv_pattern, self.frequency,
            self.zipf, self.length, self.neighbor_count,
        ))

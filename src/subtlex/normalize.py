from __future__ import annotations
from typing import Iterable, List


def fold(text: str) -> str:
    """Case-fold used for every identity comparison against the corpus."""
    return text.lower()


def require_string(value: object, name: str = "string") -> str:
    """
    Validate a query string before any scan starts.
    Rules:
      * must be a str
      * must have content once surrounding whitespace is ignored
    The value is returned unchanged (no stripping) so lookups stay exact.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"No word to test; pass a non-empty letter-string as {name!r}")
    return value


def require_strings(values: Iterable[object], name: str = "strings") -> List[str]:
    if values is None or isinstance(values, (str, bytes)):
        raise ValueError(f"pass one or more letter-strings as a list to {name!r}")
    out = [require_string(v, name) for v in values]
    if not out:
        raise ValueError(f"No strings to test; {name!r} is empty")
    return out

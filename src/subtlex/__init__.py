"""
SUBTLEX word-frequency norms.

Frequencies (per million, log, Zipf), parts of speech, orthographic
neighbourhoods (Coltheart N and their frequencies, mean Levenshtein distance
to the closest words) and filtered word lists from a SUBTLEX-style CSV.

Example Usage:
    from subtlex import Norms

    with Norms("/path/to/dir") as norms:          # holds US_2007.csv
        norms.frequency("frog")                     # per million
        norms.zipf("frog")
        count, words = norms.neighbors("frog")
        norms.list_words(frequency=[2, 400], length=[4, 4], cv_pattern="CVCV")
"""

# src/subtlex/__init__.py
from .engine import Norms  # re-export
from .models import Record, Range, FilterSpec
from .orthon import are_neighbors, edit_distance

__version__ = "0.1.0"
__all__ = ["Norms", "Record", "Range", "FilterSpec", "are_neighbors", "edit_distance"]

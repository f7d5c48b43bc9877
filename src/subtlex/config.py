from __future__ import annotations
import os
from pathlib import Path

# where the bundled sample corpus lives
PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"

# env var that points at a directory holding the full corpus file
DATA_DIR_ENV = "SUBTLEX_DIR"

DEFAULT_FILENAME: str = "US_2007.csv"
DELIMITER: str = ","
ENCODING: str = "utf-8"

# /* ~~~ Yarkoni et al. (2008): mean distance to the 20 closest words ~~~ */
DEFAULT_LDIST_LIMIT: int = 20

# Store kinds: "scan" re-reads the file per query, "memory" loads it once
DEFAULT_STORE: str = "scan"

# /* ~~~ how many rows between deadline checks inside a scan ~~~ */
DEADLINE_CHECK_EVERY: int = 2048

# Progress logging (set SUBTLEX_VERBOSE=1 to enable)
VERBOSE = os.environ.get("SUBTLEX_VERBOSE") == "1"
PROGRESS_EVERY_ROWS = 20_000

# consonant/vowel classes for cv_pattern ('y' counts as a consonant)
CONSONANTS: str = "bcdfghjklmnpqrstvwxyz"
VOWELS: str = "aeiou"


def default_data_dir() -> Path:
    """$SUBTLEX_DIR when set, otherwise the sample shipped with the package."""
    env = os.environ.get(DATA_DIR_ENV, "").strip()
    if env:
        return Path(env)
    return PACKAGE_DATA_DIR

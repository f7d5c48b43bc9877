from __future__ import annotations
import os
import logging
from pathlib import Path
from typing import Optional, Union

from .models import Record
from .config import DEFAULT_FILENAME, DELIMITER, ENCODING, default_data_dir

log = logging.getLogger(__name__)

# column positions in the SUBTLEX CSV (header: Word,FREQcount,...,Zipf-value)
F_WORD = 0
F_FREQ = 5      # SUBTLWF, frequency per million
F_LOG = 6       # Lg10WF
F_POS = 9       # Dom_PoS_SUBTLEX
F_ZIPF = 14     # Zipf-value


def resolve_corpus_path(data_dir: Union[str, os.PathLike, None] = None,
                        filename: Optional[str] = None) -> Path:
    """
    Resolve and check the corpus file location.
      - data_dir: directory holding the file (default: config.default_data_dir())
      - filename: file name inside data_dir (default: US_2007.csv)
    Raises NotADirectoryError / FileNotFoundError, and OSError if it cannot be read.
    """
    if data_dir is not None and str(data_dir).strip():
        base = Path(data_dir)
        if not base.is_dir():
            raise NotADirectoryError(f"Value given to argument 'data_dir' ({data_dir}) is not a directory")
    else:
        base = default_data_dir()
    name = filename or DEFAULT_FILENAME
    path = base / name
    if not path.is_file():
        raise FileNotFoundError(
            f"file named {name} does not exist within the directory '{base}'. "
            f"Maybe you need to download the file or re-locate it"
        )
    # prove it is readable now rather than on the first query
    with open(path, "r", encoding=ENCODING, errors="replace") as f:
        f.readline()
    log.info("Using corpus file %s", path)
    return path


def first_field(line: str) -> str:
    """Fast path: the surface form only, without splitting the whole row."""
    return line.split(DELIMITER, 1)[0].rstrip("\r\n")


def parse_record(line: str, line_no: int = 0) -> Record:
    fields = tuple(line.rstrip("\r\n").split(DELIMITER))
    return Record(
        surface_form=fields[F_WORD],
        frequency=_num(fields, F_FREQ, line_no),
        log_frequency=_num(fields, F_LOG, line_no),
        part_of_speech=_text(fields, F_POS),
        zipf=_num(fields, F_ZIPF, line_no),
        fields=fields,
    )


def _text(fields: tuple[str, ...], i: int) -> Optional[str]:
    if i >= len(fields):
        return None
    v = fields[i].strip()
    return v or None


def _num(fields: tuple[str, ...], i: int, line_no: int) -> Optional[float]:
    v = _text(fields, i)
    if v is None:
        return None
    try:
        return float(v)
    except ValueError:
        # unparseable counts as missing
        log.warning("line %d: field %d of %r is not a number: %r", line_no, i, fields[F_WORD], v)
        return None

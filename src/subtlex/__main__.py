from __future__ import annotations
import argparse, json, sys
from dataclasses import asdict

from .engine import Norms
from .config import DEFAULT_LDIST_LIMIT
from .models import SCALES


def _range(text: str | None) -> list[str] | None:
    """'2:400' -> ['2', '400'], '3:' -> ['3', ''], ':7' -> ['', '7'], '4' -> ['4', '4']."""
    if text is None:
        return None
    if ":" not in text:
        return [text, text]
    lo, hi = text.split(":", 1)
    return [lo, hi]


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="subtlex", description="SUBTLEX frequency norms and orthographic neighbourhoods")
    p.add_argument("--dir", default=None, help="Directory holding the corpus file (default: $SUBTLEX_DIR or bundled sample)")
    p.add_argument("--filename", default=None, help="Corpus file name (default: US_2007.csv)")
    p.add_argument("--store", default=None, help='"scan://" (default), "memory://" or "sqlite:///path.sqlite"')
    p.add_argument("--timeout", type=float, default=None, help="Seconds allowed per query")
    p.add_argument("--seed", type=int, default=None, help="Seed for random")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--verbose", action="store_true")

    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("exists", help="Is the word in the corpus?")
    s.add_argument("word")

    s = sub.add_parser("freq", help="Frequency of a word")
    s.add_argument("word")
    s.add_argument("--scale", choices=sorted(SCALES), default="raw")

    s = sub.add_parser("freqs", help="Frequencies of several words (one pass)")
    s.add_argument("words", nargs="+")
    s.add_argument("--scale", choices=sorted(SCALES), default="raw")

    s = sub.add_parser("stats", help="Mean / median / sd of the words' frequencies")
    s.add_argument("words", nargs="+")
    s.add_argument("--scale", choices=sorted(SCALES), default="raw")

    s = sub.add_parser("pos", help="Dominant part of speech")
    s.add_argument("word")

    s = sub.add_parser("neighbors", help="Coltheart N, neighbours and their frequencies")
    s.add_argument("word")

    s = sub.add_parser("ldist", help="Mean edit distance to the closest words")
    s.add_argument("word")
    s.add_argument("--limit", type=int, default=DEFAULT_LDIST_LIMIT)

    s = sub.add_parser("list", help="Words matching constraints; ranges as MIN:MAX, MIN:, :MAX or N")
    s.add_argument("--regex", default=None)
    s.add_argument("--cv", dest="cv_pattern", default=None, help="e.g. CVCV (Y is a consonant)")
    s.add_argument("--freq", default=None)
    s.add_argument("--zipf", default=None)
    s.add_argument("--length", default=None)
    s.add_argument("--onc", default=None, help="Neighbourhood count range (slow: one scan per candidate)")

    sub.add_parser("count", help="Number of words in the corpus")
    sub.add_parser("random", help="A random corpus row")
    return p


def _run(norms: Norms, args: argparse.Namespace):
    cmd = args.cmd
    if cmd == "exists":
        return norms.exists(args.word)
    if cmd == "freq":
        return norms.frequency(args.word, args.scale)
    if cmd == "freqs":
        return norms.frequencies(args.words, args.scale)
    if cmd == "stats":
        return {
            "mean": norms.mean_frequency(args.words, args.scale),
            "median": norms.median_frequency(args.words, args.scale),
            "sd": norms.sd_frequency(args.words, args.scale),
        }
    if cmd == "pos":
        return norms.part_of_speech(args.word)
    if cmd == "neighbors":
        n, words = norms.neighbors(args.word)
        return {
            "count": n,
            "neighbors": words,
            "freq_max": norms.neighbor_frequency_max(args.word),
            "freq_mean": norms.neighbor_frequency_mean(args.word),
            "log_freq_mean": norms.neighbor_log_frequency_mean(args.word),
            "zipf_mean": norms.neighbor_zipf_mean(args.word),
        }
    if cmd == "ldist":
        return norms.mean_closest_distance(args.word, args.limit)
    if cmd == "list":
        return norms.list_words(
            regex=args.regex, cv_pattern=args.cv_pattern,
            frequency=_range(args.freq), zipf=_range(args.zipf),
            length=_range(args.length), neighbor_count=_range(args.onc),
        )
    if cmd == "count":
        return norms.count()
    if cmd == "random":
        rec = norms.random_record()
        return asdict(rec)
    raise ValueError(f"unknown command {cmd!r}")


def _print_plain(result) -> None:
    if result is None:
        print("(no value)")
    elif isinstance(result, dict):
        for k, v in result.items():
            print(f"{k:<16} {'(no value)' if v is None else v}")
    elif isinstance(result, list):
        for item in result:
            print(item)
    else:
        print(result)


def main(argv: list[str] | None = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)
    try:
        norms = Norms(args.dir, filename=args.filename, store=args.store,
                      scan_timeout=args.timeout, seed=args.seed, verbose=args.verbose)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    try:
        try:
            result = _run(norms, args)
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        except TimeoutError as e:
            print(f"error: {e}", file=sys.stderr)
            return 3
        if args.json:
            print(json.dumps(result, ensure_ascii=False, indent=2))
        else:
            _print_plain(result)
        return 0
    finally:
        norms.close()


if __name__ == "__main__":
    raise SystemExit(main())

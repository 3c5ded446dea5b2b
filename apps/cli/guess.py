# apps/cli/guess.py
"""
CLI entry point for wordguesser.

This script:
  1) Parses flags into a GuessConfig (no module-level state).
  2) Checks the dictionary exists and optionally prints a one-line summary.
  3) Builds the Constraint from --correct-spot / --wrong-spot / --invalid.
  4) Streams the dictionary through the filter (optional progress on stderr)
     and prints the matches.

Example:
    wordguesser --dictionary sgb-words.txt --correct-spot "5:e" \
        --wrong-spot "1:t" --invalid "a,s"
"""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence

from tqdm import tqdm

from packages.datasets import iter_words, validate_dictionary, pretty_summary
from packages.engine import (
    Constraint,
    DictionaryUnreadable,
    InvalidPosition,
    MalformedSpec,
    build_constraint,
    filter_candidates,
)

HEADER = "Possible words:"
EXIT_OK = 0
EXIT_ERROR = 1


@dataclass(frozen=True)
class GuessConfig:
    """Everything one invocation needs, built once from the parsed flags."""
    dictionary: str
    correct_spot: str = ""
    wrong_spot: str = ""
    invalid: str = ""
    progress: str = "off"
    summary: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "GuessConfig":
        return cls(
            dictionary=args.dictionary,
            correct_spot=args.correct_spot or "",
            wrong_spot=args.wrong_spot or "",
            invalid=args.invalid or "",
            progress=args.progress,
            summary=bool(args.summary),
        )


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="wordguesser",
        description="wordguesser: list dictionary words matching known letter positions",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Each flag also takes a single-dash long spelling (-dictionary, -invalid, ...).
    ap.add_argument("--dictionary", "-dictionary", required=True,
                    help="Path to the dictionary file (one word per line, UTF-8).")
    ap.add_argument("--correct-spot", "-correct-spot", dest="correct_spot", default="",
                    help="Characters in the correct spots.\n"
                         "Format : <position1>:<characters>;<position2>:<characters>,...\n"
                         "Example: 1:e;2:p;3:o")
    ap.add_argument("--wrong-spot", "-wrong-spot", dest="wrong_spot", default="",
                    help="Characters in the wrong spots.\n"
                         "Format : <position1>:<characters>;<position2>:<characters>,...\n"
                         "Example: 2:e;3:p,e;4:o")
    ap.add_argument("--invalid", "-invalid", default="",
                    help="Invalid characters.\n"
                         "Format : <chars>\n"
                         "Example: t,a,s,d")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="off",
        help="Show scan progress on stderr (auto=bar when stderr is a terminal, else off)."
    )
    ap.add_argument("--summary", action="store_true",
                    help="Print a one-line dictionary summary to stderr before filtering.")
    return ap


def _with_progress(words: Iterable[str], mode: str) -> Iterator[str]:
    """
    Wrap the word stream with a progress indicator on stderr.
    The total is unknown up front, so both modes report a running count.
    """
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"

    if mode == "bar":
        yield from tqdm(words, ncols=80, desc="Scanning", unit="word")
        return

    if mode != "plain":
        yield from words
        return

    start = time.time()
    last_print = 0.0
    idx = 0
    try:
        for idx, w in enumerate(words, 1):
            now = time.time()
            if now - last_print >= 1.0:
                sys.stderr.write(f"\r[{idx} words] elapsed {now - start:6.1f}s")
                sys.stderr.flush()
                last_print = now
            yield w
    finally:
        # terminate the \r line even when the read fails part way
        sys.stderr.write(f"\r[{idx} words] elapsed {time.time() - start:6.1f}s\n")
        sys.stderr.flush()


def guess_words(config: GuessConfig, constraint: Constraint) -> List[str]:
    """
    Stream config.dictionary through the filter and return the matches.
    Raises DictionaryUnreadable (no partial results) on any read fault.
    """
    words = _with_progress(iter_words(config.dictionary), config.progress)
    return filter_candidates(words, constraint)


def _fail(message: str) -> int:
    sys.stderr.write(f"Error: {message}\n")
    return EXIT_ERROR


def run(config: GuessConfig, parser: Optional[argparse.ArgumentParser] = None) -> int:
    """
    Execute one invocation. Returns the process exit code; results go to stdout.
    """
    if not Path(config.dictionary).exists():
        return _fail(f"{config.dictionary} does not exist")

    if config.summary:
        sys.stderr.write(pretty_summary(validate_dictionary(config.dictionary)) + "\n")

    try:
        constraint = build_constraint(config.correct_spot, config.wrong_spot, config.invalid)
    except InvalidPosition as e:
        return _fail(str(e))
    except MalformedSpec as e:
        if parser is not None:
            parser.print_usage(sys.stderr)
        return _fail(str(e))

    try:
        words = guess_words(config, constraint)
    except DictionaryUnreadable as e:
        return _fail(e.reason)

    print(HEADER)
    for w in words:
        print("-", w)
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Parse CLI args and run. Usage errors from argparse exit with status 2.
    """
    ap = build_parser()
    args = ap.parse_args(argv)
    return run(GuessConfig.from_args(args), parser=ap)


if __name__ == "__main__":
    sys.exit(main())

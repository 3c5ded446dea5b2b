from __future__ import annotations
from pathlib import Path
from typing import Iterator

from packages.engine.errors import DictionaryUnreadable


def iter_words(p: Path | str) -> Iterator[str]:
    """
    Stream a UTF-8 dictionary one line at a time, stripping trailing CR/LF.

    Blank lines are yielded as "" (the filter skips them). The file is closed
    when the generator is exhausted, closed, or raises.
    Raises DictionaryUnreadable if the path is missing, cannot be opened, or
    fails (I/O or decoding) part way through.
    """
    p = Path(p)
    if not p.exists():
        raise DictionaryUnreadable(str(p), f"{p} does not exist")
    try:
        with p.open("r", encoding="utf-8", newline="\n") as f:
            for ln in f:
                yield ln.rstrip("\r\n")
    except UnicodeDecodeError as e:
        raise DictionaryUnreadable(str(p), f"{p}: not valid UTF-8 ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise DictionaryUnreadable(str(p), str(e)) from e


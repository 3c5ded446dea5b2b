"""
Dictionary validator for wordguesser.

What this module does:
- Scan a newline-delimited UTF-8 dictionary once.
- Count words, blank lines, and duplicates; build a word-length histogram.
- Compute SHA-256 of the raw file so a run can be tied to an exact list.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("sgb-words.txt")
    print(pretty_summary(rep))

Nothing here is fatal: the CLI prints the summary (with --summary) and then
carries on. Missing/unreadable files are surfaced as `issues`.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from packages.engine.errors import DictionaryUnreadable
from .io import iter_words


# -----------------------------
# Dataclass for the structured report
# -----------------------------

@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of non-blank lines
    unique_count: int    # distinct words
    blank_lines: int     # empty lines (skipped by the filter)
    sha256: str          # SHA-256 of raw file bytes (empty string if unreadable)
    lengths: Dict[int, int] = field(default_factory=dict)  # word length -> count
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(path: str) -> Dict:
    """
    Validate a dictionary file.

    Parameters
    ----------
    path : str
        Path to the word list (one word per line).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport) with counts,
        length histogram, SHA-256, a `passed` flag (exists, non-empty, no
        duplicates) and `issues` describing any problems.
    """
    p = Path(path)
    rep = DictionaryReport(path=str(p), exists=p.exists(), count=0,
                           unique_count=0, blank_lines=0, sha256="")

    if not rep.exists:
        rep.issues.append(f"dictionary not found: {path}")
        return asdict(rep)

    seen = set()
    lengths: Counter = Counter()
    try:
        for w in iter_words(p):
            if not w:
                rep.blank_lines += 1
                continue
            rep.count += 1
            seen.add(w)
            lengths[len(w)] += 1
        rep.sha256 = _sha256_file(p)
    except (DictionaryUnreadable, OSError) as e:
        rep.issues.append(f"dictionary unreadable: {e}")
        return asdict(rep)

    rep.unique_count = len(seen)
    rep.lengths = dict(sorted(lengths.items()))

    if rep.count == 0:
        rep.issues.append("dictionary contains 0 words")
    if rep.count != rep.unique_count:
        rep.issues.append(f"dictionary contains {rep.count - rep.unique_count} duplicate line(s)")
    if rep.blank_lines:
        rep.issues.append(f"dictionary has {rep.blank_lines} blank line(s)")

    # Blank lines are tolerated (the filter skips them); duplicates are not.
    rep.passed = rep.count > 0 and rep.count == rep.unique_count
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for the console.

    Example:
        sgb-words.txt | words=5757 (uniq=5757, blank=0, sha=abc123...) | lengths=5:5757 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    sha = (report.get("sha256") or "")[:12]
    lengths = ",".join(f"{n}:{c}" for n, c in report.get("lengths", {}).items()) or "-"
    return (
        f"{report['path']} | words={report['count']} (uniq={report['unique_count']}, "
        f"blank={report['blank_lines']}, sha={sha}) | lengths={lengths} | {status}"
    )

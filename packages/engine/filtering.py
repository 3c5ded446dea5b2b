"""
Candidate filtering against a Constraint.

Given:
  - a stream of dictionary words (one per line, already stripped of CR/LF)
  - a Constraint built from correct / wrong / invalid spots

Return:
  - the words consistent with the Constraint, in input order.

Coverage check:
  Before the positional walk, every occurrence in the word of a "required"
  character (anything listed in wrong_spots) is counted, repeats included,
  and the word is dropped if that count is below the number of distinct
  required characters. This is looser than "contains every required
  character": with required {a, b}, the word "xaaxx" passes the count (2 >= 2)
  without containing 'b'.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator, List

from .constraints import Constraint


def _coverage(word: str, required: FrozenSet[str]) -> int:
    return sum(1 for c in word if c in required)


def _first_violation(word: str, constraint: Constraint) -> int | None:
    """
    Return the 1-based position of the first violated rule, or None.

    Per position the order is: invalid, then correct spot, then wrong spot.
    Constraint positions past the end of the word are never reached.
    """
    for i, c in enumerate(word, start=1):
        if c in constraint.invalid:
            return i

        correct = constraint.correct_spots.get(i)
        if correct is not None and c not in correct:
            return i

        wrong = constraint.wrong_spots.get(i)
        if wrong is not None and c in wrong:
            return i

    return None


def is_candidate(word: str, constraint: Constraint, required: FrozenSet[str] | None = None) -> bool:
    """
    True if `word` survives the Constraint.

    `required` may be passed in to avoid recomputing it for every word of a
    large dictionary; it defaults to constraint.required.
    """
    if not word:
        return False

    if required is None:
        required = constraint.required

    if _coverage(word, required) < len(required):
        return False

    return _first_violation(word, constraint) is None


def iter_candidates(words: Iterable[str], constraint: Constraint) -> Iterator[str]:
    """Lazy, order-preserving version of filter_candidates."""
    required = constraint.required
    for w in words:
        if is_candidate(w, constraint, required):
            yield w


def filter_candidates(words: Iterable[str], constraint: Constraint) -> List[str]:
    """
    Keep only words consistent with `constraint`.

    Args:
      words      : iterable of dictionary words (empty strings are skipped)
      constraint : output of build_constraint(...)

    Returns:
      List[str] of matches (order preserved as in `words`).
    """
    return list(iter_candidates(words, constraint))

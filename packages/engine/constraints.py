"""
Constraint model and builder.

Given three raw strings:
  - correct spots : "<pos>:<chars>;<pos>:<chars>"  e.g. "1:e;2:p;3:o"
  - wrong spots   : same grammar                   e.g. "2:e;3:p,e;4:o"
  - invalid       : "<c>,<c>,<c>"                  e.g. "t,a,s,d"

Return:
  - a frozen Constraint the word filter evaluates each dictionary word against.

Positions are 1-based. Characters are kept exactly as given (no case folding),
so the dictionary and the constraint strings must agree on case.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping

from .errors import InvalidPosition, MalformedSpec

# Position (1-based) -> characters attached to that position.
CharSpots = Mapping[int, FrozenSet[str]]

CLAUSE_SEP = ";"
POSITION_SEP = ":"
CHAR_SEP = ","
POSITION_RE = re.compile(r"[+-]?[0-9]+")


def _empty_spots() -> CharSpots:
    return MappingProxyType({})


@dataclass(frozen=True)
class Constraint:
    """Normalized rule set; read-only once built."""
    correct_spots: CharSpots = field(default_factory=_empty_spots)
    wrong_spots: CharSpots = field(default_factory=_empty_spots)
    invalid: FrozenSet[str] = frozenset()

    @property
    def required(self) -> FrozenSet[str]:
        return required_chars(self.wrong_spots)


def required_chars(wrong_spots: CharSpots) -> FrozenSet[str]:
    """Union of every character mentioned in `wrong_spots`."""
    out = set()
    for chars in wrong_spots.values():
        out.update(chars)
    return frozenset(out)


def parse_char_list(spec: str) -> FrozenSet[str]:
    """
    "t,a,s" -> {"t", "a", "s"}. Empty tokens are dropped, so "" -> {}.
    """
    return frozenset(c for c in spec.split(CHAR_SEP) if c)


def _split_clauses(spec: str) -> List[List[str]]:
    if not spec:
        return []
    return [clause.split(POSITION_SEP) for clause in spec.split(CLAUSE_SEP)]


def validate_char_spots(spec: str) -> None:
    """
    Arity check only: every clause must be exactly "<pos>:<chars>".
    Raises MalformedSpec on the first offending clause.
    """
    for parts in _split_clauses(spec):
        if len(parts) != 2:
            raise MalformedSpec(
                f"malformed clause {POSITION_SEP.join(parts)!r} in {spec!r} "
                f"(expected <position>:<characters>)")


def parse_position(token: str) -> int:
    """ASCII digits with an optional sign; the value must be >= 1."""
    if not POSITION_RE.fullmatch(token):
        raise InvalidPosition(token)
    pos = int(token)
    if pos < 1:
        raise InvalidPosition(token)
    return pos


def parse_char_spots(spec: str) -> CharSpots:
    """
    Parse an arity-checked "<pos>:<chars>;..." string (see validate_char_spots)
    into a read-only position -> chars map. A repeated position replaces the
    earlier clause.

    Character tokens are kept exactly as split: "1:a," holds {"a", ""}, and
    the empty token counts towards the required set like any other.
    """
    spots: Dict[int, FrozenSet[str]] = {}
    for position, chars in _split_clauses(spec):
        spots[parse_position(position)] = frozenset(chars.split(CHAR_SEP))
    return MappingProxyType(spots)


def build_constraint(correct_spot: str = "", wrong_spot: str = "", invalid: str = "") -> Constraint:
    """
    Build a Constraint from the three raw strings.

    Both positional strings are arity-checked before any position token is
    parsed, so a malformed clause is reported ahead of a bad position even
    when the bad position comes first.

    Raises:
      MalformedSpec   : a clause does not split into exactly two parts on ':'
      InvalidPosition : a position token is not a positive integer
    """
    validate_char_spots(correct_spot)
    validate_char_spots(wrong_spot)

    return Constraint(
        correct_spots=parse_char_spots(correct_spot),
        wrong_spots=parse_char_spots(wrong_spot),
        invalid=parse_char_list(invalid),
    )

"""
Error taxonomy for wordguesser.

Every failure the CLI reports derives from WordGuesserError so callers can
catch the whole family in one place, and the specific classes when they need
to react differently (e.g. print usage for a malformed clause).
"""

from __future__ import annotations


class WordGuesserError(Exception):
    """Base class for all wordguesser errors."""


class DictionaryUnreadable(WordGuesserError):
    """The dictionary path is missing, cannot be opened, or failed mid-read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(reason)


class MalformedSpec(WordGuesserError, ValueError):
    """A position:chars clause does not split into exactly two parts."""


class InvalidPosition(MalformedSpec):
    """A clause's position token is not a positive integer."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid position {token}")

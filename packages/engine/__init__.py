from .constraints import Constraint, build_constraint, required_chars
from .filtering import filter_candidates, iter_candidates, is_candidate
from .errors import WordGuesserError, DictionaryUnreadable, MalformedSpec, InvalidPosition

__all__ = [
    "Constraint", "build_constraint", "required_chars",
    "filter_candidates", "iter_candidates", "is_candidate",
    "WordGuesserError", "DictionaryUnreadable", "MalformedSpec", "InvalidPosition",
]

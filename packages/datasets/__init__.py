from .validator import validate_dictionary, pretty_summary
from .io import iter_words

__all__ = ["validate_dictionary", "pretty_summary", "iter_words"]

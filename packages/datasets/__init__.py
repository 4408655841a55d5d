from .validator import validate_dictionary, pretty_summary
from .io import DEFAULT_DICT, iter_words, load_dictionary, read_lines

__all__ = ["validate_dictionary", "pretty_summary", "DEFAULT_DICT", "iter_words",
           "load_dictionary", "read_lines"]

from .validator import validate_frequency_file, pretty_summary
from .io import read_frequency_map, read_lines, read_words

__all__ = ["validate_frequency_file", "pretty_summary", "read_frequency_map", "read_lines", "read_words"]

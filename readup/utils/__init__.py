# readup/utils/__init__.py
from .term import confirm, format_diff, get_console, grey_format
from .text import normalize_output, split_lines

__all__ = [
    "confirm",
    "format_diff",
    "get_console",
    "grey_format",
    "normalize_output",
    "split_lines",
]

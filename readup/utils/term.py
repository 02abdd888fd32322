# readup/utils/term.py
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.text import Text

from ..config import CONFIRM_PROMPT

REMOVED_MARKERS = ("<", "-")
ADDED_MARKERS = (">", "+")


def get_console(stderr: bool = False) -> Console:
    """Console used for every user-facing line; never interprets markup."""
    return Console(stderr=stderr, highlight=False, markup=False, emoji=False)


def grey_format(output: str) -> Text:
    """
    Indent each non-empty line of `output` by two spaces and dim it.
    Empty lines stay empty so trailing newlines do not grow indentation.
    """
    text = Text()
    lines = output.split("\n")
    for i, line in enumerate(lines):
        if line:
            text.append(f"  {line}", style="bright_black")
        if i < len(lines) - 1:
            text.append("\n")
    return text


def format_diff(diff: str) -> Text:
    """Color removed lines red and added lines green; others pass through."""
    text = Text()
    lines = diff.split("\n")
    for i, line in enumerate(lines):
        if line.startswith(REMOVED_MARKERS):
            text.append(line, style="red")
        elif line.startswith(ADDED_MARKERS):
            text.append(line, style="green")
        else:
            text.append(line)
        if i < len(lines) - 1:
            text.append("\n")
    return text


def confirm(
    console: Optional[Console] = None,
    prompt: str = CONFIRM_PROMPT,
    stream: Optional[TextIO] = None,
) -> bool:
    """
    Ask a yes/no question and read a single line. Only "y" (trimmed, any case)
    accepts; EOF reads as an empty answer.
    """
    console = console or get_console()
    console.print(prompt, end="")
    line = (stream or sys.stdin).readline()
    return line.strip().lower() == "y"

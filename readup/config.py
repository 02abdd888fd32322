# readup/config.py
from dataclasses import dataclass
from typing import Optional, Tuple

FENCE = "```"
DIRECTIVE_PREFIX = "> "

# Window size handed to the pseudo-terminal of every embedded command.
PTY_ROWS = 40
PTY_COLS = 80
READ_CHUNK = 1024

DIFF_COMMAND: Tuple[str, ...] = ("diff", "-u")
COPY_COMMAND: Tuple[str, ...] = ("cp",)

SCRATCH_PREFIX = "readup-"
DEFAULT_DOCUMENT = "README.md"
CONFIRM_PROMPT = "Update file? [y/N] "

UNTERMINATED_POLICIES = ("ignore", "fail")


@dataclass
class Options:
    """Knobs shared by the scanner and the review workflow."""

    keep_directive: bool = False
    on_unterminated: str = "ignore"
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        if self.on_unterminated not in UNTERMINATED_POLICIES:
            raise ValueError("on_unterminated must be one of {'ignore','fail'}")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be a positive number of seconds")

from .config import Options
from .errors import (
    ApplyError,
    CommandLaunchError,
    CommandStreamError,
    CommandTimeoutError,
    ReadupError,
    ReviewError,
    RunError,
    ScanError,
    StageError,
    UnterminatedBlockError,
)
from .models import CodeBlock, Command, parse_directive
from .review import DiffSummary, ReviewOutcome, review_document, summarize_diff
from .run import run_command
from .scan import scan_document, scan_text
from .system import copy_file, remove_file, write_tempfile

__all__ = [
    "Options",
    "run_command",
    "scan_document",
    "scan_text",
    "parse_directive",
    "review_document",
    "summarize_diff",
    "write_tempfile",
    "copy_file",
    "remove_file",
    "Command",
    "CodeBlock",
    "DiffSummary",
    "ReviewOutcome",
    "ReadupError",
    "RunError",
    "CommandLaunchError",
    "CommandStreamError",
    "CommandTimeoutError",
    "ScanError",
    "UnterminatedBlockError",
    "ReviewError",
    "StageError",
    "ApplyError",
]

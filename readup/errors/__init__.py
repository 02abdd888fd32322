from .base import ReadupError
from .review import ApplyError, ReviewError, StageError
from .run import CommandLaunchError, CommandStreamError, CommandTimeoutError, RunError
from .scan import ScanError, UnterminatedBlockError

__all__ = [
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

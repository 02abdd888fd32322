from .base import ReadupError


class RunError(ReadupError):
    """Running an embedded command failed."""


class CommandLaunchError(RunError):
    """The pseudo-terminal or the child process could not be created."""


class CommandStreamError(RunError):
    """Reading the child's output failed with something other than end-of-data."""


class CommandTimeoutError(RunError):
    """The child did not finish its output within the configured bound."""

class ReadupError(Exception):
    """Base class for every error raised by readup."""

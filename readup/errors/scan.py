from .base import ReadupError


class ScanError(ReadupError):
    """The document could not be scanned."""


class UnterminatedBlockError(ScanError):
    """A code block is still open when the document ends."""

    def __init__(self, line_number: int):
        self.line_number = line_number
        super().__init__(f"code block opened on line {line_number} is never closed")

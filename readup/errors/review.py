from .base import ReadupError


class ReviewError(ReadupError):
    """Staging or applying the rewritten document failed."""


class StageError(ReviewError):
    pass


class ApplyError(ReviewError):
    pass

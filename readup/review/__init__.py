from .core import DiffSummary, ReviewOutcome, review_document, summarize_diff

__all__ = ["DiffSummary", "ReviewOutcome", "review_document", "summarize_diff"]

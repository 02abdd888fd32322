from .core import Runner, scan_document, scan_text

__all__ = ["Runner", "scan_document", "scan_text"]

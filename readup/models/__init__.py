from .block import CodeBlock, Command, InsideBlock, Outside, ScanState, parse_directive

__all__ = ["CodeBlock", "Command", "InsideBlock", "Outside", "ScanState", "parse_directive"]

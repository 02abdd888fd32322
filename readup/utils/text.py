def normalize_output(raw: bytes) -> str:
    """
    Decode captured terminal output and drop every carriage return.
    Pseudo-terminals translate LF to CRLF; diffs need plain LF.
    """
    return raw.decode("utf-8", errors="replace").replace("\r", "")


def split_lines(text: str):
    """
    Split `text` on LF. Returns (lines, had_trailing_newline) so that
    "\\n".join(lines) plus the flag reproduces the input.
    """
    if text == "":
        return [], False
    trailing = text.endswith("\n")
    if trailing:
        text = text[:-1]
    return text.split("\n"), trailing

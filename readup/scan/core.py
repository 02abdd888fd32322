# readup/scan/core.py
from typing import Callable, List, Optional

from .._logging import resolve_logger
from ..config import DIRECTIVE_PREFIX, FENCE, UNTERMINATED_POLICIES
from ..errors import UnterminatedBlockError
from ..models import CodeBlock, InsideBlock, Outside, ScanState
from ..run import run_command
from ..utils.text import split_lines

# runner(argv, verbose) -> normalized output
Runner = Callable[[List[str], bool], str]


def _splice(out: List[str], block: CodeBlock, runner: Runner, keep_directive: bool, log) -> List[str]:
    """
    Replace the body of a closed, eligible block with fresh command output.
    `out` already ends with the block's closing fence.
    """
    command = block.directive
    if command is None:
        inner = block.inner
        if inner and inner[0].startswith(DIRECTIVE_PREFIX):
            log.warning("block on line %d: directive names no command; left as is", block.line_number)
        return out

    log.debug("block on line %d: running %s", block.line_number, command)
    output = runner(command.argv, True)

    keep = block.start + (2 if keep_directive else 1)
    del out[keep:]
    # The output's own trailing newline terminates the last body line.
    if output:
        out.append(output[:-1] if output.endswith("\n") else output)
    out.append(FENCE)
    return out


def scan_text(
    text: str,
    *,
    runner: Optional[Runner] = None,
    keep_directive: bool = False,
    on_unterminated: str = "ignore",
    timeout: Optional[float] = None,
    logger=None,
    log: bool = False,
) -> str:
    """
    Run every `> command` block in `text` and return the document with each
    such block's body replaced by the command's output.

    Args:
        text: Document contents.
        runner: Callable(argv, verbose) -> output. Defaults to run_command.
        keep_directive: Keep the `> command` line above the new output so the
            block can be refreshed again later.
        on_unterminated: "ignore" (default) leaves a block that is still open at
            the end of the document untouched; "fail" raises
            UnterminatedBlockError.
        timeout: Per-command bound passed to the default runner.

    Blocks without a directive, including empty ones, are reproduced exactly.
    """
    if on_unterminated not in UNTERMINATED_POLICIES:
        raise ValueError("on_unterminated must be one of {'ignore','fail'}")
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    if runner is None:
        def runner(argv: List[str], verbose: bool) -> str:
            return run_command(argv, verbose, timeout=timeout, logger=logger, log=log)

    source, trailing_newline = split_lines(text)
    out: List[str] = []
    state: ScanState = Outside()

    for number, line in enumerate(source):
        # Only a CR ending the line is dropped; one inside the line is content.
        if line.endswith("\r"):
            line = line[:-1]
        out.append(line)
        is_fence = line.startswith(FENCE)

        if isinstance(state, Outside):
            if is_fence:
                state = InsideBlock(CodeBlock(start=len(out) - 1, lines=[line], line_number=number + 1))
            continue

        block = state.block
        block.lines.append(line)
        if is_fence:
            block.closed = True
            state = Outside()
            out = _splice(out, block, runner, keep_directive, lg)

    if isinstance(state, InsideBlock):
        opened = state.block.line_number
        if on_unterminated == "fail":
            raise UnterminatedBlockError(opened)
        lg.warning("code block opened on line %d is never closed; left as is", opened)

    result = "\n".join(out)
    if trailing_newline:
        result += "\n"
    return result


def scan_document(path: str, **kwargs) -> str:
    """Read `path` and return its scanned contents; see scan_text for options."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        text = f.read()
    return scan_text(text, **kwargs)

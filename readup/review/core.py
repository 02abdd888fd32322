# readup/review/core.py
import contextlib
import os
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from patch import fromstring as patch_fromstring
from rich.console import Console

from .._logging import resolve_logger
from ..config import DIFF_COMMAND, Options
from ..run import run_command
from ..scan import Runner, scan_document
from ..system import copy_file, remove_file, write_tempfile
from ..utils.term import confirm as ask_user
from ..utils.term import format_diff, get_console


@dataclass
class DiffSummary:
    """Counts taken from a unified diff."""

    hunks: int = 0
    added: int = 0
    removed: int = 0

    @property
    def changed(self) -> bool:
        return self.hunks > 0

    def __str__(self) -> str:
        if not self.changed:
            return "No changes."
        return f"{self.hunks} hunk(s), +{self.added} -{self.removed}"


@dataclass
class ReviewOutcome:
    """What a review run produced and whether it was written back."""

    path: str
    content: str
    scratch_path: str
    diff: str = ""
    summary: DiffSummary = field(default_factory=DiffSummary)
    applied: bool = False


def summarize_diff(diff: str) -> DiffSummary:
    """
    Parse `diff` (unified format) and count hunks and changed lines.
    An empty or unparseable diff yields an empty summary.
    """
    summary = DiffSummary()
    if not diff.strip():
        return summary
    patch_set = patch_fromstring(diff.encode("utf-8"))
    if not patch_set:
        return summary
    for item in patch_set.items:
        for hunk in item.hunks:
            summary.hunks += 1
            for line in hunk.text:
                if line.startswith(b"+"):
                    summary.added += 1
                elif line.startswith(b"-"):
                    summary.removed += 1
    return summary


def review_document(
    path: str,
    *,
    options: Optional[Options] = None,
    confirm: Optional[Callable[[], bool]] = None,
    console: Optional[Console] = None,
    runner: Optional[Runner] = None,
    logger=None,
    log: bool = False,
) -> ReviewOutcome:
    """
    Scan `path`, stage the result in a scratch file, show the colored diff and
    write the result back only if the user confirms.

    Steps run strictly in order: scan, stage, diff, confirm, apply. Any failure
    raises (ReadupError or OSError) and nothing later runs. A declined update
    leaves the original untouched and removes the scratch file. Once the copy
    succeeded there is no rollback: a failing scratch removal still raises.

    Args:
        confirm: Callable returning True to apply. Defaults to a stdin prompt.
        runner: Callable(argv, verbose) -> output used for embedded commands
            and for the diff. Defaults to run_command.
    """
    options = options or Options()
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    console = console or get_console()
    if confirm is None:
        def confirm() -> bool:
            return ask_user(console)
    if runner is None:
        def runner(argv: List[str], verbose: bool) -> str:
            return run_command(
                argv, verbose, timeout=options.timeout, console=console, logger=logger, log=log
            )

    content = scan_document(
        path,
        runner=runner,
        keep_directive=options.keep_directive,
        on_unterminated=options.on_unterminated,
        logger=logger,
        log=log,
    )

    suffix = os.path.splitext(path)[1] or ".md"
    scratch = write_tempfile(content, suffix=suffix)
    lg.debug("staged %s in %s", path, scratch)
    outcome = ReviewOutcome(path=path, content=content, scratch_path=scratch)

    try:
        outcome.diff = runner([*DIFF_COMMAND, path, scratch], False)
        outcome.summary = summarize_diff(outcome.diff)
        console.print(format_diff(outcome.diff), soft_wrap=True)
        console.print(str(outcome.summary))
        accepted = confirm()
    except BaseException:
        # Includes KeyboardInterrupt at the prompt.
        with contextlib.suppress(OSError):
            os.remove(scratch)
        raise

    if not accepted:
        lg.debug("update of %s declined", path)
        try:
            os.remove(scratch)
        except OSError as e:
            lg.warning("could not remove scratch file %s: %s", scratch, e)
        return outcome

    copy_file(scratch, path)
    lg.debug("copied %s over %s", scratch, path)
    remove_file(scratch)
    outcome.applied = True
    return outcome

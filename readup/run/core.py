# readup/run/core.py
import contextlib
import errno
import fcntl
import os
import pty
import select
import struct
import subprocess
import termios
import time
from typing import List, Optional, Sequence

from rich.console import Console

from .._logging import resolve_logger
from ..config import PTY_COLS, PTY_ROWS, READ_CHUNK
from ..errors import CommandLaunchError, CommandStreamError, CommandTimeoutError
from ..utils.term import get_console, grey_format
from ..utils.text import normalize_output


def _set_winsize(fd: int, rows: int, cols: int) -> None:
    fcntl.ioctl(fd, termios.TIOCSWINSZ, struct.pack("HHHH", rows, cols, 0, 0))


def _child_env() -> dict:
    env = dict(os.environ)
    env["PATH"] = os.environ.get("PATH", os.defpath)
    return env


def _make_controlling_tty() -> None:
    # Runs in the child after setsid(); fd 0 is the pty slave.
    fcntl.ioctl(0, termios.TIOCSCTTY, 0)


def _close(fd: int) -> None:
    with contextlib.suppress(OSError):
        os.close(fd)


def _drain(master: int, argv: List[str], timeout: Optional[float]) -> bytes:
    """
    Read `master` until end-of-data. Linux reports EIO on the master side once
    every slave descriptor is closed, which is the normal end of the stream.
    """
    chunks: List[bytes] = []
    deadline = None if timeout is None else time.monotonic() + timeout
    while True:
        if deadline is not None:
            remaining = deadline - time.monotonic()
            if remaining <= 0 or not select.select([master], [], [], remaining)[0]:
                raise CommandTimeoutError(f"'{' '.join(argv)}' did not finish within {timeout:g}s")
        try:
            chunk = os.read(master, READ_CHUNK)
        except OSError as e:
            if e.errno == errno.EIO:
                break
            raise CommandStreamError(f"reading output of '{argv[0]}' failed: {e}") from e
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


def run_command(
    argv: Sequence[str],
    verbose: bool = False,
    *,
    timeout: Optional[float] = None,
    console: Optional[Console] = None,
    logger=None,
    log: bool = False,
) -> str:
    """
    Run `argv` attached to a 40x80 pseudo-terminal and return everything it
    printed, with carriage returns removed.

    stderr shares the terminal with stdout, so error text is part of the
    result. A non-zero exit status is not an error here: the output of a
    failing command is still returned.

    Raises:
        CommandLaunchError: empty argv, no pseudo-terminal, or the program
            could not be started.
        CommandStreamError: reading the terminal failed other than by EOF.
        CommandTimeoutError: `timeout` seconds passed before the stream ended;
            the child is killed.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    argv = list(argv)
    if not argv or not argv[0]:
        raise CommandLaunchError("no command given")
    console = console or get_console()

    if verbose:
        console.print(f"Running: {' '.join(argv)}", soft_wrap=True)

    try:
        master, slave = pty.openpty()
    except OSError as e:
        raise CommandLaunchError(f"could not allocate a pseudo-terminal: {e}") from e

    proc: Optional[subprocess.Popen] = None
    try:
        try:
            _set_winsize(slave, PTY_ROWS, PTY_COLS)
            proc = subprocess.Popen(
                argv,
                stdin=slave,
                stdout=slave,
                stderr=slave,
                env=_child_env(),
                start_new_session=True,
                preexec_fn=_make_controlling_tty,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise CommandLaunchError(f"could not start '{argv[0]}': {e}") from e
        finally:
            # The child holds its own copy; ours would keep the stream open forever.
            _close(slave)

        lg.debug("started %s (pid %d)", argv, proc.pid)
        raw = _drain(master, argv, timeout)
        returncode = proc.wait()
    finally:
        _close(master)
        if proc is not None and proc.poll() is None:
            proc.kill()
            proc.wait()

    if returncode != 0:
        lg.debug("%s exited with status %d", argv[0], returncode)

    output = normalize_output(raw)
    lg.debug("captured %d bytes from %s", len(raw), argv[0])

    if verbose:
        console.print("Output:")
        console.print(grey_format(output), soft_wrap=True)
    return output

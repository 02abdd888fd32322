"""
Filesystem and external-tool helpers used by the review workflow.

Public API:
  - write_tempfile(text: str, *, suffix: str = ".md", prefix: str = "readup-", dir: str | None = None, encoding: str = "utf-8") -> str
  - copy_file(src: str, dest: str) -> None
  - remove_file(path: str) -> None
"""
from __future__ import annotations

import contextlib
import os
import subprocess
import tempfile

from ..config import COPY_COMMAND, SCRATCH_PREFIX
from ..errors import ApplyError, StageError

__all__ = ["write_tempfile", "copy_file", "remove_file"]


def write_tempfile(
    text: str,
    *,
    suffix: str = ".md",
    prefix: str = SCRATCH_PREFIX,
    dir: str | None = None,
    encoding: str = "utf-8",
) -> str:
    """
    Write `text` to a new scratch file and return its absolute path.
    The file persists after the call; the caller removes it.
    """
    if suffix and not suffix.startswith("."):
        suffix = f".{suffix}"
    try:
        fd, path = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=dir)
    except OSError as e:
        raise StageError(f"could not create scratch file: {e}") from e
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            f.write(text)
    except OSError as e:
        with contextlib.suppress(OSError):
            os.remove(path)
        raise StageError(f"could not write scratch file '{path}': {e}") from e
    return os.path.realpath(path)


def copy_file(src: str, dest: str) -> None:
    """Overwrite `dest` with `src` using the external copy utility."""
    try:
        subprocess.run([*COPY_COMMAND, src, dest], check=True, capture_output=True)
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or b"").decode("utf-8", errors="replace").strip()
        raise ApplyError(f"copying '{src}' to '{dest}' failed: {detail or e}") from e
    except OSError as e:
        raise ApplyError(f"could not run '{COPY_COMMAND[0]}': {e}") from e


def remove_file(path: str) -> None:
    try:
        os.remove(path)
    except OSError as e:
        raise ApplyError(f"could not remove scratch file '{path}': {e}") from e

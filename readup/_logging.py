"""
Opt-in logging for readup.

Library functions take `logger=None, log: bool = False` and call
resolve_logger() once; records are dropped unless the caller opts in.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = debug


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
) -> logging.Logger | NoopLogger:
    """Return `logger` if given, a named DEBUG logger if `enabled`, else a no-op."""
    if logger is not None:
        return logger
    if not enabled:
        return NoopLogger()
    lg = logging.getLogger(name or "readup")
    lg.setLevel(logging.DEBUG)
    # Records reach the root handler installed by `readup --debug` (and caplog).
    lg.propagate = True
    return lg

#!/usr/bin/env python3
# readup: refresh `> command` code blocks in a document with live output.

import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_DOCUMENT, Options
from .errors import ReadupError
from .review import review_document
from .utils.term import get_console

EXIT_OK = 0
EXIT_ERROR = 1


class _Parser(argparse.ArgumentParser):
    """Usage errors exit with EXIT_ERROR like every other failure."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_ERROR, f"Error: {message}\n")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = _Parser(
        prog="readup",
        description="Run the commands named in '> command' code blocks and replace "
        "each block's body with the command's output, after showing a diff.",
    )
    p.add_argument("path", nargs="?", default=DEFAULT_DOCUMENT,
                   help=f"Document to update (default: {DEFAULT_DOCUMENT}).")
    p.add_argument("--keep-directive", action="store_true",
                   help="Keep the '> command' line in each block so it can be refreshed again.")
    p.add_argument("--timeout", type=float, default=None, metavar="SECONDS",
                   help="Kill an embedded command that runs longer than this.")
    p.add_argument("--debug", action="store_true", help="Log what readup is doing to stderr.")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        options = Options(keep_directive=args.keep_directive, timeout=args.timeout)
        review_document(args.path, options=options, console=get_console(), log=args.debug)
    except (ReadupError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

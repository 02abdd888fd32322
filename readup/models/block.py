from dataclasses import dataclass, field
from typing import List, Optional, Union

from ..config import DIRECTIVE_PREFIX


@dataclass
class Command:
    """A program and its arguments taken from a `> ...` directive line."""

    program: str
    args: List[str] = field(default_factory=list)

    @property
    def argv(self) -> List[str]:
        return [self.program, *self.args]

    def __str__(self) -> str:
        return " ".join(self.argv)


def parse_directive(line: str) -> Optional[Command]:
    """
    Return the Command named by a directive line, or None when the line is not
    a directive. No quoting is supported: the remainder after the prefix is
    split on whitespace.
    """
    if not line.startswith(DIRECTIVE_PREFIX):
        return None
    tokens = line[len(DIRECTIVE_PREFIX):].split()
    if not tokens:
        return None
    return Command(program=tokens[0], args=tokens[1:])


@dataclass
class CodeBlock:
    """Lines of one fenced block, opening fence first."""

    start: int  # index of the opening fence in the output buffer
    lines: List[str] = field(default_factory=list)
    line_number: int = 0  # 1-based line of the opening fence in the source
    closed: bool = False

    @property
    def inner(self) -> List[str]:
        if self.closed:
            return self.lines[1:-1]
        return self.lines[1:]

    @property
    def directive(self) -> Optional[Command]:
        # Empty blocks (fence immediately followed by fence) have no first inner line.
        inner = self.inner
        if not inner:
            return None
        return parse_directive(inner[0])

    @property
    def is_eligible(self) -> bool:
        return self.directive is not None


@dataclass
class Outside:
    """Scanner state between blocks."""


@dataclass
class InsideBlock:
    """Scanner state while accumulating a block."""

    block: CodeBlock


ScanState = Union[Outside, InsideBlock]

# conftest.py - shared fixtures
import io

import pytest
from rich.console import Console


class FakeRunner:
    """Stands in for run_command: echoes its arguments unless told otherwise."""

    def __init__(self, outputs=None):
        self.calls = []
        self.outputs = outputs or {}

    def __call__(self, argv, verbose):
        self.calls.append((list(argv), verbose))
        if argv[0] in self.outputs:
            return self.outputs[argv[0]]
        return " ".join(argv[1:]) + "\n"


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def console_buffer():
    buf = io.StringIO()
    console = Console(file=buf, width=200, highlight=False, markup=False, emoji=False)
    return console, buf

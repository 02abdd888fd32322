import logging
import shutil
import sys
import textwrap

import pytest

from readup.errors import CommandLaunchError, UnterminatedBlockError
from readup.scan import scan_document, scan_text


def test_splice_replaces_stale_body_with_output(fake_runner):
    text = "```\n> echo hi\nstale output\n```"
    assert scan_text(text, runner=fake_runner) == "```\nhi\n```"
    assert fake_runner.calls == [(["echo", "hi"], True)]


def test_fence_info_string_is_preserved(fake_runner):
    text = "```console\n> echo hi\nold\n```\n"
    assert scan_text(text, runner=fake_runner) == "```console\nhi\n```\n"


def test_closing_fence_is_normalized(fake_runner):
    text = "```\n> echo hi\n```   \n"
    assert scan_text(text, runner=fake_runner) == "```\nhi\n```\n"


def test_keep_directive_leaves_command_line(fake_runner):
    text = "```\n> echo hi\nstale\n```\n"
    out = scan_text(text, runner=fake_runner, keep_directive=True)
    assert out == "```\n> echo hi\nhi\n```\n"
    # Running again yields the same document.
    assert scan_text(out, runner=fake_runner, keep_directive=True) == out


def test_document_without_directives_round_trips(fake_runner):
    text = textwrap.dedent(
        """\
        # Title

        ```python
        print("hello")
        ```

        Some text with `inline` code.

        ```
        $ echo not a directive
        ```
        """
    )
    assert scan_text(text, runner=fake_runner) == text
    assert fake_runner.calls == []


def test_missing_trailing_newline_is_kept(fake_runner):
    text = "a\n```\ncode\n```"
    assert scan_text(text, runner=fake_runner) == text


def test_empty_document(fake_runner):
    assert scan_text("", runner=fake_runner) == ""


def test_empty_block_is_left_alone(fake_runner):
    text = "before\n```\n```\nafter\n"
    assert scan_text(text, runner=fake_runner) == text
    assert fake_runner.calls == []


def test_directive_without_command_is_left_alone(fake_runner, caplog):
    text = "```\n> \nbody\n```\n"
    with caplog.at_level(logging.WARNING):
        assert scan_text(text, runner=fake_runner, log=True) == text
    assert fake_runner.calls == []
    assert any("names no command" in r.getMessage() for r in caplog.records)


def test_directive_must_be_first_inner_line(fake_runner):
    text = "```\nfirst\n> echo hi\n```\n"
    assert scan_text(text, runner=fake_runner) == text


def test_multiple_blocks_keep_surrounding_text(fake_runner):
    text = textwrap.dedent(
        """\
        intro
        ```
        > echo one
        old
        older
        oldest
        ```
        middle
        ```
        untouched
        ```
        ```sh
        > echo two three
        ```
        outro
        """
    )
    expected = textwrap.dedent(
        """\
        intro
        ```
        one
        ```
        middle
        ```
        untouched
        ```
        ```sh
        two three
        ```
        outro
        """
    )
    assert scan_text(text, runner=fake_runner) == expected
    assert [argv for argv, _ in fake_runner.calls] == [["echo", "one"], ["echo", "two", "three"]]


def test_multiline_output_is_inserted_verbatim():
    runner = lambda argv, verbose: "line 1\n  line 2\n\nline 4\n"  # noqa: E731
    text = "```\n> thing\n```\n"
    assert scan_text(text, runner=runner) == "```\nline 1\n  line 2\n\nline 4\n```\n"


def test_output_without_trailing_newline():
    runner = lambda argv, verbose: "no newline"  # noqa: E731
    assert scan_text("```\n> x\n```", runner=runner) == "```\nno newline\n```"


def test_empty_output_leaves_empty_body():
    runner = lambda argv, verbose: ""  # noqa: E731
    assert scan_text("```\n> true\nold\n```\n", runner=runner) == "```\n```\n"


def test_unterminated_block_is_ignored_by_default(fake_runner, caplog):
    text = "ok\n```\n> echo hi\nstill open\n"
    with caplog.at_level(logging.WARNING):
        assert scan_text(text, runner=fake_runner, log=True) == text
    assert fake_runner.calls == []
    assert any("never closed" in r.getMessage() for r in caplog.records)


def test_unterminated_block_can_fail(fake_runner):
    text = "```\n> echo a\n```\n\n```\n> echo hi\n"
    with pytest.raises(UnterminatedBlockError) as exc:
        scan_text(text, runner=fake_runner, on_unterminated="fail")
    assert exc.value.line_number == 5
    assert "line 5" in str(exc.value)


def test_unknown_unterminated_policy_rejected():
    with pytest.raises(ValueError):
        scan_text("", on_unterminated="guess")


def test_runner_failure_aborts_scan():
    def runner(argv, verbose):
        raise CommandLaunchError("could not start 'nope'")

    with pytest.raises(CommandLaunchError):
        scan_text("```\n> nope\n```\n```\n> echo later\n```\n", runner=runner)


def test_scan_document_reads_file(tmp_path, fake_runner):
    doc = tmp_path / "README.md"
    doc.write_text("# Demo\n```\n> echo fresh\nstale\n```\n", encoding="utf-8")
    assert scan_document(str(doc), runner=fake_runner) == "# Demo\n```\nfresh\n```\n"
    # Scanning never writes.
    assert doc.read_text(encoding="utf-8") == "# Demo\n```\n> echo fresh\nstale\n```\n"


def test_scan_document_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        scan_document(str(tmp_path / "missing.md"))


@pytest.mark.skipif(sys.platform == "win32" or shutil.which("echo") is None, reason="needs a POSIX pty")
def test_scan_with_real_commands(capsys):
    text = "```\n> echo hi\nstale output\n```\n"
    assert scan_text(text) == "```\nhi\n```\n"
    out = capsys.readouterr().out
    assert "Running: echo hi" in out


def test_mid_line_carriage_return_round_trips(tmp_path, fake_runner):
    raw = b"progress 10%\r50%\rdone\n```\ncode\n```\n"
    doc = tmp_path / "progress.md"
    doc.write_bytes(raw)
    assert scan_document(str(doc), runner=fake_runner).encode("utf-8") == raw


def test_crlf_line_endings_become_lf(tmp_path, fake_runner):
    doc = tmp_path / "windows.md"
    doc.write_bytes(b"title\r\n```\r\n> echo hi\r\nold\r\n```\r\n")
    assert scan_document(str(doc), runner=fake_runner) == "title\n```\nhi\n```\n"
    assert fake_runner.calls == [(["echo", "hi"], True)]

"""Tests for the tipwrap command line."""

import io
import json

from tipwrap.cli import EXIT_ERROR, EXIT_USAGE, run
from tipwrap.commands import COMMANDS, CaseArgs, EmailArgs, case, email, wrap


def test_wrap_command(capsys):
    assert run(["wrap", "The quick brown fox jumps over the lazy dog.", "--width", "12"]) == 0
    assert capsys.readouterr().out == "The quick\nbrown fox\njumps over\nthe lazy\ndog.\n"


def test_wrap_command_keep_newlines_and_crlf(capsys):
    assert run(["wrap", "line1\\nline2", "--keep-newlines", "--crlf"]) == 0
    assert capsys.readouterr().out == "line1\r\nline2\r\n"


def test_wrap_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("hello world"))
    assert run(["wrap"]) == 0
    assert capsys.readouterr().out == "hello world\n"


def test_wrap_preview_goes_to_stderr(capsys):
    assert run(["wrap", "one two three", "--width", "9", "--preview"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "one two\nthree\n"
    assert "one two" in captured.err
    assert "12345678" in captured.err


def test_number_command(capsys):
    assert run(["number", "1234.5", "--locale", "de-DE"]) == 0
    assert capsys.readouterr().out == "1.234,50\n"


def test_number_command_rejects_bad_input(capsys):
    assert run(["number", "abc"]) == EXIT_USAGE
    assert run(["number", "1", "--decimals", "-1"]) == EXIT_USAGE
    assert run(["number", "1", "--locale", "xx-XX"]) == EXIT_USAGE
    assert "invalid arguments" in capsys.readouterr().err


def test_decode_command(capsys):
    assert run(["decode", "&amp;lt;b&amp;gt;"]) == 0
    assert capsys.readouterr().out == "<b>\n"


def test_decode_command_non_convergence_exits_with_error(capsys):
    assert run(["decode", "&amp;amp;amp;lt;", "--max-iterations", "2"]) == EXIT_ERROR
    assert "fixed point" in capsys.readouterr().err


def test_case_command(capsys):
    assert run(["case", "UpperCamelCase", "--style", "sentence"]) == 0
    assert capsys.readouterr().out == "Upper Camel Case\n"
    assert run(["case", "x", "--style", "bogus"]) == EXIT_USAGE


def test_email_command(capsys):
    assert run(["email", "david.jones@proseware.com"]) == 0
    assert run(["email", "j..s@proseware.com"]) == 0
    assert capsys.readouterr().out == "yes\nno\n"


def test_schema_command_lists_every_command(capsys):
    assert run(["schema"]) == 0
    specs = json.loads(capsys.readouterr().out)
    assert [s["name"] for s in specs] == ["wrap", "number", "decode", "case", "email"]


def test_command_decorator_attaches_model_schema():
    assert wrap._command_spec["name"] == "wrap"
    assert "width" in wrap._command_spec["parameters"]["properties"]
    assert all(hasattr(fn, "_command_model") for fn in COMMANDS)


def test_wrap_crlf_output_with_lf_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("hello\nworld\n"))
    assert run(["wrap", "--crlf"]) == 0
    assert capsys.readouterr().out == "hello world\r\n"


def test_wrap_crlf_keeps_lf_stdin_breaks(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("hello\nworld"))
    assert run(["wrap", "--crlf", "--keep-newlines"]) == 0
    assert capsys.readouterr().out == "hello\r\nworld\r\n"


def test_case_and_email_accept_shared_keyword_arguments():
    assert case(CaseArgs(text="hello world"), log_fn=print) == "Hello World"
    assert email(EmailArgs(text="a@bc.com"), log_fn=print) == "yes"

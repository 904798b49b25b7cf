"""Test the command line interface"""

import pytest
import valtest

from rtval.__main__ import main


def run(capsys, *argv):
    status = main(["--no-color", *argv])
    captured = capsys.readouterr()
    return status, captured.out.splitlines(), captured.err


@valtest.params(
    "argv status lines",
    eq_match=(("eq", "5", "5u"), 0, ["true"]),
    eq_negative=(("eq", "-1", "1u"), 0, ["false"]),
    eq_failure=(("eq", "1", '"x"', "1"), 1, ["fail: incompatible types for comparison: int and string"]),
    eq_missing=(("eq", "1"), 1, ["fail: missing argument for comparison"]),
    eq_any=(("eq-any", "2", "1", "2"), 0, ["true"]),
    has=(("has", "[1, 2, 3]", "1", "2"), 0, ["true"]),
    has_string=(("has", '"hello world"', '"wor"'), 0, ["true"]),
    has_any=(("has-any", "[1, 2, 3]", "4", "5"), 0, ["false"]),
    truth=(("truth", "0", '""', "[1]", "nil"), 0, ["false", "false", "true", "false"]),
    coalesce=(("coalesce", "0", '""', "nil", '"x"'), 0, ["x"]),
    print=(("print", '&"text"', "<func>", "{a: [1, true]}"), 0, ["text", "<no value>", "{a=[1 true]}"]),
)
def test_commands(key, capsys, argv, status, lines):
    assert run(capsys, *argv)[:2] == (status, lines)


def test_bad_literal(capsys):
    status, lines, err = run(capsys, "eq", "1", "[1,")
    assert status == 2
    assert lines == []
    assert "cannot read" in err


def test_bad_escape(capsys):
    status, lines, err = run(capsys, "print", r'"\x"')
    assert status == 2
    assert lines == []
    assert "cannot read" in err


def test_missing_command(capsys):
    with pytest.raises(SystemExit):
        main([])


def test_color(capsys, monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setattr("rtval.__main__.should_use_color", lambda stream: True)
    assert main(["truth", "1"]) == 0
    assert capsys.readouterr().out == "\033[32mtrue\033[0m\033[0m\n"

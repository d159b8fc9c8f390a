import pytest

from chaintable.main import execute, main
from chaintable.table import ChainTable, set_debug_trace_resize


@pytest.fixture(autouse=True)
def no_trace():
    yield
    set_debug_trace_resize(False)


def test_demo(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == (
        "== insert 1..5 (count 5, capacity 4, load 1.25) ==\n"
        "0: 1 5\n"
        "1: 2\n"
        "2: 3\n"
        "3: 4\n"
        "== delete 3 (count 4, capacity 4, load 1.00) ==\n"
        "0: 1 5\n"
        "1: 2\n"
        "3: 4\n"
    )


def test_keys_from_args(capsys):
    assert main(["1", "2"]) == 0
    assert capsys.readouterr().out == (
        "== table (count 2, capacity 2, load 1.00) ==\n0: 1\n1: 2\n"
    )


def test_trace_flag(capsys):
    assert main(["-t", "1", "2", "3"]) == 0
    captured = capsys.readouterr()
    assert captured.err == "resize 1 -> 2 (count 2)\nresize 2 -> 4 (count 3)\n"


def test_usage(capsys):
    assert main(["-x", "1"]) == 64
    assert capsys.readouterr().out.startswith("Usage: chaintable")

    # -i takes no keys
    assert main(["-i", "a"]) == 64
    assert capsys.readouterr().out.startswith("Usage: chaintable")


def test_options(capsys):
    # -- ends the options, keys may start with a dash
    assert main(["--", "-1"]) == 0
    assert capsys.readouterr().out == (
        "== table (count 1, capacity 1, load 1.00) ==\n0: -1\n"
    )

    # options after a key are keys
    assert main(["1", "-t"]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("== table (count 2, capacity 2,")
    assert captured.err == ""


def test_execute(capsys):
    t = ChainTable()

    assert execute(t, "insert a")
    assert execute(t, "insert b")
    assert execute(t, "")
    assert t.count == 2

    assert execute(t, "search a")
    assert execute(t, "search z")
    assert execute(t, "delete z")
    assert execute(t, "delete a")
    assert t.count == 1
    assert capsys.readouterr().out == "a in bucket 0\nz not found\nz not found\n"

    assert execute(t, "dump")
    assert capsys.readouterr().out == (
        "== table (count 1, capacity 2, load 0.50) ==\n1: b\n"
    )

    # unknown commands are reported and the session goes on
    assert execute(t, "frobnicate a")
    assert capsys.readouterr().err == "Unknown command 'frobnicate a'\n"

    assert not execute(t, "quit")


def test_repl(monkeypatch, capsys):
    lines = iter(["insert x", "insert y", "delete x", "dump"])

    def fake_input(prompt: str) -> str:
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    assert main(["-t", "-i"]) == 0
    captured = capsys.readouterr()
    # x is gone, y stays in bucket 0, then a newline on end of input
    assert captured.out == "== table (count 1, capacity 2, load 0.50) ==\n0: y\n\n"
    assert captured.err == "resize 1 -> 2 (count 2)\n"

import io
import logging

from argtok.arguments import Attribute, Flag, Operand, describe
from argtok.main import main
from argtok.pipeline import render, run, tokenize


def test_describe():
    assert describe(Operand("x")) == "Operand: `x`"
    assert describe(Attribute("k", "v")) == "Attribute `k`: v"
    assert describe(Flag("f")) == "Flag `f`"


def test_tokenize_drops_program_name():
    assert tokenize(["prog", "-v", "file"]) == [Flag("v"), Operand("file")]
    assert tokenize([]) == []


def test_render_and_run():
    out = io.StringIO()
    arguments = run(["prog", "--out=a.txt", "src"], out)
    assert arguments == [Attribute("out", "a.txt"), Operand("src")]
    assert out.getvalue().splitlines() == render(arguments)


def test_main_prints_arguments(capsys):
    assert main(["argtok", "-ab", "--name=v", "x", "--", "-c"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Flag `a`",
        "Flag `b`",
        "Attribute `name`: v",
        "Operand: `x`",
        "Operand: `-c`",
    ]


def test_main_reports_error(capsys):
    assert main(["argtok", "--a+"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("argtok: error: EmptyFlag")


def test_main_log_level_from_env(monkeypatch):
    seen = {}
    monkeypatch.setenv("ARGTOK_LOG_LEVEL", "debug")
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    main(["argtok"])
    assert seen["level"] == logging.DEBUG


def test_main_unknown_log_level_falls_back(monkeypatch):
    seen = {}
    monkeypatch.setenv("ARGTOK_LOG_LEVEL", "chatty")
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    main(["argtok"])
    assert seen["level"] == logging.WARNING

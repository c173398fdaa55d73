from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List

import pytest

from fwjs.runner import main
from fwjs.utils import env_int, log_level
from tests.support.harness import (
    Environment,
    FwNumber,
    FwjsDuplicateDeclarationError,
    run_program,
)


def test_run_reuses_given_environment() -> None:
    env = Environment()
    run_program("var counter = 1", env)
    result = run_program("counter = counter + 1; counter", env)

    assert result == FwNumber(2)
    assert env.vars["counter"] == FwNumber(2)


def test_runtime_error_reports_line() -> None:
    with pytest.raises(FwjsDuplicateDeclarationError) as exc_info:
        run_program("var x = 1;\nvar x = 2")

    assert exc_info.value.fw_meta.line == 2
    assert "(line 2, col 1)" in str(exc_info.value)


def test_main_prints_final_value(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["print(1); 1 + 2"]) == 0

    assert capsys.readouterr().out == "1\n3\n"


def test_main_reads_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "prog.fwjs"
    script.write_text("function sq(n) { n * n };\nsq(7)\n", encoding="utf-8")

    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "49\n"


def test_main_reports_runtime_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1 / 0"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error[division-by-zero]" in captured.err


def test_main_reports_syntax_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["var = 1"]) == 1
    assert "error[syntax]" in capsys.readouterr().err


def test_main_strict_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--strict", "missing"]) == 1
    assert "error[unbound-variable]" in capsys.readouterr().err


def test_main_rejects_extra_arguments() -> None:
    with pytest.raises(SystemExit):
        main(["1", "2"])


def test_long_straight_line_program() -> None:
    source = "var x = 0;\n" + "x = x + 1;\n" * 2000 + "x"

    assert run_program(source) == FwNumber(2000)


def test_main_applies_recursion_limit(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    limits: List[int] = []
    monkeypatch.setattr(sys, "setrecursionlimit", limits.append)
    monkeypatch.setenv("FWJS_RECURSION_LIMIT", "5000")

    assert main(["1"]) == 0
    assert limits == [5000]
    assert capsys.readouterr().out == "1\n"


def test_main_ignores_invalid_recursion_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    limits: List[int] = []
    monkeypatch.setattr(sys, "setrecursionlimit", limits.append)
    monkeypatch.setenv("FWJS_RECURSION_LIMIT", "lots")

    assert env_int("FWJS_RECURSION_LIMIT") is None
    assert main(["1"]) == 0
    assert limits == []


def test_main_debug_trace(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("FWJS_DEBUG_PY_TRACE", "1")

    assert main(["1/0"]) == 1

    err = capsys.readouterr().err
    assert "Traceback" in err
    assert "error[division-by-zero]" in err


def test_main_without_debug_trace(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.delenv("FWJS_DEBUG_PY_TRACE", raising=False)

    assert main(["1/0"]) == 1
    assert "Traceback" not in capsys.readouterr().err


@pytest.mark.parametrize(
    "raw, expected",
    [
        pytest.param(None, logging.WARNING, id="default"),
        pytest.param("debug", logging.DEBUG, id="lowercase-name"),
        pytest.param(" ERROR ", logging.ERROR, id="padded-name"),
        pytest.param("bogus", logging.WARNING, id="unknown-name"),
    ],
)
def test_log_level(raw, expected: int, monkeypatch: pytest.MonkeyPatch) -> None:
    if raw is None:
        monkeypatch.delenv("FWJS_LOG_LEVEL", raising=False)
    else:
        monkeypatch.setenv("FWJS_LOG_LEVEL", raw)

    assert log_level() == expected

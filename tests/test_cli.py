from __future__ import annotations

import io
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from adder import __version__
from adder.infrastructure.config import reload_config
from adder.infrastructure.logging_setup import setup_logging
from adder.interfaces import cli
from adder.interfaces.cli import EXIT_INPUT_FORMAT, EXIT_INTERRUPTED, EXIT_OK, main

ROOT = Path(__file__).resolve().parents[1]


def _main(text: str) -> tuple[int, str, str]:
    stdout, stderr = io.StringIO(), io.StringIO()
    rc = main([], stdin=io.StringIO(text), stdout=stdout, stderr=stderr)
    return rc, stdout.getvalue(), stderr.getvalue()


def test_main_success() -> None:
    rc, out, err = _main("2\n3\n")
    assert rc == EXIT_OK
    assert out == "Enter the first number: Enter the second number: The sum of 2 and 3 is: 5\n"
    assert err == ""


def test_main_bad_input_exits_nonzero() -> None:
    rc, out, err = _main("abc\n")
    assert rc == EXIT_INPUT_FORMAT
    assert "The sum of" not in out
    assert err.startswith("Error: expected an integer but got 'abc'")


def test_main_empty_input() -> None:
    rc, out, err = _main("")
    assert rc == EXIT_INPUT_FORMAT
    assert "input ended" in err


def test_main_debug_logs_to_stderr_only(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    reload_config()
    rc, out, err = _main("-10 4\n")
    assert rc == EXIT_OK
    assert out.endswith("The sum of -10 and 4 is: -6\n")
    assert "| DEBUG | adder.application.summation | Sum: -6" in err


def test_main_debug_flag_prints_traceback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG", "true")
    reload_config()
    rc, _, err = _main("1 oops\n")
    assert rc == EXIT_INPUT_FORMAT
    assert "Traceback" in err
    assert "Error: expected an integer but got 'oops'" in err


def test_main_ctrl_c_exits_130(monkeypatch: pytest.MonkeyPatch) -> None:
    def _interrupt(reader: object, out: object) -> None:
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "run", _interrupt)
    rc, out, err = _main("")
    assert rc == EXIT_INTERRUPTED == 130
    assert "[EXIT] Interrupted by user" in err
    assert "The sum of" not in out


def test_main_keeps_existing_logging_setup() -> None:
    embedder_log = io.StringIO()
    setup_logging(stream=embedder_log)
    root = logging.getLogger()
    root.setLevel(logging.ERROR)

    rc, out, _ = _main("1 2\n")

    assert rc == EXIT_OK
    assert out.endswith("The sum of 1 and 2 is: 3\n")
    assert root.level == logging.ERROR
    ours = [h for h in root.handlers if h.get_name() == "adder-console"]
    assert len(ours) == 1
    assert ours[0].stream is embedder_log


def test_main_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def _run_module(text: str) -> subprocess.CompletedProcess[str]:
    env = {k: v for k, v in os.environ.items() if k not in ("LOG_LEVEL", "DEBUG")}
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-m", "adder"],
        input=text,
        capture_output=True,
        text=True,
        cwd=ROOT,
        env=env,
        timeout=30,
    )


def test_module_end_to_end() -> None:
    proc = _run_module("0\n0\n")
    assert proc.returncode == 0
    assert proc.stdout == "Enter the first number: Enter the second number: The sum of 0 and 0 is: 0\n"


def test_module_end_to_end_failure() -> None:
    proc = _run_module("abc\n")
    assert proc.returncode != 0
    assert "The sum of" not in proc.stdout
    assert "Error:" in proc.stderr

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from pdfsuite import SubprocessError
from pdfsuite.external.runner import require_executable, run_subprocess, which


def test_run_subprocess_returns_completed_process() -> None:
    completed = run_subprocess([sys.executable, "-c", "print('hello')"], tool="python")

    assert completed.returncode == 0
    assert completed.stdout.strip() == "hello"


def test_nonzero_exit_raises_subprocess_error() -> None:
    command = [sys.executable, "-c", "import sys; sys.stderr.write('details'); sys.exit(3)"]

    with pytest.raises(SubprocessError) as excinfo:
        run_subprocess(command, tool="python")

    assert excinfo.value.returncode == 3
    assert "details" not in str(excinfo.value)


def test_timeout_raises_subprocess_error() -> None:
    with pytest.raises(SubprocessError, match="timed out"):
        run_subprocess([sys.executable, "-c", "import time; time.sleep(5)"], tool="python", timeout=0.5)


def test_missing_binary_raises_subprocess_error(tmp_path: Path) -> None:
    with pytest.raises(SubprocessError, match="could not be started"):
        run_subprocess([str(tmp_path / "does-not-exist")], tool="ghost")


def test_which_returns_first_available(fake_ghostscript: Path, tmp_path: Path) -> None:
    assert which([str(tmp_path / "nope"), str(fake_ghostscript)]) == str(fake_ghostscript)
    assert which([str(tmp_path / "nope")]) is None


def test_require_executable_reports_unavailable_tool(tmp_path: Path) -> None:
    with pytest.raises(SubprocessError, match="not available"):
        require_executable([str(tmp_path / "nope")], "Ghostscript")

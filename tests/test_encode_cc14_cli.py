"""CLI integration tests for tools/encode_cc14.py."""

from __future__ import annotations

import os
from pathlib import Path
import subprocess
import sys

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
SCRIPT = REPO_ROOT / "tools" / "encode_cc14.py"


def _run_cli(*args: str) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ)
    env["PYTHONPATH"] = str(REPO_ROOT)
    return subprocess.run(
        [sys.executable, str(SCRIPT), *args],
        cwd=str(REPO_ROOT),
        env=env,
        text=True,
        capture_output=True,
        check=False,
    )


def test_prints_hex_messages_msb_first() -> None:
    proc = _run_cli("5", "2", "1057")
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.splitlines() == ["B5 02 08", "B5 22 21"]


def test_prints_mido_messages() -> None:
    proc = _run_cli("5", "7", "1057", "--mido")
    assert proc.returncode == 0, proc.stderr
    lines = proc.stdout.splitlines()
    assert len(lines) == 2
    assert "control=7 value=8" in lines[0]
    assert "control=39 value=33" in lines[1]


@pytest.mark.parametrize(
    "args, needle",
    [
        (("16", "2", "1"), "Channel must be in [0, 15]"),
        (("0", "2", "16384"), "U14 must be in [0, 16383]"),
        (("0", "32", "1"), "no paired LSB"),
    ],
)
def test_invalid_input_exits_2(args: tuple[str, ...], needle: str) -> None:
    proc = _run_cli(*args)
    assert proc.returncode == 2
    assert needle in proc.stderr


def test_missing_arguments_exit_2() -> None:
    proc = _run_cli("5")
    assert proc.returncode == 2
    assert "required" in proc.stderr

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the subprocess wrapper."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from checkstyle_bld.process import (
    TIMEOUT_EXIT_STATUS,
    CommandOptions,
    resolve_executable,
    run_command,
)


def test_resolve_executable_requires_arguments() -> None:
    with pytest.raises(ValueError, match="at least one argument"):
        resolve_executable([])


def test_resolve_executable_keeps_absolute_paths() -> None:
    assert resolve_executable([sys.executable, "-V"]) == [sys.executable, "-V"]


def test_resolve_executable_reports_missing_program() -> None:
    with pytest.raises(FileNotFoundError, match="was not found on PATH"):
        resolve_executable(["checkstyle-bld-no-such-program"])


def test_command_options_reject_negative_timeout() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        CommandOptions(timeout=-1)


def test_run_command_returns_nonzero_status(tmp_path: Path) -> None:
    completed = run_command(
        [sys.executable, "-c", "import sys; sys.exit(3)"],
        options=CommandOptions(cwd=tmp_path),
    )

    assert completed.returncode == 3


def test_run_command_runs_in_working_directory(tmp_path: Path) -> None:
    completed = run_command(
        [sys.executable, "-c", "open('marker.txt', 'w').close()"],
        options=CommandOptions(cwd=tmp_path),
    )

    assert completed.returncode == 0
    assert (tmp_path / "marker.txt").is_file()


def test_run_command_maps_timeout_to_status() -> None:
    completed = run_command(
        [sys.executable, "-c", "import time; time.sleep(10)"],
        options=CommandOptions(timeout=0.2),
    )

    assert completed.returncode == TIMEOUT_EXIT_STATUS
    assert "timed out" in completed.stderr

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shell-free wrapper used to launch the Checkstyle JVM."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; the argument vector is built by
# CheckstyleOperation and never passed through a shell.
import subprocess  # nosec B404
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

TIMEOUT_EXIT_STATUS: Final[int] = 124


@dataclass(slots=True, frozen=True)
class CommandOptions:
    """Execution settings applied to a single process launch."""

    cwd: Path | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout < 0:
            raise ValueError("timeout must be non-negative")


def resolve_executable(args: Sequence[str]) -> list[str]:
    """Return ``args`` with the executable replaced by its absolute location.

    Args:
        args: Command and argument sequence.

    Returns:
        list[str]: Argument list whose first entry is an absolute path.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If the executable cannot be found on ``PATH``.
    """

    if not args:
        raise ValueError("subprocess command requires at least one argument")

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{head}' was not found on PATH")
    return [resolved, *rest]


def run_command(
    args: Sequence[str],
    *,
    options: CommandOptions | None = None,
) -> CompletedProcess[str]:
    """Execute ``args`` and wait for the process to finish.

    Output streams are inherited so Checkstyle reports straight to the
    caller's terminal.

    Args:
        args: Command and argument sequence to execute.
        options: Execution settings; defaults to :class:`CommandOptions`.

    Returns:
        CompletedProcess: Subprocess execution metadata. A timeout is reported
        as return code ``124`` rather than raised.

    Raises:
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
        OSError: If the operating system refuses to spawn the process.
    """

    resolved_options = options or CommandOptions()
    normalized = resolve_executable(args)

    try:
        return subprocess.run(  # nosec B603
            normalized,
            cwd=str(resolved_options.cwd) if resolved_options.cwd is not None else None,
            check=False,
            text=True,
            timeout=resolved_options.timeout,
        )
    except subprocess.TimeoutExpired:
        return subprocess.CompletedProcess(
            args=normalized,
            returncode=TIMEOUT_EXIT_STATUS,
            stderr=f"Command timed out after {resolved_options.timeout:.1f}s",
        )


__all__ = ["CommandOptions", "TIMEOUT_EXIT_STATUS", "resolve_executable", "run_command"]

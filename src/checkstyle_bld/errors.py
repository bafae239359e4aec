# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception types shared across the checkstyle_bld package."""

from __future__ import annotations

from typing import Final

EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 1


class ExitStatusError(RuntimeError):
    """Raised when an operation finishes with a non-zero exit status.

    The same type covers a builder that could not produce a command (no project
    bound) and a Checkstyle run that reported a failure.
    """

    def __init__(self, exit_status: int, message: str | None = None) -> None:
        """Initialise the error with the exit status to surface.

        Args:
            exit_status: Non-zero status reported to the caller.
            message: Optional human-readable explanation.
        """

        super().__init__(message or f"Operation failed with exit status {exit_status}.")
        self.exit_status = exit_status


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


__all__ = ["EXIT_FAILURE", "EXIT_SUCCESS", "ConfigError", "ExitStatusError"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configure and run Checkstyle from Python build scripts."""

from __future__ import annotations

from .config import CheckstyleSettings, load_settings
from .errors import EXIT_FAILURE, EXIT_SUCCESS, ConfigError, ExitStatusError
from .operation import CHECKSTYLE_MAIN_CLASS, CheckstyleOperation
from .output_format import OutputFormat
from .project import JavaProject, ProjectLayout

__all__ = [
    "CHECKSTYLE_MAIN_CLASS",
    "CheckstyleOperation",
    "CheckstyleSettings",
    "ConfigError",
    "EXIT_FAILURE",
    "EXIT_SUCCESS",
    "ExitStatusError",
    "JavaProject",
    "OutputFormat",
    "ProjectLayout",
    "load_settings",
]

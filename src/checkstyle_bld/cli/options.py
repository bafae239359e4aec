# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared option declarations and models for the Checkstyle CLI."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..output_format import OutputFormat

ROOT_OPTION = Annotated[Path, typer.Option("--root", "-r", help="Project root.")]
CONFIG_OPTION = Annotated[
    str | None,
    typer.Option("--config", "-c", help="Checkstyle configuration file or classpath resource."),
]
SOURCE_DIR_OPTION = Annotated[
    list[str] | None,
    typer.Option("--source-dir", "-s", help="Source file or directory to check (repeatable)."),
]
EXCLUDE_OPTION = Annotated[
    list[str] | None,
    typer.Option("--exclude", "-e", help="File or directory to exclude (repeatable)."),
]
EXCLUDE_REGEX_OPTION = Annotated[
    list[str] | None,
    typer.Option("--exclude-regex", "-x", help="Path pattern to exclude (repeatable)."),
]
FORMAT_OPTION = Annotated[
    OutputFormat | None,
    typer.Option("--format", "-f", case_sensitive=False, help="Report format."),
]
OUTPUT_OPTION = Annotated[Path | None, typer.Option("--output", "-o", help="Report file (defaults to stdout).")]
PROPERTIES_OPTION = Annotated[Path | None, typer.Option("--properties", "-p", help="Properties file to load.")]
DEBUG_OPTION = Annotated[bool, typer.Option("--debug", help="Print Checkstyle debug logging.")]
IGNORED_MODULES_OPTION = Annotated[
    bool,
    typer.Option("--execute-ignored-modules", help="Allow ignored modules to be run."),
]
JAVA_OPTION = Annotated[str | None, typer.Option("--java", help="Java launcher to use.")]
VERBOSE_OPTION = Annotated[bool, typer.Option("--verbose", "-v", help="Log the rendered command line.")]
EMOJI_OPTION = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji output.")]


def normalize_cli_values(values: Sequence[str] | None) -> tuple[str, ...]:
    """Return sanitized CLI values preserving order."""

    if not values:
        return ()
    return tuple(entry.strip() for entry in values if entry and entry.strip())


@dataclass(slots=True)
class CheckCLIOptions:
    """Capture CLI overrides applied on top of the project settings."""

    root: Path
    config: str | None = None
    source_dirs: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    exclude_regex: tuple[str, ...] = ()
    output_format: OutputFormat | None = None
    output: Path | None = None
    properties: Path | None = None
    debug: bool = False
    execute_ignored_modules: bool = False
    java: str | None = None
    verbose: bool = False
    emoji: bool = True


__all__ = [
    "CONFIG_OPTION",
    "CheckCLIOptions",
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "EXCLUDE_OPTION",
    "EXCLUDE_REGEX_OPTION",
    "FORMAT_OPTION",
    "IGNORED_MODULES_OPTION",
    "JAVA_OPTION",
    "OUTPUT_OPTION",
    "PROPERTIES_OPTION",
    "ROOT_OPTION",
    "SOURCE_DIR_OPTION",
    "VERBOSE_OPTION",
    "normalize_cli_values",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the Checkstyle commands."""

from __future__ import annotations

import shlex
from pathlib import Path

import typer

from ..errors import EXIT_FAILURE, ExitStatusError
from ..logging import configure_logging
from ..output_format import OutputFormat
from .options import (
    CONFIG_OPTION,
    DEBUG_OPTION,
    EMOJI_OPTION,
    EXCLUDE_OPTION,
    EXCLUDE_REGEX_OPTION,
    FORMAT_OPTION,
    IGNORED_MODULES_OPTION,
    JAVA_OPTION,
    OUTPUT_OPTION,
    PROPERTIES_OPTION,
    ROOT_OPTION,
    SOURCE_DIR_OPTION,
    VERBOSE_OPTION,
    CheckCLIOptions,
    normalize_cli_values,
)
from .services import build_operation
from .shared import CLIError, build_cli_logger

app = typer.Typer(
    name="checkstyle-bld",
    help="Run Checkstyle against a Java project.",
    no_args_is_help=True,
    add_completion=False,
)


def _collect_options(
    *,
    root: Path,
    config: str | None,
    source_dir: list[str] | None,
    exclude: list[str] | None,
    exclude_regex: list[str] | None,
    output_format: OutputFormat | None,
    output: Path | None,
    properties: Path | None,
    debug: bool,
    execute_ignored_modules: bool,
    java: str | None,
    verbose: bool,
    emoji: bool,
) -> CheckCLIOptions:
    return CheckCLIOptions(
        root=root,
        config=config,
        source_dirs=normalize_cli_values(source_dir),
        exclude=normalize_cli_values(exclude),
        exclude_regex=normalize_cli_values(exclude_regex),
        output_format=output_format,
        output=output,
        properties=properties,
        debug=debug,
        execute_ignored_modules=execute_ignored_modules,
        java=java,
        verbose=verbose,
        emoji=emoji,
    )


@app.command("check")
def check(
    root: ROOT_OPTION = Path("."),
    config: CONFIG_OPTION = None,
    source_dir: SOURCE_DIR_OPTION = None,
    exclude: EXCLUDE_OPTION = None,
    exclude_regex: EXCLUDE_REGEX_OPTION = None,
    output_format: FORMAT_OPTION = None,
    output: OUTPUT_OPTION = None,
    properties: PROPERTIES_OPTION = None,
    debug: DEBUG_OPTION = False,
    execute_ignored_modules: IGNORED_MODULES_OPTION = False,
    java: JAVA_OPTION = None,
    verbose: VERBOSE_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Run Checkstyle and exit with its status."""

    options = _collect_options(
        root=root,
        config=config,
        source_dir=source_dir,
        exclude=exclude,
        exclude_regex=exclude_regex,
        output_format=output_format,
        output=output,
        properties=properties,
        debug=debug,
        execute_ignored_modules=execute_ignored_modules,
        java=java,
        verbose=verbose,
        emoji=emoji,
    )
    configure_logging(debug=options.verbose)
    logger = build_cli_logger(emoji=options.emoji, debug=options.verbose)
    try:
        operation = build_operation(options, logger=logger)
        logger.info(f"Checking {len(operation.resolve_source_directories())} source location(s).")
        operation.execute()
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    except ExitStatusError as exc:
        logger.fail(f"Checkstyle failed (exit status {exc.exit_status}).")
        raise typer.Exit(code=exc.exit_status) from exc
    except OSError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=EXIT_FAILURE) from exc
    logger.ok("Checkstyle completed without errors.")


@app.command("command")
def command(
    root: ROOT_OPTION = Path("."),
    config: CONFIG_OPTION = None,
    source_dir: SOURCE_DIR_OPTION = None,
    exclude: EXCLUDE_OPTION = None,
    exclude_regex: EXCLUDE_REGEX_OPTION = None,
    output_format: FORMAT_OPTION = None,
    output: OUTPUT_OPTION = None,
    properties: PROPERTIES_OPTION = None,
    debug: DEBUG_OPTION = False,
    execute_ignored_modules: IGNORED_MODULES_OPTION = False,
    java: JAVA_OPTION = None,
    verbose: VERBOSE_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Print the Checkstyle command line without running it."""

    options = _collect_options(
        root=root,
        config=config,
        source_dir=source_dir,
        exclude=exclude,
        exclude_regex=exclude_regex,
        output_format=output_format,
        output=output,
        properties=properties,
        debug=debug,
        execute_ignored_modules=execute_ignored_modules,
        java=java,
        verbose=verbose,
        emoji=emoji,
    )
    configure_logging(debug=options.verbose)
    logger = build_cli_logger(emoji=options.emoji, debug=options.verbose)
    try:
        operation = build_operation(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    logger.echo(shlex.join(operation.construct_command()))


__all__ = ["app"]

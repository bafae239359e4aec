# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helper services shared by the Checkstyle CLI commands."""

from __future__ import annotations

from ..config import load_settings
from ..errors import ConfigError
from ..operation import CheckstyleOperation
from .options import CheckCLIOptions
from .shared import CLIError, CLILogger


def build_operation(options: CheckCLIOptions, *, logger: CLILogger) -> CheckstyleOperation:
    """Return an operation configured from project settings plus CLI overrides.

    Relative CLI paths are anchored at ``options.root``.

    Raises:
        CLIError: If the project configuration is invalid.
    """

    root = options.root.absolute()
    try:
        settings = load_settings(root)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc

    operation = CheckstyleOperation().from_project(settings.layout.project(root))
    settings.apply(operation)

    operation.configuration_file(options.config)
    operation.source_dir(root / entry for entry in options.source_dirs)
    operation.exclude(root / entry for entry in options.exclude)
    operation.exclude_regex(options.exclude_regex)
    operation.format(options.output_format)
    if options.output is not None:
        operation.output_path(root / options.output)
    if options.properties is not None:
        operation.properties_file(root / options.properties)
    if options.debug:
        operation.debug(True)
    if options.execute_ignored_modules:
        operation.execute_ignored_modules(True)
    if options.java:
        operation.java_tool(options.java)
    logger.debug(f"root={root} sources={len(operation.source_directories)}")
    return operation


__all__ = ["build_operation"]

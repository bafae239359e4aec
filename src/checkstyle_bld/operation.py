# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Static code analysis using `Checkstyle <https://checkstyle.sourceforge.io/>`_.

:class:`CheckstyleOperation` accumulates Checkstyle options through fluent
setters, renders them into an argument vector and launches the JVM.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Final

from .errors import EXIT_FAILURE, ExitStatusError
from .output_format import OutputFormat
from .paths import (
    PathArgument,
    Pathish,
    TextArgument,
    absolute_path,
    is_blank,
    iter_path_arguments,
    iter_text_arguments,
    location_text,
)
from .process import CommandOptions, run_command
from .project import ProjectLayout

LOGGER = logging.getLogger(__name__)

CHECKSTYLE_MAIN_CLASS: Final[str] = "com.puppycrawl.tools.checkstyle.Main"
DEFAULT_JAVA_TOOL: Final[str] = "java"

BRANCH_MATCHING_XPATH: Final[str] = "-b"
CONFIGURATION_FILE: Final[str] = "-c"
DEBUG: Final[str] = "-d"
EXCLUDE: Final[str] = "-e"
EXCLUDE_REGEX: Final[str] = "-x"
EXECUTE_IGNORED_MODULES: Final[str] = "-E"
FORMAT: Final[str] = "-f"
GENERATE_CHECKS_AND_FILE_SUPPRESSION: Final[str] = "-G"
GENERATE_XPATH_SUPPRESSION: Final[str] = "-g"
JAVADOC_TREE: Final[str] = "-j"
OUTPUT_PATH: Final[str] = "-o"
PROPERTIES_FILE: Final[str] = "-p"
SUPPRESSION_LINE_COLUMN_NUMBER: Final[str] = "-s"
TAB_WIDTH: Final[str] = "-w"
TREE: Final[str] = "-t"
TREE_WITH_COMMENTS: Final[str] = "-T"
TREE_WITH_JAVADOC: Final[str] = "-J"

MISSING_PROJECT_MESSAGE: Final[str] = "A project must be specified."


class CheckstyleOperation:
    """Configure and run Checkstyle against a project's sources.

    Options are kept in insertion order so the rendered command line is
    deterministic. Blank or ``None`` values passed to any setter are ignored.
    """

    def __init__(self) -> None:
        self._options: dict[str, str] = {}
        self._excluded_paths: dict[Path, None] = {}
        self._excluded_patterns: dict[str, None] = {}
        self._source_dirs: set[str] = set()
        self._project: ProjectLayout | None = None
        self._java_tool = DEFAULT_JAVA_TOOL
        self._work_directory: Path | None = None
        self._silent = False

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def options(self) -> Mapping[str, str]:
        """Return a read-only view of the flag to value mapping."""

        return MappingProxyType(self._options)

    @property
    def excluded_paths(self) -> tuple[Path, ...]:
        """Return the configured exclude paths as absolute paths."""

        return tuple(self._excluded_paths)

    @property
    def excluded_patterns(self) -> tuple[str, ...]:
        """Return the configured exclude regular expressions."""

        return tuple(self._excluded_patterns)

    @property
    def source_directories(self) -> tuple[str, ...]:
        """Return the configured source directories in sorted order."""

        return tuple(sorted(self._source_dirs))

    @property
    def project(self) -> ProjectLayout | None:
        """Return the bound project, if any."""

        return self._project

    @property
    def is_silent(self) -> bool:
        """Return ``True`` when error logging is suppressed."""

        return self._silent

    # ------------------------------------------------------------------
    # Internal mutation helpers
    # ------------------------------------------------------------------

    def _set_value(self, flag: str, value: str | None) -> CheckstyleOperation:
        if not is_blank(value):
            self._options[flag] = value
        return self

    def _toggle(self, flag: str, enabled: bool) -> CheckstyleOperation:
        if enabled:
            self._options.setdefault(flag, "")
        else:
            self._options.pop(flag, None)
        return self

    def _set_location(self, flag: str, location: Pathish | None) -> CheckstyleOperation:
        if is_blank(location):
            return self
        return self._set_value(flag, location_text(location))

    # ------------------------------------------------------------------
    # Fluent setters
    # ------------------------------------------------------------------

    def from_project(self, project: ProjectLayout) -> CheckstyleOperation:
        """Bind the project supplying the classpath and default source directories."""

        self._project = project
        return self

    def java_tool(self, tool: str) -> CheckstyleOperation:
        """Set the Java launcher placed at the head of the command line."""

        if not is_blank(tool):
            self._java_tool = tool
        return self

    def work_directory(self, directory: Pathish) -> CheckstyleOperation:
        """Set the directory the JVM is launched from.

        Defaults to the bound project's work directory.
        """

        if not is_blank(directory):
            self._work_directory = absolute_path(directory)
        return self

    def silent(self, enabled: bool) -> CheckstyleOperation:
        """Suppress error logging when ``enabled`` is true."""

        self._silent = enabled
        return self

    def branch_matching_xpath(self, xpath_query: str | None) -> CheckstyleOperation:
        """Show Abstract Syntax Tree (AST) branches that match the given XPath query."""

        return self._set_value(BRANCH_MATCHING_XPATH, xpath_query)

    def configuration_file(self, location: Pathish | None) -> CheckstyleOperation:
        """Specify the location of the file that defines the configuration modules.

        The location can either be a filesystem location, or a name resolved
        as a classpath resource. A configuration file is required for a
        meaningful run, but the operation does not enforce it. Strings are
        passed through verbatim; ``PathLike`` values are made absolute.
        """

        return self._set_location(CONFIGURATION_FILE, location)

    def debug(self, enabled: bool) -> CheckstyleOperation:
        """Print all debug logging of the Checkstyle utility."""

        return self._toggle(DEBUG, enabled)

    def exclude(self, *paths: PathArgument) -> CheckstyleOperation:
        """Directory or file to exclude from Checkstyle.

        Each argument is a single path or a collection of paths. Paths may be
        absolute or relative to the current directory; equivalent spellings
        collapse to one entry. Multiple excludes are allowed.
        """

        for path in iter_path_arguments(paths):
            self._excluded_paths[path] = None
        return self

    def exclude_regex(self, *patterns: TextArgument) -> CheckstyleOperation:
        """Directory or file pattern to exclude from Checkstyle. Multiple excludes are allowed."""

        for pattern in iter_text_arguments(patterns):
            self._excluded_patterns[pattern] = None
        return self

    def execute_ignored_modules(self, enabled: bool) -> CheckstyleOperation:
        """Allow ignored modules to be run."""

        return self._toggle(EXECUTE_IGNORED_MODULES, enabled)

    def format(self, output_format: OutputFormat | str | None) -> CheckstyleOperation:
        """Specify the output format.

        Valid values are ``xml``, ``sarif`` and ``plain`` for the XML, SARIF and
        default logger respectively. Checkstyle defaults to ``plain``. Unknown
        labels are ignored like blank values.
        """

        if is_blank(output_format):
            return self
        try:
            resolved = OutputFormat.from_label(output_format)
        except ValueError:
            return self
        return self._set_value(FORMAT, resolved.label)

    def generate_checks_and_file_suppression(self, enabled: bool) -> CheckstyleOperation:
        """Generate a suppression XML that suppresses all violations by check and file name."""

        return self._toggle(GENERATE_CHECKS_AND_FILE_SUPPRESSION, enabled)

    def generate_xpath_suppression(self, enabled: bool) -> CheckstyleOperation:
        """Output a suppression XML suppressing every violation of the configuration.

        Instead of printing every violation, all violations are caught and a
        single suppressions file is printed. Used with
        :meth:`configuration_file`; the location is set with :meth:`output_path`.
        """

        return self._toggle(GENERATE_XPATH_SUPPRESSION, enabled)

    def javadoc_tree(self, enabled: bool) -> CheckstyleOperation:
        """Print the parse tree of a Javadoc comment.

        The file must contain only Javadoc comment content. The option
        requires exactly one file to run on.
        """

        return self._toggle(JAVADOC_TREE, enabled)

    def output_path(self, location: Pathish | None) -> CheckstyleOperation:
        """Set the output file. Checkstyle defaults to stdout."""

        return self._set_location(OUTPUT_PATH, location)

    def properties_file(self, location: Pathish | None) -> CheckstyleOperation:
        """Set the properties file to load."""

        return self._set_location(PROPERTIES_FILE, location)

    def suppression_line_column_number(self, line_column: str | None) -> CheckstyleOperation:
        """Print XPath suppressions at the file's ``line:column`` position.

        The generated result may hold several queries joined by a pipe, all
        matching the AST nodes at that position. The option requires exactly
        one file to run on.
        """

        return self._set_value(SUPPRESSION_LINE_COLUMN_NUMBER, line_column)

    def tab_width(self, length: int) -> CheckstyleOperation:
        """Set the length of the tab character.

        Used with :meth:`suppression_line_column_number`; Checkstyle defaults
        to ``8``.
        """

        return self._set_value(TAB_WIDTH, str(length))

    def tree(self, enabled: bool) -> CheckstyleOperation:
        """Print the Abstract Syntax Tree (AST) of the checked file."""

        return self._toggle(TREE, enabled)

    def tree_with_comments(self, enabled: bool) -> CheckstyleOperation:
        """Print the AST of the checked file including comment nodes."""

        return self._toggle(TREE_WITH_COMMENTS, enabled)

    def tree_with_javadoc(self, enabled: bool) -> CheckstyleOperation:
        """Print the AST with Javadoc and comment nodes of the checked file.

        Line and column numbers differ from the file because every Javadoc
        comment is parsed separately.
        """

        return self._toggle(TREE_WITH_JAVADOC, enabled)

    def source_dir(self, *directories: PathArgument) -> CheckstyleOperation:
        """Specify the file(s) or folder(s) containing the source files to check."""

        self._source_dirs.update(str(path) for path in iter_path_arguments(directories))
        return self

    # ------------------------------------------------------------------
    # Rendering and execution
    # ------------------------------------------------------------------

    def _require_project(self) -> ProjectLayout:
        if self._project is None:
            if not self._silent:
                LOGGER.error(MISSING_PROJECT_MESSAGE)
            raise ExitStatusError(EXIT_FAILURE, MISSING_PROJECT_MESSAGE)
        return self._project

    def resolve_source_directories(self) -> tuple[str, ...]:
        """Default the source directories from the project when none were given.

        The defaults are stored, so later calls see the same set.

        Returns:
            tuple[str, ...]: Sorted absolute source directories.

        Raises:
            ExitStatusError: If no project is bound.
        """

        project = self._require_project()
        if not self._source_dirs:
            self.source_dir(project.src_main_java_directory(), project.src_test_java_directory())
        return self.source_directories

    def classpath(self) -> str:
        """Return the classpath handed to the JVM via ``-cp``.

        Raises:
            ExitStatusError: If no project is bound.
        """

        project = self._require_project()
        entries = (
            project.lib_test_directory() / "*",
            project.lib_compile_directory() / "*",
            project.build_main_directory(),
            project.build_test_directory(),
        )
        return os.pathsep.join(str(entry) for entry in entries)

    def construct_command(self) -> list[str]:
        """Render the configuration into the argument vector used to launch Checkstyle.

        Exclude paths that do not exist are dropped. Every flag and its value
        are emitted as separate tokens.

        Returns:
            list[str]: Launcher, classpath, main class, options, excludes and
            source directories in that order.

        Raises:
            ExitStatusError: If no project is bound.
        """

        source_dirs = self.resolve_source_directories()
        command = [self._java_tool, "-cp", self.classpath(), CHECKSTYLE_MAIN_CLASS]

        for flag, value in self._options.items():
            command.append(flag)
            if value:
                command.append(value)

        for path in self._excluded_paths:
            if path.exists():
                command.extend((EXCLUDE, str(path)))

        for pattern in self._excluded_patterns:
            command.extend((EXCLUDE_REGEX, pattern))

        command.extend(source_dirs)

        LOGGER.debug(" ".join(command))
        return command

    def execute(self, *, timeout: float | None = None) -> int:
        """Launch Checkstyle and wait for it to finish.

        Args:
            timeout: Optional limit in seconds; an expired run is reported as
                a failure.

        Returns:
            int: ``0`` when Checkstyle completes successfully.

        Raises:
            ExitStatusError: If no project is bound or Checkstyle exits with a
                non-zero status.
            FileNotFoundError: If the Java launcher cannot be found.
            OSError: If the process cannot be spawned.
        """

        project = self._require_project()
        command = self.construct_command()
        work_directory = self._work_directory or project.work_directory()
        completed = run_command(
            command,
            options=CommandOptions(cwd=work_directory, timeout=timeout),
        )
        if completed.returncode != 0:
            if not self._silent:
                LOGGER.error("Checkstyle exited with status %d.", completed.returncode)
            raise ExitStatusError(completed.returncode)
        return completed.returncode


__all__ = ["CHECKSTYLE_MAIN_CLASS", "DEFAULT_JAVA_TOOL", "CheckstyleOperation"]

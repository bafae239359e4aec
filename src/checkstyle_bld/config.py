# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for Checkstyle runs."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .operation import CheckstyleOperation
from .output_format import OutputFormat
from .project import BUILD_MAIN, BUILD_TEST, LIB_COMPILE, LIB_TEST, SRC_MAIN_JAVA, SRC_TEST_JAVA, JavaProject

CONFIG_FILE_NAME: Final[str] = ".checkstyle-bld.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "checkstyle-bld"


def _kebab(name: str) -> str:
    return name.replace("_", "-")


class LayoutSettings(BaseModel):
    """Directory overrides for the conventional Java project layout."""

    model_config = ConfigDict(alias_generator=_kebab, populate_by_name=True, extra="forbid")

    src_main_java: Path = SRC_MAIN_JAVA
    src_test_java: Path = SRC_TEST_JAVA
    lib_compile: Path = LIB_COMPILE
    lib_test: Path = LIB_TEST
    build_main: Path = BUILD_MAIN
    build_test: Path = BUILD_TEST

    def project(self, root: Path) -> JavaProject:
        """Return a :class:`JavaProject` rooted at ``root`` using these directories."""

        return JavaProject(root=root, **self.model_dump())


class CheckstyleSettings(BaseModel):
    """Checkstyle options loaded from a configuration file.

    Relative paths are kept as written; :func:`load_settings` anchors them at
    the project root.
    """

    model_config = ConfigDict(alias_generator=_kebab, populate_by_name=True, extra="forbid")

    configuration_file: str | None = None
    properties_file: Path | None = None
    output_path: Path | None = None
    format: OutputFormat | None = None
    branch_matching_xpath: str | None = None
    suppression_line_column_number: str | None = None
    tab_width: int | None = Field(default=None, ge=1)
    source_dirs: tuple[Path, ...] = Field(default_factory=tuple)
    exclude: tuple[Path, ...] = Field(default_factory=tuple)
    exclude_regex: tuple[str, ...] = Field(default_factory=tuple)
    debug: bool = False
    execute_ignored_modules: bool = False
    generate_checks_and_file_suppression: bool = False
    generate_xpath_suppression: bool = False
    javadoc_tree: bool = False
    tree: bool = False
    tree_with_comments: bool = False
    tree_with_javadoc: bool = False
    java_tool: str | None = None
    silent: bool = False
    layout: LayoutSettings = Field(default_factory=LayoutSettings)

    @field_validator("format", mode="before")
    @classmethod
    def _coerce_format(cls, value: object) -> object:
        if isinstance(value, str):
            return OutputFormat.from_label(value)
        return value

    def anchored(self, root: Path) -> CheckstyleSettings:
        """Return a copy whose relative filesystem paths are anchored at ``root``."""

        def _anchor(path: Path | None) -> Path | None:
            if path is None or path.is_absolute():
                return path
            return root / path

        return self.model_copy(
            update={
                "properties_file": _anchor(self.properties_file),
                "output_path": _anchor(self.output_path),
                "source_dirs": tuple(_anchor(path) for path in self.source_dirs),
                "exclude": tuple(_anchor(path) for path in self.exclude),
            },
        )

    def apply(self, operation: CheckstyleOperation) -> CheckstyleOperation:
        """Push every configured value into ``operation`` through its fluent setters."""

        operation.configuration_file(self.configuration_file)
        operation.properties_file(self.properties_file)
        operation.output_path(self.output_path)
        operation.format(self.format)
        operation.branch_matching_xpath(self.branch_matching_xpath)
        operation.suppression_line_column_number(self.suppression_line_column_number)
        if self.tab_width is not None:
            operation.tab_width(self.tab_width)
        operation.source_dir(self.source_dirs)
        operation.exclude(self.exclude)
        operation.exclude_regex(self.exclude_regex)
        for flag, setter in (
            (self.debug, operation.debug),
            (self.execute_ignored_modules, operation.execute_ignored_modules),
            (self.generate_checks_and_file_suppression, operation.generate_checks_and_file_suppression),
            (self.generate_xpath_suppression, operation.generate_xpath_suppression),
            (self.javadoc_tree, operation.javadoc_tree),
            (self.tree, operation.tree),
            (self.tree_with_comments, operation.tree_with_comments),
            (self.tree_with_javadoc, operation.tree_with_javadoc),
        ):
            if flag:
                setter(True)
        if self.java_tool:
            operation.java_tool(self.java_tool)
        if self.silent:
            operation.silent(True)
        return operation


def _read_toml(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def _pyproject_section(path: Path) -> Mapping[str, Any] | None:
    tool_section = _read_toml(path).get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return None
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return None
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return section


def find_settings_payload(root: Path) -> tuple[Path | None, Mapping[str, Any]]:
    """Locate the settings document for ``root``.

    ``.checkstyle-bld.toml`` takes precedence over the ``[tool.checkstyle-bld]``
    table of ``pyproject.toml``.

    Returns:
        tuple[Path | None, Mapping[str, Any]]: Source file (``None`` when no
        configuration exists) and its raw payload.
    """

    dedicated = root / CONFIG_FILE_NAME
    if dedicated.is_file():
        return dedicated, _read_toml(dedicated)
    pyproject = root / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        section = _pyproject_section(pyproject)
        if section is not None:
            return pyproject, section
    return None, {}


def load_settings(root: Path) -> CheckstyleSettings:
    """Load and validate the Checkstyle settings for the project at ``root``.

    Args:
        root: Project root directory.

    Returns:
        CheckstyleSettings: Validated settings with paths anchored at ``root``;
        defaults when no configuration exists.

    Raises:
        ConfigError: If the configuration cannot be parsed or validated.
    """

    root = root.absolute()
    source, payload = find_settings_payload(root)
    try:
        settings = CheckstyleSettings.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {source}: {exc}") from exc
    return settings.anchored(root)


__all__ = [
    "CONFIG_FILE_NAME",
    "CheckstyleSettings",
    "LayoutSettings",
    "find_settings_payload",
    "load_settings",
]

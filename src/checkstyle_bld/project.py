# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Project layout contract consumed by :class:`CheckstyleOperation`."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from pathlib import Path
from typing import Final, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

SRC_MAIN_JAVA: Final[Path] = Path("src", "main", "java")
SRC_TEST_JAVA: Final[Path] = Path("src", "test", "java")
LIB_COMPILE: Final[Path] = Path("lib", "compile")
LIB_TEST: Final[Path] = Path("lib", "test")
BUILD_MAIN: Final[Path] = Path("build", "main")
BUILD_TEST: Final[Path] = Path("build", "test")


@runtime_checkable
class ProjectLayout(Protocol):
    """Directories a host project exposes to the Checkstyle operation."""

    def work_directory(self) -> Path:
        """Return the directory the external process runs from."""

        raise NotImplementedError

    def lib_compile_directory(self) -> Path:
        """Return the directory holding compile-scope jars."""

        raise NotImplementedError

    def lib_test_directory(self) -> Path:
        """Return the directory holding test-scope jars, Checkstyle included."""

        raise NotImplementedError

    def build_main_directory(self) -> Path:
        """Return the compiled main classes directory."""

        raise NotImplementedError

    def build_test_directory(self) -> Path:
        """Return the compiled test classes directory."""

        raise NotImplementedError

    def src_main_java_directory(self) -> Path:
        """Return the default main source directory."""

        raise NotImplementedError

    def src_test_java_directory(self) -> Path:
        """Return the default test source directory."""

        raise NotImplementedError


class JavaProject(BaseModel):
    """Conventional Java project layout rooted at ``root``.

    Every directory may be overridden; relative overrides are anchored at
    ``root``.
    """

    model_config = ConfigDict(frozen=True)

    root: Path = Field(default_factory=Path.cwd)
    src_main_java: Path = SRC_MAIN_JAVA
    src_test_java: Path = SRC_TEST_JAVA
    lib_compile: Path = LIB_COMPILE
    lib_test: Path = LIB_TEST
    build_main: Path = BUILD_MAIN
    build_test: Path = BUILD_TEST

    def _under_root(self, path: Path) -> Path:
        anchored = path if path.is_absolute() else self.root / path
        return anchored.absolute()

    def work_directory(self) -> Path:
        return self.root.absolute()

    def lib_compile_directory(self) -> Path:
        return self._under_root(self.lib_compile)

    def lib_test_directory(self) -> Path:
        return self._under_root(self.lib_test)

    def build_main_directory(self) -> Path:
        return self._under_root(self.build_main)

    def build_test_directory(self) -> Path:
        return self._under_root(self.build_test)

    def src_main_java_directory(self) -> Path:
        return self._under_root(self.src_main_java)

    def src_test_java_directory(self) -> Path:
        return self._under_root(self.src_test_java)


__all__ = [
    "BUILD_MAIN",
    "BUILD_TEST",
    "JavaProject",
    "LIB_COMPILE",
    "LIB_TEST",
    "ProjectLayout",
    "SRC_MAIN_JAVA",
    "SRC_TEST_JAVA",
]

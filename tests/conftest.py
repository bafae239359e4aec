# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from checkstyle_bld.logging import PACKAGE_LOGGER
from checkstyle_bld.operation import CheckstyleOperation
from checkstyle_bld.project import JavaProject


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return a Java project skeleton and make it the current directory."""

    for relative in ("src/main/java", "src/test/java", "lib/compile", "lib/test", "build/main", "build/test"):
        (tmp_path / relative).mkdir(parents=True)
    monkeypatch.chdir(tmp_path)
    return Path.cwd()


@pytest.fixture
def project(project_root: Path) -> JavaProject:
    return JavaProject(root=project_root)


@pytest.fixture
def operation(project: JavaProject) -> CheckstyleOperation:
    return CheckstyleOperation().from_project(project)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handler changes made by CLI runs so ``caplog`` keeps working."""

    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, propagate, level = list(logger.handlers), logger.propagate, logger.level
    yield
    logger.handlers[:] = handlers
    logger.propagate = propagate
    logger.setLevel(level)

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the conventional Java project layout."""

from __future__ import annotations

from pathlib import Path

from checkstyle_bld.project import JavaProject, ProjectLayout


def test_conventional_layout(tmp_path: Path) -> None:
    project = JavaProject(root=tmp_path)

    assert project.work_directory() == tmp_path
    assert project.lib_compile_directory() == tmp_path / "lib" / "compile"
    assert project.lib_test_directory() == tmp_path / "lib" / "test"
    assert project.build_main_directory() == tmp_path / "build" / "main"
    assert project.build_test_directory() == tmp_path / "build" / "test"
    assert project.src_main_java_directory() == tmp_path / "src" / "main" / "java"
    assert project.src_test_java_directory() == tmp_path / "src" / "test" / "java"


def test_absolute_overrides_are_kept(tmp_path: Path) -> None:
    shared = tmp_path / "shared-libs"
    project = JavaProject(root=tmp_path / "app", lib_test=shared, build_main=Path("out/classes"))

    assert project.lib_test_directory() == shared
    assert project.build_main_directory() == tmp_path / "app" / "out" / "classes"


def test_default_root_is_current_directory(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert JavaProject().work_directory() == Path.cwd()


def test_java_project_satisfies_layout_protocol(tmp_path: Path) -> None:
    assert isinstance(JavaProject(root=tmp_path), ProjectLayout)

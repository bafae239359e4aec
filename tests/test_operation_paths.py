# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering source directories, exclude paths and exclude patterns."""

from __future__ import annotations

from pathlib import Path

import pytest

from checkstyle_bld.operation import CheckstyleOperation

FOO = "foo"
BAR = "bar"


@pytest.mark.parametrize(
    "arguments",
    [
        (FOO, BAR),
        (Path(FOO), Path(BAR)),
        ([FOO, BAR],),
        ([Path(FOO), Path(BAR)],),
        ((FOO,), Path(BAR)),
        (f"./{FOO}", f"{BAR}/"),
    ],
)
def test_source_dir_input_forms_are_equivalent(
    operation: CheckstyleOperation,
    project_root: Path,
    arguments: tuple[object, ...],
) -> None:
    operation.source_dir(*arguments)

    assert operation.source_directories == (str(project_root / BAR), str(project_root / FOO))


def test_source_dir_deduplicates_equivalent_paths(operation: CheckstyleOperation, project_root: Path) -> None:
    operation.source_dir(FOO).source_dir(Path(FOO)).source_dir(project_root / FOO).source_dir([f"./{FOO}"])

    assert operation.source_directories == (str(project_root / FOO),)


def test_source_dir_skips_blank_entries(operation: CheckstyleOperation, project_root: Path) -> None:
    operation.source_dir("", None, "  ", [FOO, "", None])

    assert operation.source_directories == (str(project_root / FOO),)


def test_source_dirs_render_sorted(operation: CheckstyleOperation, project_root: Path) -> None:
    operation.source_dir("zeta", "alpha", "mid")

    command = operation.construct_command()
    assert command[-3:] == [str(project_root / name) for name in ("alpha", "mid", "zeta")]


def test_exclude_stores_absolute_paths(operation: CheckstyleOperation, project_root: Path) -> None:
    operation.exclude(FOO, BAR)

    assert operation.excluded_paths == (project_root / FOO, project_root / BAR)


def test_exclude_deduplicates_input_forms(operation: CheckstyleOperation, project_root: Path) -> None:
    operation.exclude(FOO, Path(FOO), [project_root / FOO])

    assert operation.excluded_paths == (project_root / FOO,)


def test_exclude_non_existing_path_is_not_rendered(operation: CheckstyleOperation) -> None:
    operation.exclude(FOO, BAR)

    command = operation.construct_command()
    assert "-e" not in command


@pytest.mark.parametrize(
    "arguments",
    [
        ("src/main/java", "src/test/java"),
        (Path("src/main/java"), Path("src/test/java")),
        ([Path("src/main/java"), Path("src/test/java")],),
        (["src/main/java", "src/test/java"],),
    ],
)
def test_exclude_existing_paths_are_rendered(
    operation: CheckstyleOperation,
    project_root: Path,
    arguments: tuple[object, ...],
) -> None:
    operation.exclude(*arguments)

    command = operation.construct_command()
    rendered = " ".join(command)
    for relative in ("src/main/java", "src/test/java"):
        expected = str(project_root / relative)
        assert f"-e {expected}" in rendered
        positions = [index for index, token in enumerate(command) if token == expected]
        assert any(command[index - 1] == "-e" for index in positions)
    assert command.count("-e") == 2


def test_exclude_path_created_after_configuration_is_rendered(
    operation: CheckstyleOperation,
    project_root: Path,
) -> None:
    operation.exclude("generated")
    assert "-e" not in operation.construct_command()

    (project_root / "generated").mkdir()
    command = operation.construct_command()
    assert command[command.index("-e") + 1] == str(project_root / "generated")


def test_exclude_regex_collects_patterns(operation: CheckstyleOperation) -> None:
    operation.exclude_regex(FOO, BAR)

    assert operation.excluded_patterns == (FOO, BAR)


def test_exclude_regex_accepts_collections_and_drops_blanks(operation: CheckstyleOperation) -> None:
    operation.exclude_regex([FOO, "", "  "], None, BAR, FOO)

    assert operation.excluded_patterns == (FOO, BAR)


def test_exclude_regex_is_rendered(operation: CheckstyleOperation) -> None:
    operation.exclude_regex(r".*Generated\.java", BAR)

    command = operation.construct_command()
    rendered = " ".join(command)
    assert r"-x .*Generated\.java" in rendered
    assert f"-x {BAR}" in rendered
    assert command.count("-x") == 2

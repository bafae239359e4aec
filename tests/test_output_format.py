# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the Checkstyle output format enumeration."""

from __future__ import annotations

import pytest

from checkstyle_bld.output_format import DEFAULT_OUTPUT_FORMAT, OutputFormat


def test_labels_are_lower_case() -> None:
    assert [member.label for member in OutputFormat] == ["xml", "sarif", "plain"]


@pytest.mark.parametrize("label", ["xml", "XML", " Xml "])
def test_from_label_is_case_insensitive(label: str) -> None:
    assert OutputFormat.from_label(label) is OutputFormat.XML


def test_from_label_accepts_members() -> None:
    assert OutputFormat.from_label(OutputFormat.SARIF) is OutputFormat.SARIF


def test_from_label_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="xml, sarif, plain"):
        OutputFormat.from_label("html")


def test_default_is_plain() -> None:
    assert DEFAULT_OUTPUT_FORMAT is OutputFormat.PLAIN

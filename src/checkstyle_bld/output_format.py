# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Checkstyle report formats."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Enumerate the output formats understood by Checkstyle's ``-f`` flag."""

    XML = "xml"
    SARIF = "sarif"
    PLAIN = "plain"

    @property
    def label(self) -> str:
        """Return the lower-case label passed verbatim on the command line."""

        return self.value

    @classmethod
    def from_label(cls, label: str | OutputFormat) -> OutputFormat:
        """Return the format matching ``label`` regardless of case.

        Args:
            label: Format label such as ``"XML"`` or ``"sarif"``, or a member.

        Returns:
            OutputFormat: Matching enumeration member.

        Raises:
            ValueError: If ``label`` does not name a known format.
        """

        if isinstance(label, OutputFormat):
            return label
        normalized = label.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown output format '{label}' (expected one of: {choices})")


DEFAULT_OUTPUT_FORMAT = OutputFormat.PLAIN

__all__ = ["DEFAULT_OUTPUT_FORMAT", "OutputFormat"]

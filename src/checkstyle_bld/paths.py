# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Adapters that collapse path-like inputs into one canonical form."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path

Pathish = str | PathLike[str]
PathArgument = Pathish | Iterable[Pathish] | None
TextArgument = str | Iterable[str] | None


def is_blank(value: object) -> bool:
    """Return ``True`` when ``value`` is ``None`` or an all-whitespace string."""

    return value is None or (isinstance(value, str) and not value.strip())


def absolute_path(path: Pathish) -> Path:
    """Return ``path`` as an absolute, lexically normalised :class:`Path`.

    Symlinks are not resolved so the rendered location matches what the caller
    supplied.

    Args:
        path: Relative or absolute filesystem location.

    Returns:
        Path: Absolute variant of ``path`` anchored at the current directory.
    """

    return Path(os.path.abspath(os.fspath(path)))


def location_text(location: Pathish) -> str:
    """Return the command-line text for a single file location.

    Plain strings are kept verbatim because Checkstyle also resolves them as
    classpath resources; ``PathLike`` values become absolute paths.

    Args:
        location: File location supplied by the caller.

    Returns:
        str: Text placed after the option flag.
    """

    if isinstance(location, str):
        return location
    return str(absolute_path(location))


def iter_path_arguments(values: Iterable[PathArgument]) -> Iterator[Path]:
    """Yield absolute paths from a mix of single values and collections.

    Blank strings and ``None`` entries are skipped silently.

    Args:
        values: Variadic arguments where each entry is a path or an iterable
            of paths.

    Yields:
        Path: Absolute path for every usable entry.
    """

    for value in values:
        if is_blank(value):
            continue
        if isinstance(value, (str, PathLike)):
            yield absolute_path(value)
            continue
        for entry in value:
            if not is_blank(entry):
                yield absolute_path(entry)


def iter_text_arguments(values: Iterable[TextArgument]) -> Iterator[str]:
    """Yield non-blank strings from a mix of single values and collections.

    Args:
        values: Variadic arguments where each entry is a string or an iterable
            of strings.

    Yields:
        str: Every non-blank string in encounter order.
    """

    for value in values:
        if is_blank(value):
            continue
        if isinstance(value, str):
            yield value
            continue
        for entry in value:
            if not is_blank(entry):
                yield entry


__all__ = [
    "PathArgument",
    "Pathish",
    "TextArgument",
    "absolute_path",
    "is_blank",
    "iter_path_arguments",
    "iter_text_arguments",
    "location_text",
]

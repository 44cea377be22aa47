"""Shared utilities for archmap."""

from __future__ import annotations

from pathlib import PurePath


def normalize_identifier(file_path: str | PurePath) -> str:
    """Normalize a module identifier to a POSIX-style path string.

    Args:
        file_path: File identifier as produced by the upstream parser
            (e.g., "C:\\repo\\src\\a.ts" or PurePath object)

    Returns:
        Identifier with forward slashes, no duplicate separators and no
        trailing separator.

    Examples:
        >>> normalize_identifier("src\\\\core\\\\a.ts")
        'src/core/a.ts'
        >>> normalize_identifier("/repo//src/b.ts")
        '/repo/src/b.ts'
        >>> normalize_identifier("/repo/src/")
        '/repo/src'
    """
    path_str = file_path.as_posix() if isinstance(file_path, PurePath) else str(file_path)
    path_str = path_str.replace("\\", "/")

    leading = "/" if path_str.startswith("/") else ""
    parts = [part for part in path_str.split("/") if part]
    return leading + "/".join(parts)


def display_name(file_path: str) -> str:
    """Return the last path segment of an identifier for human output."""
    return file_path.rstrip("/").rsplit("/", 1)[-1]

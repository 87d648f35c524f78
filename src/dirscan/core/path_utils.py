"""
Path and pattern-list utilities for dirscan.

Provides basedir validation, comma-separated pattern list parsing and
conversion of relative paths to the host separator.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class PathValidationResult:
    """Result of path validation.

    Attributes:
        valid: True if the path is usable as a scan basedir.
        error_message: Human-readable error message if validation failed.
    """
    valid: bool
    error_message: Optional[str] = None


def validate_scan_basedir(path: str | Path | None) -> PathValidationResult:
    """
    Validate that a path can serve as the base directory of a scan.

    Performs the following checks:
    1. A path was given
    2. Path exists
    3. Path is a directory

    Args:
        path: Path to validate (string or Path object).

    Returns:
        PathValidationResult with valid=True if all checks pass,
        or valid=False with an appropriate error message.
    """
    if path is None:
        return PathValidationResult(valid=False, error_message="No basedir set")

    try:
        p = Path(path)

        if not p.exists():
            return PathValidationResult(
                valid=False,
                error_message=f"Basedir '{path}' does not exist"
            )

        if not p.is_dir():
            return PathValidationResult(
                valid=False,
                error_message=f"Basedir '{path}' is not a directory"
            )

        return PathValidationResult(valid=True)

    except (OSError, ValueError) as e:
        return PathValidationResult(
            valid=False,
            error_message=f"Invalid basedir '{path}': {e}"
        )


def split_pattern_list(patterns: str | None) -> list[str]:
    """
    Split a comma-separated pattern list.

    Whitespace (including newlines) around each entry is trimmed and blank
    entries are dropped, so ``"a,\\n ,b\\n,"`` yields ``["a", "b"]``.

    Args:
        patterns: Comma-separated patterns, or None

    Returns:
        List of non-blank patterns in order
    """
    if not patterns:
        return []
    return [entry.strip() for entry in patterns.split(",") if entry.strip()]


def to_platform_path(relative: str) -> str:
    """Rewrite a ``/``-joined relative path with the host separator."""
    if os.sep == "/":
        return relative
    return relative.replace("/", os.sep)


def join_relative(parent: str, name: str) -> str:
    """Join a ``/``-separated relative parent path and an entry name."""
    return f"{parent}/{name}" if parent else name

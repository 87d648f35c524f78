"""
Symbolic link queries used by the directory scanner.

The scanner never breaks symlink cycles itself; these helpers only tell it
whether an entry, or the directory holding it, is reached through a link.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryInfo:
    """
    Filesystem classification of a directory entry.

    Attributes:
        path: Path to the entry
        is_symlink: True if the entry itself is a symbolic link
        is_dir: True if the entry is a directory, following links. A dangling
            link is not a directory.
    """

    path: Path
    is_symlink: bool
    is_dir: bool


def inspect_entry(path: Path) -> EntryInfo:
    """
    Classify a directory entry.

    Errors while following a link (dangling target, permission denied on the
    target) classify the entry as a non-directory.
    """
    is_symlink = path.is_symlink()
    try:
        is_dir = path.is_dir()
    except OSError as e:
        logger.debug(f"Could not stat {path}: {e}")
        is_dir = False
    return EntryInfo(path=path, is_symlink=is_symlink, is_dir=is_dir)


def is_symbolic_link(parent: Path | str, name: str) -> bool:
    """
    Check if the entry ``name`` under ``parent`` is itself a symbolic link.

    Args:
        parent: Directory holding the entry
        name: Entry name

    Returns:
        True if the entry is a symbolic link (dangling links included)
    """
    return (Path(parent) / name).is_symlink()


def is_parent_symbolic_link(
    parent: Path | str, name: str, basedir: Path | str | None = None
) -> bool:
    """
    Check if ``parent`` is reached through a symbolic link.

    Without ``basedir`` only ``parent`` itself is checked. With ``basedir``
    every directory from just below ``basedir`` down to ``parent`` is
    checked, so an entry that is only visible because some followed link
    sits on its ancestry is detected. Links above ``basedir`` are ignored.

    Args:
        parent: Directory holding the entry
        name: Entry name (the entry itself is not examined)
        basedir: Scan root that bounds the ancestry walk

    Returns:
        True if ``parent`` or, with ``basedir``, any directory between
        ``basedir`` and ``parent`` is a symbolic link
    """
    parent = Path(parent)

    if basedir is None:
        return parent.is_symlink()

    basedir = Path(basedir)
    try:
        relative = parent.absolute().relative_to(basedir.absolute())
    except ValueError:
        logger.debug(f"{parent} is not below {basedir}; checking parent only")
        return parent.is_symlink()

    current = basedir
    for part in relative.parts:
        current = current / part
        if current.is_symlink():
            return True
    return False

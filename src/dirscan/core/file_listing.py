"""
String-configured file listing on top of DirectoryScanner.

Callers that keep include/exclude patterns as comma-separated strings use
these helpers instead of building pattern sets themselves. Default excludes
are always applied.
"""

import logging
import os
from pathlib import Path

from dirscan.core.directory_scanner import DirectoryScanner
from dirscan.core.path_utils import split_pattern_list

logger = logging.getLogger(__name__)


def get_file_and_directory_names(
    directory: Path | str,
    includes: str | None,
    excludes: str | None,
    include_basedir: bool = True,
    case_sensitive: bool = True,
    get_files: bool = True,
    get_directories: bool = True,
) -> list[str]:
    """
    List files and/or directories under ``directory`` matching the patterns.

    Args:
        directory: Base directory of the scan
        includes: Comma-separated include patterns (None or blank includes all)
        excludes: Comma-separated exclude patterns
        include_basedir: Prefix each result with ``directory``
        case_sensitive: Case sensitivity of pattern matching
        get_files: Return included files
        get_directories: Return included directories

    Returns:
        Paths in scan order: files first, then directories

    Raises:
        ScanConfigurationError: If ``directory`` is not an existing directory
        PatternCompileError: If a regex pattern is malformed
    """
    scanner = DirectoryScanner(
        basedir=directory,
        includes=split_pattern_list(includes),
        excludes=split_pattern_list(excludes),
        use_default_excludes=True,
        case_sensitive=case_sensitive,
    )
    result = scanner.scan()

    names: list[str] = []
    if get_files:
        names.extend(result.included_files)
    if get_directories:
        names.extend(result.included_directories)

    if include_basedir:
        base = str(directory)
        names = [os.path.join(base, name) if name else base for name in names]

    logger.debug(f"Listed {len(names)} entries under {directory}")
    return names


def get_file_names(
    directory: Path | str,
    includes: str | None,
    excludes: str | None,
    include_basedir: bool = True,
    case_sensitive: bool = True,
) -> list[str]:
    """List included file names under ``directory``."""
    return get_file_and_directory_names(
        directory, includes, excludes, include_basedir, case_sensitive, True, False
    )


def get_directory_names(
    directory: Path | str,
    includes: str | None,
    excludes: str | None,
    include_basedir: bool = True,
    case_sensitive: bool = True,
) -> list[str]:
    """List included directory names under ``directory``."""
    return get_file_and_directory_names(
        directory, includes, excludes, include_basedir, case_sensitive, False, True
    )


def get_files(
    directory: Path | str,
    includes: str | None,
    excludes: str | None,
    include_basedir: bool = True,
) -> list[Path]:
    """
    List included files under ``directory`` as Path objects.

    With ``include_basedir`` false the Paths are relative to ``directory``.
    """
    return [Path(name) for name in get_file_names(directory, includes, excludes, include_basedir)]

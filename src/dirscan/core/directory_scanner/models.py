"""
Data models for the directory scanner module.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from dirscan.core.default_excludes import get_default_exclude_patterns
from dirscan.core.match_patterns import MatchPatterns


class ScanState(str, Enum):
    """Lifecycle of a scanner instance."""

    NOT_YET_SCANNED = "not_yet_scanned"
    SCANNING = "scanning"
    SCANNED = "scanned"


class ScanAction(str, Enum):
    """Decision returned by a ScanConductor for each visited entry."""

    CONTINUE = "continue"
    # Skip the remaining files of the current directory
    NO_MORE_FILES = "no_more_files"
    # Do not descend into the remaining subdirectories of the current directory
    NO_MORE_DIRECTORIES = "no_more_directories"
    ABORT = "abort"


@dataclass(frozen=True)
class ScanWarning:
    """
    Non-fatal problem met during a scan.

    Attributes:
        path: Relative path (host separator) of the directory concerned
        message: Description of the failure
    """

    path: str
    message: str


PatternInput = MatchPatterns | Iterable[str] | None


def compile_patterns(patterns: PatternInput) -> MatchPatterns:
    """
    Compile raw pattern strings, trimming surrounding whitespace.

    An already-compiled MatchPatterns is returned unchanged; None yields an
    empty set.

    Raises:
        PatternCompileError: If any pattern is malformed
    """
    if isinstance(patterns, MatchPatterns):
        return patterns
    if patterns is None:
        return MatchPatterns()
    return MatchPatterns.from_iterable(pattern.strip() for pattern in patterns)


@dataclass(frozen=True)
class ScanConfiguration:
    """
    Immutable configuration of one scan.

    Attributes:
        basedir: Directory the scan starts from
        includes: Include patterns; an empty set includes everything
        excludes: User exclude patterns
        use_default_excludes: Merge DEFAULT_EXCLUDES into the exclude set
        case_sensitive: Case sensitivity of every pattern comparison
        follow_symlinks: Descend into symlinked directories
    """

    basedir: Optional[Path]
    includes: MatchPatterns = field(default_factory=MatchPatterns)
    excludes: MatchPatterns = field(default_factory=MatchPatterns)
    use_default_excludes: bool = True
    case_sensitive: bool = True
    follow_symlinks: bool = True

    @classmethod
    def create(
        cls,
        basedir: Path | str | None,
        includes: PatternInput = None,
        excludes: PatternInput = None,
        use_default_excludes: bool = True,
        case_sensitive: bool = True,
        follow_symlinks: bool = True,
    ) -> "ScanConfiguration":
        """
        Build a configuration, compiling raw pattern strings.

        Raises:
            PatternCompileError: If any pattern is malformed
        """
        return cls(
            basedir=Path(basedir) if basedir is not None else None,
            includes=compile_patterns(includes),
            excludes=compile_patterns(excludes),
            use_default_excludes=use_default_excludes,
            case_sensitive=case_sensitive,
            follow_symlinks=follow_symlinks,
        )

    @property
    def effective_excludes(self) -> MatchPatterns:
        """User excludes, with the default excludes appended when enabled."""
        if self.use_default_excludes:
            return self.excludes.merge(get_default_exclude_patterns())
        return self.excludes


@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of a scan. Every path is relative to the basedir and uses the
    host separator; the basedir itself is the empty string.
    """

    included_files: tuple[str, ...] = ()
    included_directories: tuple[str, ...] = ()
    excluded_files: tuple[str, ...] = ()
    excluded_directories: tuple[str, ...] = ()
    not_included_files: tuple[str, ...] = ()
    not_included_directories: tuple[str, ...] = ()
    not_followed_symlinks: tuple[str, ...] = ()
    warnings: tuple[ScanWarning, ...] = ()

    @property
    def everything_included(self) -> bool:
        return not (
            self.excluded_files
            or self.excluded_directories
            or self.not_included_files
            or self.not_included_directories
        )


@dataclass
class ScanResultBuilder:
    """Mutable accumulator filled during traversal."""

    included_files: set[str] = field(default_factory=set)
    included_directories: set[str] = field(default_factory=set)
    excluded_files: set[str] = field(default_factory=set)
    excluded_directories: set[str] = field(default_factory=set)
    not_included_files: set[str] = field(default_factory=set)
    not_included_directories: set[str] = field(default_factory=set)
    not_followed_symlinks: set[str] = field(default_factory=set)
    warnings: list[ScanWarning] = field(default_factory=list)

    def build(self) -> ScanResult:
        """Sort and freeze the collected paths."""
        return ScanResult(
            included_files=tuple(sorted(self.included_files)),
            included_directories=tuple(sorted(self.included_directories)),
            excluded_files=tuple(sorted(self.excluded_files)),
            excluded_directories=tuple(sorted(self.excluded_directories)),
            not_included_files=tuple(sorted(self.not_included_files)),
            not_included_directories=tuple(sorted(self.not_included_directories)),
            not_followed_symlinks=tuple(sorted(self.not_followed_symlinks)),
            warnings=tuple(self.warnings),
        )

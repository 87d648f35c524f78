"""
DirectoryScanner implementation for pattern-driven tree walking.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from dirscan.core.errors import ScanConfigurationError, ScannerStateError
from dirscan.core.match_patterns import MatchPatterns
from dirscan.core.path_utils import join_relative, to_platform_path, validate_scan_basedir
from dirscan.core.symlinks import (
    EntryInfo,
    inspect_entry,
    is_parent_symbolic_link,
    is_symbolic_link,
)

from .interfaces import ScanConductor, ScannerInterface
from .models import (
    PatternInput,
    ScanAction,
    ScanConfiguration,
    ScanResult,
    ScanResultBuilder,
    ScanState,
    ScanWarning,
    compile_patterns,
)

logger = logging.getLogger(__name__)


class _Classification(str, Enum):
    INCLUDED = "included"
    EXCLUDED = "excluded"
    NOT_INCLUDED = "not_included"


class _ScanAborted(Exception):
    """Raised internally when a ScanConductor answers ABORT."""


@dataclass
class _ScanContext:
    """State shared by one scan() call."""

    config: ScanConfiguration
    excludes: MatchPatterns
    builder: ScanResultBuilder


class DirectoryScanner(ScannerInterface):
    """
    Concrete implementation of ScannerInterface.

    Walks the tree below a base directory and sorts every visited entry into
    included, excluded or not-included lists:
    - An entry is included if some include pattern matches it (or there are
      no include patterns) and no exclude pattern matches it
    - Nothing below an excluded directory is visited
    - Directories that no include pattern could reach are never listed
    - Symlinked directories are entered only when follow_symlinks is set

    Example:
        >>> scanner = DirectoryScanner(basedir="project", includes=["**/*.py"])
        >>> result = scanner.scan()
        >>> result.included_files
        ('pkg/__init__.py', 'setup.py')
    """

    def __init__(
        self,
        basedir: Path | str | None = None,
        includes: PatternInput = None,
        excludes: PatternInput = None,
        use_default_excludes: bool = True,
        case_sensitive: bool = True,
        follow_symlinks: bool = True,
        scan_conductor: ScanConductor | None = None,
        prune: bool = True,
    ):
        """
        Initialize the DirectoryScanner.

        Args:
            basedir: Directory to scan; may also be set later via set_basedir().
            includes: Include patterns (raw strings or a compiled set).
                      None or empty includes everything.
            excludes: Exclude patterns (raw strings or a compiled set).
            use_default_excludes: Merge the VCS/editor default excludes.
            case_sensitive: Case sensitivity of all pattern comparisons.
            follow_symlinks: Descend into directories reached via symlinks.
            scan_conductor: Optional callback steering the traversal.
            prune: Skip directories no include pattern could reach. Turning
                   this off never changes which entries are included.

        Raises:
            PatternCompileError: If any pattern is malformed
        """
        self._basedir: Path | None = Path(basedir) if basedir is not None else None
        self._includes = compile_patterns(includes)
        self._excludes = compile_patterns(excludes)
        self._use_default_excludes = use_default_excludes
        self._case_sensitive = case_sensitive
        self._follow_symlinks = follow_symlinks
        self._scan_conductor = scan_conductor
        self._prune = prune

        self._state = ScanState.NOT_YET_SCANNED
        self._result: ScanResult | None = None

    @classmethod
    def from_configuration(
        cls,
        config: ScanConfiguration,
        scan_conductor: ScanConductor | None = None,
        prune: bool = True,
    ) -> "DirectoryScanner":
        """Create a scanner from an already-compiled ScanConfiguration."""
        return cls(
            basedir=config.basedir,
            includes=config.includes,
            excludes=config.excludes,
            use_default_excludes=config.use_default_excludes,
            case_sensitive=config.case_sensitive,
            follow_symlinks=config.follow_symlinks,
            scan_conductor=scan_conductor,
            prune=prune,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_basedir(self, basedir: Path | str) -> None:
        """Set the directory the next scan starts from."""
        self._basedir = Path(basedir)

    def set_includes(self, includes: PatternInput) -> None:
        """Set include patterns; compiled immediately."""
        self._includes = compile_patterns(includes)

    def set_excludes(self, excludes: PatternInput) -> None:
        """Set exclude patterns; compiled immediately."""
        self._excludes = compile_patterns(excludes)

    def add_default_excludes(self) -> None:
        """Enable the default VCS/editor excludes for the next scan."""
        self._use_default_excludes = True

    def set_use_default_excludes(self, use_default_excludes: bool) -> None:
        self._use_default_excludes = use_default_excludes

    def set_case_sensitive(self, case_sensitive: bool) -> None:
        self._case_sensitive = case_sensitive

    def set_follow_symlinks(self, follow_symlinks: bool) -> None:
        self._follow_symlinks = follow_symlinks

    def set_scan_conductor(self, scan_conductor: ScanConductor | None) -> None:
        self._scan_conductor = scan_conductor

    @property
    def configuration(self) -> ScanConfiguration:
        """Snapshot of the current settings as an immutable configuration."""
        return ScanConfiguration(
            basedir=self._basedir,
            includes=self._includes,
            excludes=self._excludes,
            use_default_excludes=self._use_default_excludes,
            case_sensitive=self._case_sensitive,
            follow_symlinks=self._follow_symlinks,
        )

    @property
    def basedir(self) -> Path | None:
        return self._basedir

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def is_case_sensitive(self) -> bool:
        return self._case_sensitive

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def scan(self) -> ScanResult:
        """
        Scan the base directory, replacing any previous result.

        Returns:
            Finalized ScanResult (sorted, deduplicated)

        Raises:
            ScanConfigurationError: If the basedir is unset, missing or not
                a directory

        Anything raised by the scan conductor propagates; the scanner is
        then back in NOT_YET_SCANNED with no result.
        """
        config = self.configuration
        validation = validate_scan_basedir(config.basedir)
        if not validation.valid:
            logger.error(f"Cannot scan: {validation.error_message}")
            raise ScanConfigurationError(validation.error_message)

        self._state = ScanState.SCANNING
        self._result = None

        ctx = _ScanContext(
            config=config,
            excludes=config.effective_excludes,
            builder=ScanResultBuilder(),
        )

        try:
            self._scan_root(ctx)
        except _ScanAborted:
            logger.debug(f"Scan of {config.basedir} aborted by scan conductor")
        except Exception as e:
            # Nothing from the failed scan is kept
            logger.error(f"Scan of {config.basedir} failed: {e}")
            self._state = ScanState.NOT_YET_SCANNED
            raise

        self._result = ctx.builder.build()
        self._state = ScanState.SCANNED

        logger.debug(
            f"Scanned {config.basedir}: {len(self._result.included_files)} files, "
            f"{len(self._result.included_directories)} directories included"
        )
        return self._result

    def _classify(self, ctx: _ScanContext, rel_path: str) -> _Classification:
        config = ctx.config
        if config.includes and not config.includes.matches(rel_path, config.case_sensitive):
            return _Classification.NOT_INCLUDED
        if ctx.excludes.matches(rel_path, config.case_sensitive):
            return _Classification.EXCLUDED
        return _Classification.INCLUDED

    def _could_hold_included(self, ctx: _ScanContext, rel_path: str) -> bool:
        includes = ctx.config.includes
        if not self._prune or not includes:
            return True
        return includes.matches_pattern_start(rel_path, ctx.config.case_sensitive)

    def _conduct(self, directory: bool, rel_path: str, path: Path) -> ScanAction:
        if self._scan_conductor is None:
            return ScanAction.CONTINUE
        name = to_platform_path(rel_path)
        if directory:
            action = self._scan_conductor.visit_directory(name, path)
        else:
            action = self._scan_conductor.visit_file(name, path)
        if action is ScanAction.ABORT:
            raise _ScanAborted()
        return action

    def _record_directory(self, ctx: _ScanContext, rel_path: str) -> _Classification:
        classification = self._classify(ctx, rel_path)
        name = to_platform_path(rel_path)
        builder = ctx.builder
        if classification is _Classification.INCLUDED:
            builder.included_directories.add(name)
        elif classification is _Classification.EXCLUDED:
            builder.excluded_directories.add(name)
        else:
            builder.not_included_directories.add(name)
        return classification

    def _record_file(self, ctx: _ScanContext, rel_path: str) -> None:
        classification = self._classify(ctx, rel_path)
        name = to_platform_path(rel_path)
        builder = ctx.builder
        if classification is _Classification.INCLUDED:
            builder.included_files.add(name)
        elif classification is _Classification.EXCLUDED:
            builder.excluded_files.add(name)
        else:
            builder.not_included_files.add(name)

    def _scan_root(self, ctx: _ScanContext) -> None:
        basedir = ctx.config.basedir
        self._conduct(True, "", basedir)
        self._record_directory(ctx, "")
        # The basedir is always entered, whatever its own classification
        self._scan_directory(ctx, basedir, "")

    def _scan_directory(self, ctx: _ScanContext, directory: Path, rel_path: str) -> None:
        """
        List one directory and process its entries in name order.

        Args:
            ctx: Per-scan state
            directory: Directory on disk
            rel_path: Its path relative to the basedir, ``/``-joined
        """
        try:
            names = sorted(os.listdir(directory))
        except PermissionError as e:
            self._warn(ctx, rel_path, f"Permission denied accessing directory: {directory} - {e}")
            return
        except OSError as e:
            self._warn(ctx, rel_path, f"Error accessing directory: {directory} - {e}")
            return

        no_more_files = False
        no_more_directories = False

        for name in names:
            child_rel = join_relative(rel_path, name)
            info = inspect_entry(directory / name)

            if info.is_dir:
                if no_more_directories:
                    continue
                action = self._conduct(True, child_rel, info.path)
                self._process_directory(ctx, info, child_rel)
            else:
                if no_more_files:
                    continue
                action = self._conduct(False, child_rel, info.path)
                self._record_file(ctx, child_rel)

            if action is ScanAction.NO_MORE_FILES:
                no_more_files = True
            elif action is ScanAction.NO_MORE_DIRECTORIES:
                no_more_directories = True

    def _process_directory(self, ctx: _ScanContext, info: EntryInfo, rel_path: str) -> None:
        classification = self._record_directory(ctx, rel_path)

        if info.is_symlink and not ctx.config.follow_symlinks:
            logger.debug(f"Not following symlinked directory (follow_symlinks=False): {info.path}")
            ctx.builder.not_followed_symlinks.add(to_platform_path(rel_path))
            return

        if classification is _Classification.EXCLUDED or (
            classification is _Classification.NOT_INCLUDED
            and ctx.excludes.matches(rel_path, ctx.config.case_sensitive)
        ):
            logger.debug(f"Not descending into excluded directory: {info.path}")
            return

        if not self._could_hold_included(ctx, rel_path):
            logger.debug(f"Pruned directory no include pattern can reach: {info.path}")
            return

        self._scan_directory(ctx, info.path, rel_path)

    def _warn(self, ctx: _ScanContext, rel_path: str, message: str) -> None:
        logger.warning(message)
        ctx.builder.warnings.append(ScanWarning(path=to_platform_path(rel_path), message=message))

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    @property
    def result(self) -> ScanResult:
        """
        Result of the last scan.

        Raises:
            ScannerStateError: If scan() has not completed yet
        """
        if self._result is None:
            raise ScannerStateError("scan() must be called before reading results")
        return self._result

    def get_included_files(self) -> list[str]:
        return list(self.result.included_files)

    def get_included_directories(self) -> list[str]:
        return list(self.result.included_directories)

    def get_excluded_files(self) -> list[str]:
        return list(self.result.excluded_files)

    def get_excluded_directories(self) -> list[str]:
        return list(self.result.excluded_directories)

    def get_not_included_files(self) -> list[str]:
        return list(self.result.not_included_files)

    def get_not_included_directories(self) -> list[str]:
        return list(self.result.not_included_directories)

    def get_not_followed_symlinks(self) -> list[str]:
        return list(self.result.not_followed_symlinks)

    def get_warnings(self) -> list[ScanWarning]:
        return list(self.result.warnings)

    def is_everything_included(self) -> bool:
        """True if the last scan neither excluded nor left out any entry."""
        return self.result.everything_included

    # ------------------------------------------------------------------
    # Symlink queries
    # ------------------------------------------------------------------

    def is_symbolic_link(self, parent: Path | str, name: str) -> bool:
        """Check if the entry ``name`` under ``parent`` is a symbolic link."""
        return is_symbolic_link(parent, name)

    def is_parent_symbolic_link(self, parent: Path | str, name: str) -> bool:
        """
        Check if ``parent`` is reached through a symbolic link.

        When a basedir is set, every directory between it and ``parent`` is
        examined; otherwise only ``parent`` itself.
        """
        return is_parent_symbolic_link(parent, name, self._basedir)

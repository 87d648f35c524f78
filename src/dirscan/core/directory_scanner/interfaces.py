"""
Abstract interfaces for directory scanning.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from .models import ScanAction, ScanResult


class ScannerInterface(ABC):
    """
    Abstract interface for pattern-driven directory scanners.

    Implementations walk a base directory and classify every visited entry
    as included, excluded or not included.
    """

    @abstractmethod
    def scan(self) -> ScanResult:
        """
        Scan the configured base directory.

        Returns:
            The finalized ScanResult

        Notes:
            - Re-running scan() discards the previous result
            - Unreadable directories are reported as warnings, not errors
        """
        pass

    @abstractmethod
    def get_included_files(self) -> list[str]:
        """Return included files relative to the basedir."""
        pass

    @abstractmethod
    def get_included_directories(self) -> list[str]:
        """Return included directories relative to the basedir."""
        pass


class ScanConductor(ABC):
    """
    Callback consulted for every directory and file the scanner visits.

    Directories are reported before their contents. The returned ScanAction
    steers the rest of the traversal.
    """

    @abstractmethod
    def visit_directory(self, name: str, directory: Path) -> ScanAction:
        """Called for each directory; ``name`` is its relative path."""
        pass

    @abstractmethod
    def visit_file(self, name: str, file: Path) -> ScanAction:
        """Called for each file; ``name`` is its relative path."""
        pass

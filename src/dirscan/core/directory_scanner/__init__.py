"""
DirectoryScanner module for dirscan.

Provides pattern-driven recursive directory scanning with include/exclude
sets, default excludes, traversal pruning and symlink policy.
"""

from .interfaces import ScanConductor, ScannerInterface
from .models import (
    ScanAction,
    ScanConfiguration,
    ScanResult,
    ScanResultBuilder,
    ScanState,
    ScanWarning,
    compile_patterns,
)
from .scanner import DirectoryScanner

__all__ = [
    # Main classes
    "DirectoryScanner",
    "ScannerInterface",
    "ScanConductor",
    # Models
    "ScanAction",
    "ScanConfiguration",
    "ScanResult",
    "ScanResultBuilder",
    "ScanState",
    "ScanWarning",
    "compile_patterns",
]

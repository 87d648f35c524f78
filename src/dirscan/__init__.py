"""
dirscan - Ant-style include/exclude directory scanning.
"""

from dirscan.core import (
    DEFAULT_EXCLUDES,
    DirectoryScanner,
    MatchPatterns,
    PatternCompileError,
    ScanConfiguration,
    ScanConfigurationError,
    ScanResult,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_EXCLUDES",
    "DirectoryScanner",
    "MatchPatterns",
    "PatternCompileError",
    "ScanConfiguration",
    "ScanConfigurationError",
    "ScanResult",
    "__version__",
]

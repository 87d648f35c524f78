"""
Core Layer - Pattern syntax, glob matching, pattern sets, and directory scanning.
"""

from dirscan.core.config import (
    DirscanConfig,
    LoggingConfig,
    ScanSettings,
    load_config,
)
from dirscan.core.default_excludes import (
    DEFAULT_EXCLUDES,
    get_default_exclude_patterns,
    get_default_excludes,
    get_default_excludes_as_string,
)
from dirscan.core.directory_scanner import (
    DirectoryScanner,
    ScanAction,
    ScanConductor,
    ScanConfiguration,
    ScannerInterface,
    ScanResult,
    ScanState,
    ScanWarning,
)
from dirscan.core.errors import (
    DirscanError,
    PatternCompileError,
    ScanConfigurationError,
    ScannerStateError,
)
from dirscan.core.match_patterns import (
    MatchPattern,
    MatchPatterns,
    match_path,
    match_pattern_start,
)
from dirscan.core.pattern_syntax import (
    ANT_HANDLER_PREFIX,
    PATTERN_HANDLER_SUFFIX,
    REGEX_HANDLER_PREFIX,
    HandlerKind,
    parse_pattern,
)

__all__ = [
    # Config
    "DirscanConfig",
    "ScanSettings",
    "LoggingConfig",
    "load_config",
    # Errors
    "DirscanError",
    "PatternCompileError",
    "ScanConfigurationError",
    "ScannerStateError",
    # Pattern syntax
    "ANT_HANDLER_PREFIX",
    "REGEX_HANDLER_PREFIX",
    "PATTERN_HANDLER_SUFFIX",
    "HandlerKind",
    "parse_pattern",
    # Patterns
    "MatchPattern",
    "MatchPatterns",
    "match_path",
    "match_pattern_start",
    # Default excludes
    "DEFAULT_EXCLUDES",
    "get_default_excludes",
    "get_default_exclude_patterns",
    "get_default_excludes_as_string",
    # DirectoryScanner
    "DirectoryScanner",
    "ScannerInterface",
    "ScanConductor",
    "ScanAction",
    "ScanConfiguration",
    "ScanResult",
    "ScanState",
    "ScanWarning",
]

"""
Default exclude patterns for version-control and editor artifacts.

The table is a process-wide constant. Scans merge it by value into their
own exclude set when default excludes are enabled; it is never mutated.
"""

from dirscan.core.match_patterns import MatchPatterns

DEFAULT_EXCLUDES: tuple[str, ...] = (
    # Miscellaneous typical temporary files
    "**/*~",
    "**/#*#",
    "**/.#*",
    "**/%*%",
    "**/._*",
    "**/.repository/**",
    # CVS
    "**/CVS",
    "**/CVS/**",
    "**/.cvsignore",
    # RCS
    "**/RCS",
    "**/RCS/**",
    # SCCS
    "**/SCCS",
    "**/SCCS/**",
    # Visual SourceSafe
    "**/vssver.scc",
    # MKS
    "**/project.pj",
    # Subversion
    "**/.svn",
    "**/.svn/**",
    # Arch
    "**/.arch-ids",
    "**/.arch-ids/**",
    # Bazaar
    "**/.bzr",
    "**/.bzr/**",
    # SurroundSCM
    "**/.MySCMServerInfo",
    # Mac
    "**/.DS_Store",
    # Serena Dimensions
    "**/.metadata",
    "**/.metadata/**",
    # Mercurial
    "**/.hg",
    "**/.hg/**",
    # git
    "**/.git",
    "**/.git/**",
    "**/.gitignore",
    # BitKeeper
    "**/BitKeeper",
    "**/BitKeeper/**",
    "**/ChangeSet",
    "**/ChangeSet/**",
    # darcs
    "**/_darcs",
    "**/_darcs/**",
    "**/.darcsrepo",
    "**/.darcsrepo/**",
    "**/-darcs-backup*",
    "**/.darcs-temp-mail",
)

_DEFAULT_EXCLUDE_PATTERNS = MatchPatterns.from_iterable(DEFAULT_EXCLUDES)


def get_default_excludes() -> list[str]:
    """Return a copy of the default exclude pattern strings."""
    return list(DEFAULT_EXCLUDES)


def get_default_exclude_patterns() -> MatchPatterns:
    """Return the compiled default exclude set (shared, read-only)."""
    return _DEFAULT_EXCLUDE_PATTERNS


def get_default_excludes_as_string() -> str:
    """Return the default excludes as a comma-separated list."""
    return ",".join(DEFAULT_EXCLUDES)

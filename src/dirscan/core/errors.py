"""Exception types for pattern compilation and directory scanning."""


class DirscanError(Exception):
    """Base exception for dirscan errors."""

    pass


class PatternCompileError(DirscanError, ValueError):
    """A pattern could not be compiled (e.g. malformed ``%regex[...]`` body).

    Raised while a pattern set is being built, so a scan is never set up
    with a partial include/exclude set.
    """

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid pattern '{source}': {reason}")


class ScanConfigurationError(DirscanError):
    """The scan cannot start (missing or non-directory basedir)."""

    pass


class ScannerStateError(DirscanError, RuntimeError):
    """Scan results were requested before scan() was run."""

    pass

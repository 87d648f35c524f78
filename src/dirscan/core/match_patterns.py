"""
Compiled patterns and pattern sets.

A MatchPattern is one compiled include or exclude pattern. Its handler kind
is fixed at compile time: Ant patterns match segment by segment, regex
patterns match the whole separator-normalized path. MatchPatterns is an
ordered set of compiled patterns combined with a logical OR.
"""

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional

from dirscan.core.errors import PatternCompileError
from dirscan.core.pattern_syntax import HandlerKind, normalize_ant_pattern, parse_pattern
from dirscan.core.selector import (
    match_path_tokens,
    match_pattern_start_tokens,
    tokenize_path,
)

logger = logging.getLogger(__name__)


def _normalize_separators(path: str) -> str:
    return path.replace("\\", "/")


@dataclass(frozen=True)
class MatchPattern:
    """
    A single compiled pattern.

    Attributes:
        source: Pattern text with any syntax marker stripped
        kind: Handler kind (Ant or regex)
        tokens: Normalized pattern segments (empty for regex patterns)
    """

    source: str
    kind: HandlerKind
    tokens: tuple[str, ...] = ()
    _regex: Optional[re.Pattern] = field(default=None, repr=False, compare=False)
    _regex_ignore_case: Optional[re.Pattern] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_string(cls, raw: str) -> "MatchPattern":
        """
        Compile a raw pattern string.

        Args:
            raw: Pattern, optionally wrapped in ``%ant[...]`` or ``%regex[...]``

        Returns:
            Compiled MatchPattern

        Raises:
            PatternCompileError: If a regex pattern is malformed
        """
        parsed = parse_pattern(raw)

        if parsed.kind is HandlerKind.REGEX:
            try:
                regex = re.compile(parsed.source)
                regex_ignore_case = re.compile(parsed.source, re.IGNORECASE)
            except re.error as e:
                logger.error(f"Failed to compile regex pattern '{parsed.source}': {e}")
                raise PatternCompileError(parsed.source, str(e)) from e
            return cls(
                source=parsed.source,
                kind=HandlerKind.REGEX,
                _regex=regex,
                _regex_ignore_case=regex_ignore_case,
            )

        tokens = tokenize_path(normalize_ant_pattern(parsed.source))
        return cls(source=parsed.source, kind=HandlerKind.ANT, tokens=tokens)

    def matches(self, path: str, case_sensitive: bool = True) -> bool:
        """Check if a relative path is matched by this pattern."""
        return self.matches_tokens(path, tokenize_path(path), case_sensitive)

    def matches_tokens(
        self, path: str, path_tokens: tuple[str, ...], case_sensitive: bool = True
    ) -> bool:
        """Match using a path that the caller has already tokenized."""
        if self.kind is HandlerKind.REGEX:
            regex = self._regex if case_sensitive else self._regex_ignore_case
            return regex.fullmatch(_normalize_separators(path)) is not None
        return match_path_tokens(self.tokens, path_tokens, case_sensitive)

    def matches_pattern_start(self, path: str, case_sensitive: bool = True) -> bool:
        """Check if something below ``path`` could still match this pattern."""
        return self.matches_pattern_start_tokens(tokenize_path(path), case_sensitive)

    def matches_pattern_start_tokens(
        self, path_tokens: tuple[str, ...], case_sensitive: bool = True
    ) -> bool:
        # A whole-path regex carries no segment structure to prune on
        if self.kind is HandlerKind.REGEX:
            return True
        return match_pattern_start_tokens(self.tokens, path_tokens, case_sensitive)


@dataclass(frozen=True)
class MatchPatterns:
    """
    Ordered, immutable set of compiled patterns.

    Matching is a logical OR across the contained patterns; order only
    matters for get_sources().

    Example:
        >>> patterns = MatchPatterns.from_patterns("ABC**", "%regex[[ABC].*]")
        >>> patterns.matches("ABCDE")
        True
        >>> patterns.get_sources()
        ['ABC**', '[ABC].*']
    """

    patterns: tuple[MatchPattern, ...] = ()

    @classmethod
    def from_patterns(cls, *raw_patterns: str) -> "MatchPatterns":
        """Compile each raw pattern string, preserving order."""
        return cls.from_iterable(raw_patterns)

    @classmethod
    def from_iterable(cls, raw_patterns: Optional[Iterable[str]]) -> "MatchPatterns":
        """
        Compile an iterable of raw pattern strings.

        Raises:
            PatternCompileError: If any pattern fails to compile; no partial
                set is returned
        """
        if raw_patterns is None:
            return cls()
        return cls(tuple(MatchPattern.from_string(raw) for raw in raw_patterns))

    def matches(self, path: str, case_sensitive: bool = True) -> bool:
        """Check if a relative path matches any pattern in the set."""
        path_tokens = tokenize_path(path)
        return any(
            pattern.matches_tokens(path, path_tokens, case_sensitive)
            for pattern in self.patterns
        )

    def matches_pattern_start(self, path: str, case_sensitive: bool = True) -> bool:
        """Check if any pattern could match some path below ``path``."""
        path_tokens = tokenize_path(path)
        return any(
            pattern.matches_pattern_start_tokens(path_tokens, case_sensitive)
            for pattern in self.patterns
        )

    could_match_child = matches_pattern_start

    def get_sources(self) -> list[str]:
        """Return pattern sources (syntax markers stripped) in declaration order."""
        return [pattern.source for pattern in self.patterns]

    def merge(self, other: "MatchPatterns") -> "MatchPatterns":
        """Return a new set holding this set's patterns followed by ``other``'s."""
        return MatchPatterns(self.patterns + other.patterns)

    def __iter__(self) -> Iterator[MatchPattern]:
        return iter(self.patterns)

    def __len__(self) -> int:
        return len(self.patterns)


def match_path(pattern: str, path: str, case_sensitive: bool = True) -> bool:
    """
    Match a path against a single raw pattern string.

    Example:
        >>> match_path("**/*.dat", "a/b/c/file1.dat")
        True
        >>> match_path("*/file1.dat", "a/b/file1.dat")
        False
    """
    return MatchPattern.from_string(pattern).matches(path, case_sensitive)


def match_pattern_start(pattern: str, path: str, case_sensitive: bool = True) -> bool:
    """Check if paths below ``path`` could match a single raw pattern string."""
    return MatchPattern.from_string(pattern).matches_pattern_start(path, case_sensitive)

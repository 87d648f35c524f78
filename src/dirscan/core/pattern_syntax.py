"""
Pattern syntax recognition for dirscan.

A raw pattern string is either a plain Ant glob, an explicitly marked Ant
glob (``%ant[...]``) or a regular expression (``%regex[...]``). This module
strips the marker and reports which handler compiles the remaining source.
"""

from dataclasses import dataclass
from enum import Enum

ANT_HANDLER_PREFIX = "%ant["
REGEX_HANDLER_PREFIX = "%regex["
PATTERN_HANDLER_SUFFIX = "]"

# Both separators are accepted in patterns regardless of the host platform
PATTERN_SEPARATORS = ("/", "\\")


class HandlerKind(str, Enum):
    """Handler selected for a pattern once its syntax marker is stripped."""

    ANT = "ant"
    REGEX = "regex"


@dataclass(frozen=True)
class ParsedPattern:
    """
    A raw pattern split into its handler kind and source text.

    Attributes:
        raw: Pattern exactly as supplied by the caller
        source: Pattern text with any syntax marker removed
        kind: Handler that compiles ``source``
    """

    raw: str
    source: str
    kind: HandlerKind


def _has_marker(raw: str, prefix: str) -> bool:
    return (
        len(raw) > len(prefix) + len(PATTERN_HANDLER_SUFFIX)
        and raw.startswith(prefix)
        and raw.endswith(PATTERN_HANDLER_SUFFIX)
    )


def is_regex_prefixed_pattern(raw: str) -> bool:
    """Check if a raw pattern is a well-formed ``%regex[...]`` pattern."""
    return _has_marker(raw, REGEX_HANDLER_PREFIX)


def is_ant_prefixed_pattern(raw: str) -> bool:
    """Check if a raw pattern is a well-formed ``%ant[...]`` pattern."""
    return _has_marker(raw, ANT_HANDLER_PREFIX)


def parse_pattern(raw: str) -> ParsedPattern:
    """
    Detect and strip a syntax marker from a raw pattern.

    Patterns without a marker, and patterns whose marker is not closed,
    are treated as plain Ant globs and used verbatim.

    Args:
        raw: Pattern as supplied in configuration

    Returns:
        ParsedPattern with the stripped source and handler kind
    """
    if is_regex_prefixed_pattern(raw):
        source = raw[len(REGEX_HANDLER_PREFIX):-len(PATTERN_HANDLER_SUFFIX)]
        return ParsedPattern(raw=raw, source=source, kind=HandlerKind.REGEX)

    if is_ant_prefixed_pattern(raw):
        source = raw[len(ANT_HANDLER_PREFIX):-len(PATTERN_HANDLER_SUFFIX)]
        return ParsedPattern(raw=raw, source=source, kind=HandlerKind.ANT)

    return ParsedPattern(raw=raw, source=raw, kind=HandlerKind.ANT)


def normalize_ant_pattern(source: str) -> str:
    """
    Normalize an Ant glob before tokenization.

    A trailing separator means "everything below this directory", so
    ``foo/`` becomes ``foo/**``. Separators are left as written; the
    tokenizer treats ``/`` and ``\\`` alike.
    """
    if source.endswith(PATTERN_SEPARATORS):
        return source + "**"
    return source

"""
Ant-style glob matching over tokenized paths.

Paths and patterns are split into segments on either ``/`` or ``\\``.
Within one segment ``*`` matches any run of characters and ``?`` matches
exactly one; the whole-segment token ``**`` matches zero or more segments.

All functions here are pure and keep no shared state, so compiled patterns
can be matched from several threads at once.
"""

import functools
import re
from collections.abc import Sequence

DEEP_WILDCARD = "**"

_SEPARATOR_RE = re.compile(r"[/\\]")


def tokenize_path(path: str) -> tuple[str, ...]:
    """
    Split a pattern or path into segments.

    Both separators are accepted and empty segments are dropped, so
    ``a//b``, ``/a/b`` and ``a\\b`` all tokenize to ``("a", "b")``.
    """
    return tuple(token for token in _SEPARATOR_RE.split(path) if token)


def _chars_equal(a: str, b: str, case_sensitive: bool) -> bool:
    if a == b:
        return True
    if case_sensitive:
        return False
    return a.upper() == b.upper() or a.lower() == b.lower()


def match_segment(pattern: str, text: str, case_sensitive: bool = True) -> bool:
    """
    Match a single path segment against a single pattern segment.

    Args:
        pattern: Pattern segment, may contain ``*`` and ``?``
        text: Path segment to test
        case_sensitive: Whether character comparison is case sensitive

    Returns:
        True if the whole segment is matched by the pattern
    """
    if pattern == "*":
        return True
    if "*" not in pattern and "?" not in pattern:
        if len(pattern) != len(text):
            return False
        return all(_chars_equal(p, t, case_sensitive) for p, t in zip(pattern, text))

    p_idx = 0
    t_idx = 0
    star_idx = -1
    mark = 0

    while t_idx < len(text):
        if p_idx < len(pattern) and pattern[p_idx] == "*":
            star_idx = p_idx
            mark = t_idx
            p_idx += 1
        elif p_idx < len(pattern) and (
            pattern[p_idx] == "?" or _chars_equal(pattern[p_idx], text[t_idx], case_sensitive)
        ):
            p_idx += 1
            t_idx += 1
        elif star_idx != -1:
            # Let the last star absorb one more character and retry
            p_idx = star_idx + 1
            mark += 1
            t_idx = mark
        else:
            return False

    while p_idx < len(pattern) and pattern[p_idx] == "*":
        p_idx += 1

    return p_idx == len(pattern)


def _match_between_deep_wildcards(
    pattern: Sequence[str], path: Sequence[str], case_sensitive: bool
) -> bool:
    """
    Match a pattern slice that starts and ends with ``**``.

    Each ``**`` is tried against every span of remaining segments. Results
    are memoized on (pattern index, path index) so the search stays
    polynomial however many ``**`` tokens the pattern holds.
    """

    @functools.cache
    def step(p_idx: int, s_idx: int) -> bool:
        if p_idx == len(pattern):
            return s_idx == len(path)

        token = pattern[p_idx]
        if token == DEEP_WILDCARD:
            if step(p_idx + 1, s_idx):
                return True
            return s_idx < len(path) and step(p_idx, s_idx + 1)

        if s_idx == len(path):
            return False
        return match_segment(token, path[s_idx], case_sensitive) and step(p_idx + 1, s_idx + 1)

    return step(0, 0)


def match_path_tokens(
    pattern: Sequence[str], path: Sequence[str], case_sensitive: bool = True
) -> bool:
    """
    Match a tokenized path against a tokenized Ant pattern.

    Args:
        pattern: Pattern segments, ``**`` meaning zero or more segments
        path: Path segments
        case_sensitive: Whether character comparison is case sensitive

    Returns:
        True if some alignment of the pattern covers the whole path
    """
    p_start, p_end = 0, len(pattern)
    s_start, s_end = 0, len(path)

    # Leading segments up to the first '**' must align one to one
    while p_start < p_end and s_start < s_end and pattern[p_start] != DEEP_WILDCARD:
        if not match_segment(pattern[p_start], path[s_start], case_sensitive):
            return False
        p_start += 1
        s_start += 1

    # Same for trailing segments after the last '**'
    while p_start < p_end and s_start < s_end and pattern[p_end - 1] != DEEP_WILDCARD:
        if not match_segment(pattern[p_end - 1], path[s_end - 1], case_sensitive):
            return False
        p_end -= 1
        s_end -= 1

    if s_start == s_end:
        # Path consumed: only '**' tokens may remain
        return all(token == DEEP_WILDCARD for token in pattern[p_start:p_end])

    if p_start == p_end:
        return False

    middle = pattern[p_start:p_end]
    if all(token == DEEP_WILDCARD for token in middle):
        return True

    return _match_between_deep_wildcards(middle, path[s_start:s_end], case_sensitive)


def match_pattern_start_tokens(
    pattern: Sequence[str], path: Sequence[str], case_sensitive: bool = True
) -> bool:
    """
    Check whether some extension of ``path`` could still match ``pattern``.

    Used to prune directory traversal. The answer is conservative: it may
    be True for a directory that holds no match, but never False for one
    that does.
    """
    idx = 0
    while idx < len(pattern) and idx < len(path):
        if pattern[idx] == DEEP_WILDCARD:
            return True
        if not match_segment(pattern[idx], path[idx], case_sensitive):
            return False
        idx += 1

    # Path exhausted first: it has not diverged yet
    return idx == len(path)

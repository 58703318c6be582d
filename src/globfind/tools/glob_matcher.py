"""
Glob matching against entry base names.

Pattern syntax:
    ``*``         any run of non-separator characters
    ``?``         any single non-separator character
    ``[...]``     character class of single characters and ``lo-hi`` ranges
    ``[^...]``    negated character class
    ``\\c``        the character ``c`` (not available where ``\\`` is the
                  path separator)

A class must hold at least one item, and ``-`` or ``]`` must be escaped to
appear as class characters. Patterns that break these rules are malformed and
match nothing. Only the last path segment is ever compared.
"""

import os
import re
from typing import List, Optional, Tuple
import logging


logger = logging.getLogger(__name__)


ESCAPES_ENABLED = os.sep != '\\'
_NON_SEPARATOR = f"[^{re.escape(os.sep)}]"


class PatternError(ValueError):
    """Raised when a glob pattern is malformed."""
    pass


def base_name(path: str) -> str:
    """
    Get the final segment of a path.

    Trailing separators are ignored, so ``"root/sub/"`` gives ``"sub"``.

    Args:
        path: Path as reported by the walk

    Returns:
        The entry's name within its parent directory
    """
    stripped = path.rstrip(os.sep)
    if os.altsep:
        stripped = stripped.rstrip(os.altsep)
    if not stripped:
        # A bare separator is the filesystem root
        return path[:1]
    return os.path.basename(stripped)


def _class_char(pattern: str, i: int, escapes: bool) -> Tuple[str, int]:
    """Read one character of a class item, returning it and the next index."""
    n = len(pattern)
    if i >= n:
        raise PatternError("unterminated character class")
    c = pattern[i]
    if c in '-]':
        raise PatternError(f"unexpected {c!r} in character class")
    if c == '\\' and escapes:
        i += 1
        if i >= n:
            raise PatternError("unterminated character class")
        c = pattern[i]
    return c, i + 1


def _translate_class(pattern: str, i: int, escapes: bool) -> Tuple[str, int]:
    """
    Translate a bracket expression starting just after its ``[``.

    Returns:
        Tuple of (regex fragment, index after the closing ``]``)
    """
    n = len(pattern)
    negate = i < n and pattern[i] == '^'
    if negate:
        i += 1

    ranges: List[Tuple[str, str]] = []
    item_count = 0
    while True:
        if i >= n:
            raise PatternError("unterminated character class")
        if pattern[i] == ']' and item_count:
            i += 1
            break
        lo, i = _class_char(pattern, i, escapes)
        hi = lo
        if i < n and pattern[i] == '-':
            hi, i = _class_char(pattern, i + 1, escapes)
        item_count += 1
        # A reversed range is valid but contains nothing
        if lo <= hi:
            ranges.append((lo, hi))

    body = ''.join(
        re.escape(lo) if lo == hi else f"{re.escape(lo)}-{re.escape(hi)}"
        for lo, hi in ranges
    )
    if negate:
        return (f"[^{body}{re.escape(os.sep)}]" if body else _NON_SEPARATOR), i
    return (f"[{body}]" if body else "(?!)"), i


def translate(pattern: str, escapes: bool = ESCAPES_ENABLED) -> str:
    """
    Translate a glob pattern into a regular expression.

    Args:
        pattern: Glob pattern
        escapes: Whether ``\\`` escapes the next character

    Returns:
        Regular expression source matching whole names

    Raises:
        PatternError: If the pattern is malformed
    """
    parts = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        i += 1
        if c == '*':
            parts.append(f"{_NON_SEPARATOR}*")
        elif c == '?':
            parts.append(_NON_SEPARATOR)
        elif c == '[':
            fragment, i = _translate_class(pattern, i, escapes)
            parts.append(fragment)
        elif c == '\\' and escapes:
            if i >= n:
                raise PatternError("trailing backslash")
            parts.append(re.escape(pattern[i]))
            i += 1
        else:
            parts.append(re.escape(c))
    return f"(?s:{''.join(parts)})\\Z"


def is_malformed_pattern(pattern: str, escapes: bool = ESCAPES_ENABLED) -> bool:
    """
    Check whether a pattern is rejected by the glob syntax.

    Args:
        pattern: Glob pattern to inspect
        escapes: Whether ``\\`` escapes the next character

    Returns:
        True if the pattern cannot be translated
    """
    try:
        translate(pattern, escapes)
    except PatternError:
        return True
    return False


class GlobMatcher:
    """
    Matcher for one glob pattern with a fixed case policy.

    The pattern is folded and compiled once; each call to matches() folds
    only the candidate name.
    """

    def __init__(self, pattern: str, case_sensitive: bool = False,
                 escapes: bool = ESCAPES_ENABLED):
        """
        Initialize the matcher.

        Args:
            pattern: Glob pattern to match base names against
            case_sensitive: If False, names and pattern are lower-cased
            escapes: Whether ``\\`` escapes the next character
        """
        self.pattern = pattern
        self.case_sensitive = case_sensitive
        folded = pattern if case_sensitive else pattern.lower()
        self._regex: Optional[re.Pattern] = None
        try:
            self._regex = re.compile(translate(folded, escapes))
        except PatternError as e:
            logger.debug(f"Malformed glob pattern '{pattern}': {e}")

    @property
    def is_malformed(self) -> bool:
        return self._regex is None

    def matches_name(self, name: str) -> bool:
        """
        Check if a bare name satisfies the pattern.

        Args:
            name: A single path segment

        Returns:
            True if the name matches; always False for a malformed pattern
        """
        if self._regex is None:
            return False
        if not self.case_sensitive:
            name = name.lower()
        return self._regex.match(name) is not None

    def matches(self, path: str) -> bool:
        """Check if the base name of a path satisfies the pattern."""
        return self.matches_name(base_name(path))


def match_base_name(path: str, pattern: str, case_sensitive: bool = False) -> bool:
    """
    Convenience function to test a single path against a pattern.

    Args:
        path: Path whose last segment is tested
        pattern: Glob pattern
        case_sensitive: If False, comparison ignores case

    Returns:
        True if the base name matches the pattern
    """
    return GlobMatcher(pattern, case_sensitive).matches(path)

"""Glob matching of changed file paths against configured patterns.

Supported syntax: ``?`` (one character), ``*`` (any run of characters,
``/`` included), ``[...]`` / ``[!...]`` classes with ranges, and ``**`` as a
whole path component, where ``**/`` also matches zero directories.
"""

import re
from typing import Iterable, List


class InvalidPatternError(ValueError):
    """Raised when a configured path pattern is not a valid glob."""

    pass


def _translate_class(pattern: str, start: int) -> tuple[str, int]:
    """Translate the ``[...]`` class opening at ``start``; return (regex, next index)."""
    i = start + 1
    n = len(pattern)
    negate = i < n and pattern[i] == "!"
    if negate:
        i += 1
    members: List[str] = []
    first = True
    while i < n and (pattern[i] != "]" or first):
        # "]" right after "[" or "[!" is a literal member of the class
        first = False
        if i + 2 < n and pattern[i + 1] == "-" and pattern[i + 2] != "]":
            low, high = pattern[i], pattern[i + 2]
            if low > high:
                raise InvalidPatternError(f"invalid range {low}-{high} in pattern {pattern!r}")
            members.append(f"{re.escape(low)}-{re.escape(high)}")
            i += 3
        else:
            members.append(re.escape(pattern[i]))
            i += 1
    if i >= n:
        raise InvalidPatternError(f"unterminated character class in pattern {pattern!r}")
    return f"[{'^' if negate else ''}{''.join(members)}]", i + 1


def _translate(pattern: str) -> str:
    parts: List[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if c == "*":
            j = i
            while j < n and pattern[j] == "*":
                j += 1
            stars = j - i
            if stars > 2:
                raise InvalidPatternError(f"too many consecutive '*' in pattern {pattern!r}")
            if stars == 2:
                if (i > 0 and pattern[i - 1] != "/") or (j < n and pattern[j] != "/"):
                    raise InvalidPatternError(f"'**' must be a whole path component in pattern {pattern!r}")
                if j < n:
                    parts.append("(?:.*/)?")
                    j += 1
                else:
                    parts.append(".*")
            else:
                parts.append(".*")
            i = j
        elif c == "?":
            parts.append(".")
            i += 1
        elif c == "[":
            regex, i = _translate_class(pattern, i)
            parts.append(regex)
        else:
            parts.append(re.escape(c))
            i += 1
    return "".join(parts)


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Validate one shell glob and compile it to a regex.

    Raises:
        InvalidPatternError: If the pattern is empty or malformed.
    """
    if not pattern:
        raise InvalidPatternError("empty path pattern")
    try:
        return re.compile(_translate(pattern), re.DOTALL)
    except re.error as e:
        raise InvalidPatternError(f"invalid path pattern {pattern!r}: {e}") from e


def compile_patterns(patterns: Iterable[str]) -> List[re.Pattern[str]]:
    """Validate every pattern; the first invalid one aborts."""
    return [compile_pattern(p) for p in patterns]


def matches_any(paths: Iterable[str], patterns: List[str]) -> bool:
    """True if at least one path matches at least one pattern (case-sensitive).

    An empty pattern list matches everything.
    """
    if not patterns:
        return True
    compiled = compile_patterns(patterns)
    return any(regex.fullmatch(path) for path in paths for regex in compiled)

"""Glob-style URI patterns.

``*`` matches any run of characters, including none. Everything else is
literal. Matching is case-sensitive and anchored to the whole URI::

    "users/*"  matches "users/42" and "users/42/edit", not "users"
    "about"    matches "about" only
"""

import re
from collections.abc import Iterable
from functools import lru_cache

WILDCARD = "*"


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Translate a glob pattern into a compiled, anchored regex.

    Literal runs are escaped and each ``*`` becomes ``.*``. The result is
    used with ``fullmatch`` so the whole URI must match.
    """
    regex = ".*".join(re.escape(part) for part in pattern.split(WILDCARD))
    return re.compile(regex, re.DOTALL)


def matches(pattern: str, value: str) -> bool:
    """Return True if *value* matches the glob *pattern* in full."""
    if pattern == value:
        return True
    if WILDCARD not in pattern:
        return False
    return compile_pattern(pattern).fullmatch(value) is not None


def matches_any(patterns: Iterable[str], value: str) -> bool:
    """Return True on the first pattern that matches *value*."""
    return any(matches(p, value) for p in patterns)

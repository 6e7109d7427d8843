"""Glob helpers for `/`-separated content paths.

Matching is done per path segment with :func:`fnmatch.fnmatchcase`, so ``*``
and ``?`` never cross a directory boundary. A segment made only of ``**``
matches any number of segments, including none.
"""

from __future__ import annotations

import fnmatch
import posixpath
from typing import Iterable, List, Sequence

GLOB_CHARS = frozenset("*?[")
GLOBSTAR = "**"


def is_glob(value: str) -> bool:
    """Return True when ``value`` contains glob syntax."""
    return any(char in GLOB_CHARS for char in value)


def normalize(path: str) -> str:
    """Normalize a request path to the `/` convention; empty means root."""
    if not path:
        return "."
    return posixpath.normpath(path.replace("\\", "/"))


def join(directory: str, name: str) -> str:
    return normalize(posixpath.join(directory, name))


def _split(value: str) -> List[str]:
    return [part for part in value.split("/") if part]


def _match_segments(candidate: Sequence[str], pattern: Sequence[str]) -> bool:
    if not pattern:
        return not candidate

    head, rest = pattern[0], pattern[1:]
    if head == GLOBSTAR:
        # try every possible number of consumed segments
        return any(
            _match_segments(candidate[skip:], rest) for skip in range(len(candidate) + 1)
        )

    if not candidate:
        return False
    return fnmatch.fnmatchcase(candidate[0], head) and _match_segments(candidate[1:], rest)


def match_one(candidate: str, pattern: str) -> bool:
    """Match a literal path against a glob pattern."""
    if candidate.startswith("/") != pattern.startswith("/"):
        return False
    return _match_segments(_split(candidate), _split(pattern))


def match_many(candidates: Iterable[str], pattern: str) -> List[str]:
    """Return the candidates matching ``pattern``, keeping their order."""
    return [candidate for candidate in candidates if match_one(candidate, pattern)]

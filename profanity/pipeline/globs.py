"""Comma-separated glob filters matched against a path or its base name."""

from fnmatch import fnmatchcase
from pathlib import PurePath, PurePosixPath
from typing import Iterable

from profanity.errors import GlobPatternError


def split_patterns(filter_spec: str) -> list[str]:
    """Parse comma-separated pattern string into list."""
    return [p.strip() for p in filter_spec.split(",") if p.strip()]


def validate_pattern(pattern: str) -> None:
    """Raise GlobPatternError if a character class is never closed."""
    i = 0
    while i < len(pattern):
        if pattern[i] != "[":
            i += 1
            continue
        j = i + 1
        if j < len(pattern) and pattern[j] in "!^":
            j += 1
        # A leading ] is a literal member of the class
        if j < len(pattern) and pattern[j] == "]":
            j += 1
        while j < len(pattern) and pattern[j] != "]":
            j += 1
        if j >= len(pattern):
            raise GlobPatternError(pattern, f"unterminated character class at offset {i}")
        i = j + 1


def _as_posix(file_path: str | PurePath) -> str:
    if isinstance(file_path, PurePath):
        return file_path.as_posix()
    return file_path


def matches_pattern(pattern: str, file_path: str | PurePath) -> bool:
    """Check a single glob against the full path and then the base name."""
    validate_pattern(pattern)
    path_str = _as_posix(file_path)
    if fnmatchcase(path_str, pattern):
        return True
    return fnmatchcase(PurePosixPath(path_str).name, pattern)


def matches_any_pattern(patterns: Iterable[str], file_path: str | PurePath) -> bool:
    """Check if a file matches any of the given glob patterns."""
    for pattern in patterns:
        if matches_pattern(pattern, file_path):
            return True
    return False


def matches_any(filter_spec: str, file_path: str | PurePath) -> bool:
    """Test if a file matches a (potentially) comma-separated glob filter.

    Each pattern is tried against the full path and against the base name, so
    ``c.go`` matches ``/a/b/c.go`` just like ``*.go`` does.

    Raises:
        GlobPatternError: If any pattern is malformed
    """
    return matches_any_pattern(split_patterns(filter_spec), file_path)

"""Directory walk and global file filters applied in front of the rule engine."""

import logging
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, Optional

from profanity.config import ScanSettings
from profanity.pipeline.globs import matches_any_pattern

logger = logging.getLogger(__name__)


def relative_posix(file_path: Path, root: Path) -> str:
    """Path of a file relative to the scan root, in POSIX form."""
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()


def _is_skipped_dir(directory: Path, skip_dir_patterns: list[str]) -> bool:
    for pattern in skip_dir_patterns:
        if fnmatchcase(directory.name, pattern):
            logger.debug("Skipping directory %s (matched %s)", directory, pattern)
            return True
    return False


def walk_files(root: Path, skip_dir_patterns: list[str]) -> Iterator[Path]:
    """
    Yield files depth-first, entries of each directory sorted by name.

    Subdirectories are visited where they sort, before any later sibling
    files. Directories matching a skip pattern and symlinked directories are
    not entered.

    Args:
        root: Directory (or single file) to walk
        skip_dir_patterns: Glob patterns matched against directory names
    """
    if root.is_file():
        yield root
        return

    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            if entry.is_symlink() or _is_skipped_dir(entry, skip_dir_patterns):
                continue
            yield from walk_files(entry, skip_dir_patterns)
        elif entry.is_file():
            yield entry


def skip_reason(relative_path: str, settings: ScanSettings) -> Optional[str]:
    """Return why a file is left out of the scan, or None if it is scanned.

    Raises:
        GlobPatternError: If a global filter pattern is malformed
    """
    if settings.include_patterns and not matches_any_pattern(
        settings.include_patterns, relative_path
    ):
        return "not included"

    if settings.exclude_patterns and matches_any_pattern(settings.exclude_patterns, relative_path):
        return "excluded"

    if Path(relative_path).name == settings.rules.file_name:
        return "rules file"

    return None

"""Data models for content rules."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePath
from typing import Optional

from profanity.pipeline.globs import matches_any


class CheckKind(Enum):
    """Supported content checks, keyed by their rule-file field name."""

    CONTAINS = "contains"
    NOT_CONTAINS = "notContains"
    REGEX = "regex"


# Order in which populated check fields win when a record sets more than one
CHECK_PRIORITY: tuple[CheckKind, ...] = (
    CheckKind.CONTAINS,
    CheckKind.NOT_CONTAINS,
    CheckKind.REGEX,
)


@dataclass(frozen=True)
class RuleCheck:
    """The single check a rule performs."""

    kind: CheckKind
    value: str

    def describe(self) -> str:
        return f'{self.kind.value}: "{self.value}"'


@dataclass(frozen=True)
class Rule:
    """A content rule declared in a rule-definition file.

    A rule without a check is kept as-is: it is reported as a violation when
    it is evaluated rather than rejected when it is loaded.
    """

    file: Path
    check: Optional[RuleCheck] = None
    message: str = ""
    include: Optional[str] = None
    exclude: Optional[str] = None

    def should_include(self, file_path: str | PurePath) -> bool:
        """Check if the include filter admits the file (always true when unset)."""
        if not self.include:
            return True
        return matches_any(self.include, file_path)

    def should_exclude(self, file_path: str | PurePath) -> bool:
        """Check if the exclude filter removes the file (always false when unset)."""
        if not self.exclude:
            return False
        return matches_any(self.exclude, file_path)


@dataclass(frozen=True)
class CheckFailure:
    """A failing check: why it failed and where the match starts, if anywhere."""

    reason: str
    offset: Optional[int] = None

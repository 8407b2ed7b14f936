"""Models for scan results."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


class Violation(BaseModel):
    """A rule that failed for a file."""

    path: Path = Field(description="Path to the offending file")
    check: Optional[str] = Field(
        default=None, description="Check kind of the rule (contains, notContains, regex); None if unset"
    )
    reason: str = Field(description="What the check found (or did not find)")
    message: str = Field(default="", description="Human-readable message declared with the rule")
    rule_file: Path = Field(description="Rule-definition file the rule came from")
    include: Optional[str] = Field(default=None, description="Include filter of the rule")
    exclude: Optional[str] = Field(default=None, description="Exclude filter of the rule")
    line: Optional[int] = Field(
        default=None, ge=1, description="Line of the first match (1-indexed), when known"
    )

    @property
    def location(self) -> str:
        if self.line is None:
            return str(self.path)
        return f"{self.path}:{self.line}"

    def __str__(self) -> str:
        """Format as human-readable string."""
        return (
            f"{self.location} failed: {self.reason}\n"
            f"\tmessage: {self.message}\n"
            f"\trules file: {self.rule_file}\n"
            f"\tinclude: {self.include or ''}\n"
            f"\texclude: {self.exclude or ''}"
        )


class ScanResult(BaseModel):
    """Result of scanning a tree."""

    violations: list[Violation] = Field(
        default_factory=list, description="Violations found, in walk order"
    )
    files_checked: int = Field(default=0, ge=0, description="Files evaluated against their rules")
    files_skipped: int = Field(
        default=0, ge=0, description="Files removed by global filters or that are rule files"
    )
    rule_files: list[Path] = Field(
        default_factory=list, description="Rule-definition files discovered during the scan"
    )

    @property
    def passed(self) -> bool:
        """True if no violation was found."""
        return not self.violations

    @property
    def violation_count(self) -> int:
        return len(self.violations)

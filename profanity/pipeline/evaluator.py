"""Evaluate a resolved rule list against one file."""

import logging
from pathlib import Path
from typing import Optional, Sequence

from profanity.models import Violation
from profanity.pipeline.rules import CheckFailure, Rule, RuleMatcher
from profanity.pipeline.walk import relative_posix

logger = logging.getLogger(__name__)


def line_of_offset(contents: bytes, offset: int) -> int:
    """1-indexed line number of a byte offset."""
    return contents.count(b"\n", 0, offset) + 1


def _build_violation(
    rule: Rule, file_path: Path, contents: bytes, failure: CheckFailure
) -> Violation:
    line = None
    if failure.offset is not None:
        line = line_of_offset(contents, failure.offset)
    return Violation(
        path=file_path,
        check=rule.check.kind.value if rule.check is not None else None,
        reason=failure.reason,
        message=rule.message,
        rule_file=rule.file,
        include=rule.include,
        exclude=rule.exclude,
        line=line,
    )


class Evaluator:
    """Applies rules to file contents, stopping at the first failing rule."""

    def __init__(self, root: Path, matcher: Optional[RuleMatcher] = None) -> None:
        self.root = root
        self.matcher = matcher if matcher is not None else RuleMatcher()

    def evaluate(
        self, rules: Sequence[Rule], file_path: Path, contents: bytes
    ) -> Optional[Violation]:
        """
        Evaluate rules in order against a file.

        Rule filters are matched against the path relative to the scan root.

        Args:
            rules: Effective rules of the file's directory
            file_path: Path of the file being evaluated
            contents: Raw file contents

        Returns:
            The violation of the first failing rule, or None if the file passes

        Raises:
            GlobPatternError: If a rule filter is malformed
            RulePatternError: If a rule regex is malformed
        """
        filter_path = relative_posix(file_path, self.root)

        for rule in rules:
            if not rule.should_include(filter_path):
                continue
            if rule.should_exclude(filter_path):
                continue

            failure = self.matcher.apply(rule, contents)
            if failure is not None:
                logger.debug("%s failed rule from %s: %s", file_path, rule.file, failure.reason)
                return _build_violation(rule, file_path, contents, failure)

        return None

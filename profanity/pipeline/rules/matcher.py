"""Apply a rule's check to file contents."""

import re
from typing import Callable, Optional

from profanity.errors import RulePatternError

from .models import CheckFailure, CheckKind, Rule

NO_RULE_SET = "no rule set"


class RuleMatcher:
    """Dispatches a rule's check kind against a byte buffer."""

    def __init__(self) -> None:
        self._compiled_patterns: dict[str, re.Pattern[bytes]] = {}
        self._check_handlers = self._build_check_handlers()

    def _build_check_handlers(
        self,
    ) -> dict[CheckKind, Callable[[str, bytes], Optional[CheckFailure]]]:
        """Build mapping of check kinds to handler functions."""
        return {
            CheckKind.CONTAINS: self._handle_contains,
            CheckKind.NOT_CONTAINS: self._handle_not_contains,
            CheckKind.REGEX: self._handle_regex,
        }

    def _get_compiled_pattern(self, expr: str) -> re.Pattern[bytes]:
        """Get or compile a regex; compile errors surface at first use."""
        if expr not in self._compiled_patterns:
            try:
                self._compiled_patterns[expr] = re.compile(expr.encode("utf-8"))
            except re.error as e:
                raise RulePatternError(expr, str(e)) from e
        return self._compiled_patterns[expr]

    def _handle_contains(self, value: str, contents: bytes) -> Optional[CheckFailure]:
        offset = contents.find(value.encode("utf-8"))
        if offset >= 0:
            return CheckFailure(reason=f'contains: "{value}"', offset=offset)
        return None

    def _handle_not_contains(self, value: str, contents: bytes) -> Optional[CheckFailure]:
        if value.encode("utf-8") not in contents:
            return CheckFailure(reason=f'not contains: "{value}"')
        return None

    def _handle_regex(self, expr: str, contents: bytes) -> Optional[CheckFailure]:
        match = self._get_compiled_pattern(expr).search(contents)
        if match is not None:
            return CheckFailure(reason=f'regexp match: "{expr}"', offset=match.start())
        return None

    def apply(self, rule: Rule, contents: bytes) -> Optional[CheckFailure]:
        """Apply the rule's check, returning a failure or None if the contents pass."""
        if rule.check is None:
            return CheckFailure(reason=NO_RULE_SET)
        return self._check_handlers[rule.check.kind](rule.check.value, contents)

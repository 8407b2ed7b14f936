"""Rule-file loading and the per-scan index of raw rules by directory."""

import logging
from pathlib import Path
from typing import Callable

from profanity.config import DEFAULT_RULES_FILE
from profanity.pipeline.rules import Rule, parse_rules_file

logger = logging.getLogger(__name__)


class RuleFileIndex:
    """Raw (un-merged) rules of every directory looked at during one scan.

    Directories without a rule-definition file are recorded with an empty
    list so they are never checked twice.
    """

    def __init__(
        self,
        rules_file_name: str = DEFAULT_RULES_FILE,
        parse: Callable[[Path], list[Rule]] = parse_rules_file,
    ) -> None:
        self.rules_file_name = rules_file_name
        self._parse = parse
        self._rules_by_dir: dict[Path, list[Rule]] = {}
        self._rule_files: list[Path] = []

    def rules_file_for(self, directory: Path) -> Path:
        """Path the rule-definition file of a directory would have."""
        return directory / self.rules_file_name

    def load(self, directory: Path) -> list[Rule]:
        """Load a directory's local rules, parsing its rule file at most once.

        Raises:
            RuleParseError: If the rule file is malformed
            OSError: If the rule file cannot be read
        """
        if directory in self._rules_by_dir:
            return self._rules_by_dir[directory]

        rules_path = self.rules_file_for(directory)
        if not rules_path.is_file():
            logger.debug("No %s in %s", self.rules_file_name, directory)
            rules: list[Rule] = []
        else:
            rules = self._parse(rules_path)
            self._rule_files.append(rules_path)
            logger.info("Loaded %d rule(s) from %s", len(rules), rules_path)

        self._rules_by_dir[directory] = rules
        return rules

    def __contains__(self, directory: object) -> bool:
        return directory in self._rules_by_dir

    @property
    def rule_files(self) -> list[Path]:
        """Rule-definition files discovered so far, in discovery order."""
        return list(self._rule_files)

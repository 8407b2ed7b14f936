"""Rule inheritance: merge a directory's rules with those of its ancestors."""

import logging
from pathlib import Path

from profanity.pipeline.loader import RuleFileIndex
from profanity.pipeline.rules import Rule

logger = logging.getLogger(__name__)


def ancestor_directories(directory: Path, root: Path) -> list[Path]:
    """
    List the ancestors of a directory within a scan root.

    Ancestry is compared segment by segment, so ``foo`` is never an ancestor
    of ``foobar``.

    Args:
        directory: Directory whose ancestors are wanted
        root: Root of the scan; the shallowest possible ancestor

    Returns:
        Ancestors ordered shallowest first, from ``root`` down to the parent
        of ``directory``. Empty for the root itself and for directories
        outside the root.
    """
    try:
        relative = directory.relative_to(root)
    except ValueError:
        return []

    if not relative.parts:
        return []

    ancestors = [root]
    current = root
    for part in relative.parts[:-1]:
        current = current / part
        ancestors.append(current)
    return ancestors


class RuleResolver:
    """Computes the effective rule list for files in a directory."""

    def __init__(self, root: Path, index: RuleFileIndex) -> None:
        self.root = root
        self.index = index

    def resolve(self, directory: Path) -> list[Rule]:
        """Ancestor rules (root first, parent last) followed by the local rules."""
        local_rules = self.index.load(directory)

        rules: list[Rule] = []
        for ancestor in ancestor_directories(directory, self.root):
            rules.extend(self.index.load(ancestor))
        rules.extend(local_rules)

        logger.debug(
            "Resolved %d rule(s) for %s (%d local)", len(rules), directory, len(local_rules)
        )
        return rules


class ResolvedRuleCache:
    """Memoizes resolver output per directory for the lifetime of one scan."""

    def __init__(self, resolver: RuleResolver) -> None:
        self.resolver = resolver
        self._resolved: dict[Path, tuple[Rule, ...]] = {}

    def resolved(self, directory: Path) -> tuple[Rule, ...]:
        if directory not in self._resolved:
            self._resolved[directory] = tuple(self.resolver.resolve(directory))
        return self._resolved[directory]

    def __len__(self) -> int:
        return len(self._resolved)

"""Top-level scan orchestration.

Walk → resolve rules per directory (cached) → evaluate each file.
"""

import logging
from pathlib import Path
from typing import Optional

from profanity.config import ScanSettings, get_settings
from profanity.models import ScanResult
from profanity.pipeline.evaluator import Evaluator
from profanity.pipeline.loader import RuleFileIndex
from profanity.pipeline.resolver import ResolvedRuleCache, RuleResolver
from profanity.pipeline.walk import relative_posix, skip_reason, walk_files

logger = logging.getLogger(__name__)


def rule_root_for(target_path: Path) -> Path:
    """Directory rule inheritance starts from; a file's parent for a file target."""
    if target_path.is_file():
        return target_path.parent
    return target_path


def build_rule_cache(root: Path, settings: ScanSettings) -> ResolvedRuleCache:
    """Create the per-scan rule index and resolution cache."""
    index = RuleFileIndex(settings.rules.file_name)
    return ResolvedRuleCache(RuleResolver(root, index))


def run_scan(target_path: str | Path, settings: Optional[ScanSettings] = None) -> ScanResult:
    """
    Scan a directory tree (or a single file) against its content rules.

    Args:
        target_path: Directory or file to scan
        settings: Scan settings (default: the global settings)

    Returns:
        ScanResult with the violations found. In fail-fast mode it holds at
        most one violation and the walk stopped there.

    Raises:
        FileNotFoundError: If the target does not exist
        RuleParseError: If a rule-definition file is malformed
        GlobPatternError: If a filter pattern is malformed
        RulePatternError: If a rule regex is malformed
    """
    if settings is None:
        settings = get_settings()

    if isinstance(target_path, str):
        target_path = Path(target_path)

    if not target_path.exists():
        raise FileNotFoundError(f"Path does not exist: {target_path}")

    root = rule_root_for(target_path)
    logger.info("Starting scan of: %s (rules file: %s)", target_path, settings.rules.file_name)

    cache = build_rule_cache(root, settings)
    evaluator = Evaluator(root)
    result = ScanResult()

    for file_path in walk_files(target_path, settings.skip_dir_patterns):
        reason = skip_reason(relative_posix(file_path, root), settings)
        if reason is not None:
            logger.info("%s .. skipping (%s)", file_path, reason)
            result.files_skipped += 1
            continue

        rules = cache.resolved(file_path.parent)
        contents = file_path.read_bytes()
        violation = evaluator.evaluate(rules, file_path, contents)
        result.files_checked += 1

        if violation is None:
            logger.info("%s ... ok", file_path)
            continue

        logger.warning("%s failed: %s", violation.location, violation.reason)
        result.violations.append(violation)
        if settings.fail_fast:
            logger.info("Stopping scan at first violation")
            break

    result.rule_files = cache.resolver.index.rule_files
    logger.info(
        "Scan complete: %d checked, %d skipped, %d violation(s)",
        result.files_checked,
        result.files_skipped,
        result.violation_count,
    )
    return result

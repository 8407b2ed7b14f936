"""JSON formatter for scan results."""

import json
from typing import Any

from profanity.models import ScanResult, Violation


def _violation_to_dict(violation: Violation) -> dict[str, Any]:
    """Convert a Violation to a dictionary."""
    return {
        "file_path": str(violation.path),
        "line": violation.line,
        "reason": violation.reason,
        "message": violation.message,
        "rules_file": str(violation.rule_file),
        "include": violation.include,
        "exclude": violation.exclude,
    }


def format_as_json(result: ScanResult, *, pretty: bool = True) -> str:
    """Format scan results as JSON.

    Args:
        result: The scan result to format
        pretty: If True, format with indentation for readability

    Returns:
        JSON-formatted string
    """
    data = {
        "passed": result.passed,
        "files_checked": result.files_checked,
        "files_skipped": result.files_skipped,
        "rule_files": [str(path) for path in result.rule_files],
        "violations": [_violation_to_dict(v) for v in result.violations],
    }

    if pretty:
        return json.dumps(data, indent=2)
    return json.dumps(data)

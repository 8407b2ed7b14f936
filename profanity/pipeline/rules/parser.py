"""Parser for YAML rule-definition files."""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml  # type: ignore[import-untyped]

from profanity.errors import RuleParseError

from .models import CHECK_PRIORITY, Rule, RuleCheck

logger = logging.getLogger(__name__)

_FILTER_FIELDS = ("message", "include", "exclude")
_KNOWN_FIELDS = frozenset(_FILTER_FIELDS) | {kind.value for kind in CHECK_PRIORITY}


def _read_string_field(
    record: dict[str, Any], key: str, source: Path, index: int
) -> Optional[str]:
    """Read an optional string field; empty strings count as unset."""
    value = record.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value or None
    raise RuleParseError(source, f"Rule {index}: '{key}' must be a string")


def _select_check(record: dict[str, Any], source: Path, index: int) -> Optional[RuleCheck]:
    """Pick the populated check with the highest priority."""
    populated: list[RuleCheck] = []
    for kind in CHECK_PRIORITY:
        value = _read_string_field(record, kind.value, source, index)
        if value is not None:
            populated.append(RuleCheck(kind=kind, value=value))

    if not populated:
        return None

    if len(populated) > 1:
        logger.warning(
            "%s: rule %d sets %s; only '%s' is applied",
            source,
            index,
            ", ".join(check.kind.value for check in populated),
            populated[0].kind.value,
        )
    return populated[0]


def _warn_unknown_fields(record: dict[str, Any], source: Path, index: int) -> None:
    unknown = sorted(str(key) for key in record if key not in _KNOWN_FIELDS)
    if unknown:
        logger.warning("%s: rule %d has unknown field(s): %s", source, index, ", ".join(unknown))


def parse_rule_record(record: Any, source: Path, index: int = 0) -> Rule:
    """Parse a single rule mapping into a Rule stamped with its source file.

    An empty list entry (a bare ``-``) is read as a rule with no fields, which
    fails as "no rule set" when evaluated.
    """
    if record is None or record == "":
        record = {}
    if not isinstance(record, dict):
        raise RuleParseError(source, f"Rule {index} must be a mapping")

    _warn_unknown_fields(record, source, index)

    return Rule(
        file=source,
        check=_select_check(record, source, index),
        message=_read_string_field(record, "message", source, index) or "",
        include=_read_string_field(record, "include", source, index),
        exclude=_read_string_field(record, "exclude", source, index),
    )


def parse_rules(text: str, source: Path) -> list[Rule]:
    """
    Parse the text of a rule-definition file.

    Scalars keep their source text: ``0123``, ``12:30`` and ``yes`` are the
    strings they spell, not YAML 1.1 numbers or booleans.

    Args:
        text: YAML document holding a list of rule mappings
        source: Path of the rule-definition file, stamped on every rule

    Returns:
        Rules in declaration order (empty for an empty document)

    Raises:
        RuleParseError: If the YAML is invalid or a rule is malformed
    """
    try:
        data = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise RuleParseError(source, f"Invalid YAML ({e})") from e

    if data is None:
        return []

    if not isinstance(data, list):
        raise RuleParseError(source, "Rules file must contain a list of rules")

    return [parse_rule_record(record, source, index) for index, record in enumerate(data)]


def parse_rules_file(path: Path) -> list[Rule]:
    """Read and parse a rule-definition file. I/O errors propagate."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise RuleParseError(path, f"Invalid UTF-8 ({e})") from e
    return parse_rules(text, path)

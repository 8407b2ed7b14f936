"""Content rules: models, YAML parsing, and check dispatch."""

from profanity.errors import RuleParseError

from .matcher import NO_RULE_SET, RuleMatcher
from .models import CHECK_PRIORITY, CheckFailure, CheckKind, Rule, RuleCheck
from .parser import parse_rule_record, parse_rules, parse_rules_file

__all__ = [
    "CHECK_PRIORITY",
    "CheckFailure",
    "CheckKind",
    "NO_RULE_SET",
    "Rule",
    "RuleCheck",
    "RuleMatcher",
    "RuleParseError",
    "parse_rule_record",
    "parse_rules",
    "parse_rules_file",
]

"""Tests for evaluating resolved rules against one file."""

from pathlib import Path

import pytest

from profanity.errors import GlobPatternError
from profanity.pipeline.evaluator import Evaluator, line_of_offset
from profanity.pipeline.rules import CheckKind, Rule, RuleCheck, RuleMatcher

ROOT = Path("/repo")
SOURCE = ROOT / "PROFANITY"


def make_rule(kind, value, message="", include=None, exclude=None) -> Rule:
    return Rule(
        file=SOURCE,
        check=RuleCheck(kind=kind, value=value),
        message=message,
        include=include,
        exclude=exclude,
    )


class RecordingMatcher(RuleMatcher):
    """RuleMatcher that remembers which rules it was asked to apply."""

    def __init__(self):
        super().__init__()
        self.applied = []

    def apply(self, rule, contents):
        self.applied.append(rule)
        return super().apply(rule, contents)


class TestEvaluator:
    def test_passing_file(self):
        rules = [make_rule(CheckKind.CONTAINS, "TODO")]
        assert Evaluator(ROOT).evaluate(rules, ROOT / "main.go", b"clean\n") is None

    def test_no_rules(self):
        assert Evaluator(ROOT).evaluate([], ROOT / "main.go", b"TODO") is None

    def test_violation_details(self):
        rule = make_rule(CheckKind.CONTAINS, "TODO", message="no TODOs", include="*.go")
        violation = Evaluator(ROOT).evaluate([rule], ROOT / "pkg" / "main.go", b"a\nb\n// TODO\n")

        assert violation is not None
        assert violation.path == ROOT / "pkg" / "main.go"
        assert violation.check == "contains"
        assert violation.reason == 'contains: "TODO"'
        assert violation.message == "no TODOs"
        assert violation.rule_file == SOURCE
        assert violation.include == "*.go"
        assert violation.exclude is None
        assert violation.line == 3

    def test_first_violation_stops_evaluation(self):
        r1 = make_rule(CheckKind.CONTAINS, "absent", message="R1")
        r2 = make_rule(CheckKind.CONTAINS, "bad", message="R2")
        r3 = make_rule(CheckKind.REGEX, "b.d", message="R3")
        matcher = RecordingMatcher()

        violation = Evaluator(ROOT, matcher).evaluate([r1, r2, r3], ROOT / "f.txt", b"bad")

        assert violation is not None
        assert violation.message == "R2"
        assert matcher.applied == [r1, r2]

    def test_include_mismatch_skips_rule(self):
        rule = make_rule(CheckKind.NOT_CONTAINS, "LICENSE", include="*.go")
        evaluator = Evaluator(ROOT)

        assert evaluator.evaluate([rule], ROOT / "README.md", b"text") is None
        assert evaluator.evaluate([rule], ROOT / "main.go", b"text") is not None

    def test_exclude_match_skips_rule(self):
        rule = make_rule(CheckKind.CONTAINS, "TODO", exclude="*_test.go, docs/*")
        evaluator = Evaluator(ROOT)

        assert evaluator.evaluate([rule], ROOT / "x_test.go", b"TODO") is None
        assert evaluator.evaluate([rule], ROOT / "docs" / "notes.md", b"TODO") is None
        assert evaluator.evaluate([rule], ROOT / "x.go", b"TODO") is not None

    def test_filters_match_path_relative_to_root(self):
        rule = make_rule(CheckKind.CONTAINS, "TODO", include="src/*")
        evaluator = Evaluator(ROOT)

        assert evaluator.evaluate([rule], ROOT / "src" / "a.py", b"TODO") is not None
        assert evaluator.evaluate([rule], ROOT / "lib" / "a.py", b"TODO") is None

    def test_skipped_rule_does_not_hide_later_rule(self):
        skipped = make_rule(CheckKind.CONTAINS, "TODO", include="*.md", message="md")
        applied = make_rule(CheckKind.CONTAINS, "TODO", message="all")

        violation = Evaluator(ROOT).evaluate([skipped, applied], ROOT / "a.go", b"TODO")

        assert violation is not None
        assert violation.message == "all"

    def test_unset_rule_is_violation(self):
        violation = Evaluator(ROOT).evaluate([Rule(file=SOURCE, message="empty")], ROOT / "a", b"x")

        assert violation is not None
        assert violation.reason == "no rule set"
        assert violation.check is None
        assert violation.line is None

    def test_malformed_filter_raises(self):
        rule = make_rule(CheckKind.CONTAINS, "TODO", include="[")
        with pytest.raises(GlobPatternError):
            Evaluator(ROOT).evaluate([rule], ROOT / "a.go", b"TODO")


def test_line_of_offset():
    contents = b"one\ntwo\nthree\n"
    assert line_of_offset(contents, 0) == 1
    assert line_of_offset(contents, 4) == 2
    assert line_of_offset(contents, 8) == 3

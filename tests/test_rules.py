"""Tests for the complexity, length and repeated-character rules."""

import pytest

from hardpass.rules.base import PredicateRule
from hardpass.rules.complexity import ComplexityRule
from hardpass.rules.length import (
    MAX_LENGTH_RULE,
    MIN_LENGTH_RULE,
    max_length_rule,
    min_length_rule,
)
from hardpass.rules.repetition import RepeatedCharacterRule, find_repeated_runs


class TestComplexityRule:
    """Tests for the 3-of-4 character class requirement."""

    def test_three_classes_pass_silently(self):
        """A password missing one class earns no suggestion."""
        outcome = ComplexityRule().check("abcdefgh1!")
        assert outcome.passed
        assert outcome.suggestions == []

    def test_two_classes_list_missing_in_fixed_order(self):
        outcome = ComplexityRule().check("^#=383=11?")
        assert not outcome.passed
        assert outcome.suggestions == [
            "Try adding at least 1 upper case character",
            "Try adding at least 1 lower case character",
        ]

    def test_digit_and_special_missing(self):
        outcome = ComplexityRule().check("SWgsXLejJu")
        assert outcome.suggestions == [
            "Try adding at least 1 digit",
            "Try adding at least 1 special character",
        ]

    def test_empty_password_lists_all_classes(self):
        outcome = ComplexityRule().check("")
        assert len(outcome.suggestions) == 4

    def test_non_ascii_letters_do_not_count(self):
        outcome = ComplexityRule().check("éééé1!")
        assert outcome.suggestions == [
            "Try adding at least 1 upper case character",
            "Try adding at least 1 lower case character",
        ]

    def test_stricter_threshold(self):
        rule = ComplexityRule(min_classes=4)
        assert rule.check("abcdefgh1!").suggestions == [
            "Try adding at least 1 upper case character",
        ]

    @pytest.mark.parametrize("value", [0, 5])
    def test_invalid_threshold(self, value):
        with pytest.raises(ValueError):
            ComplexityRule(min_classes=value)


class TestLengthRules:
    """Tests for the inclusive length bounds."""

    def test_minimum_boundary(self):
        rule = min_length_rule(10)
        assert rule.name == MIN_LENGTH_RULE
        assert rule.check("a" * 10).passed
        outcome = rule.check("a" * 9)
        assert outcome.suggestions == ["Must be at least 10 characters long"]

    def test_maximum_boundary(self):
        rule = max_length_rule(128)
        assert rule.name == MAX_LENGTH_RULE
        assert rule.check("a" * 128).passed
        outcome = rule.check("a" * 129)
        assert outcome.suggestions == ["Can only be at most 128 characters long"]

    def test_spaces_are_not_trimmed(self):
        assert min_length_rule(10).check(" " * 10).passed
        assert not min_length_rule(10).check(" abcdefgh").passed

    def test_custom_bounds_in_suggestion(self):
        assert min_length_rule(12).check("short").suggestions == [
            "Must be at least 12 characters long"
        ]


class TestRepeatedCharacterRule:
    """Tests for the run-of-identical-characters check."""

    def test_run_of_three_fails(self):
        outcome = RepeatedCharacterRule().check("`$T3$6M5vGmj999.Jr")
        assert not outcome.passed
        assert outcome.suggestions == [
            "Cannot have more than 2 identical characters in a row"
        ]

    def test_run_of_two_passes(self):
        assert RepeatedCharacterRule().check("Xy!99a3kLm").passed

    def test_scattered_occurrences_pass(self):
        """Three of a character that are not adjacent do not form a run."""
        assert RepeatedCharacterRule().check("X9y9!9kLmz").passed

    @pytest.mark.parametrize("password", ["Ab1***cdEF", "Ab1\\\\\\cdEF", "Ab1]]]cdEF", "Ab1...cdEF"])
    def test_regex_metacharacters_are_literal(self, password):
        assert not RepeatedCharacterRule().check(password).passed

    def test_dot_does_not_match_other_characters(self):
        assert find_repeated_runs("Ab1.x.y.zQ") == []

    def test_runs_reported_in_order_of_first_appearance(self):
        assert find_repeated_runs("zzzaaa111") == ["z", "a", "1"]

    def test_one_suggestion_for_many_runs(self):
        outcome = RepeatedCharacterRule().check("zzzaaa111")
        assert len(outcome.suggestions) == 1

    def test_configurable_limit(self):
        rule = RepeatedCharacterRule(max_repeats=3)
        assert rule.check("Xy!999kLm").passed
        assert rule.check("Xy!9999kLm").suggestions == [
            "Cannot have more than 3 identical characters in a row"
        ]

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            RepeatedCharacterRule(max_repeats=0)


class TestPredicateRule:
    """Tests for predicate-built rules."""

    def test_emits_its_suggestion(self):
        rule = PredicateRule(
            "no_company_name",
            lambda p: "acme" not in p.lower(),
            "Do not use the company name",
        )
        assert rule.check("hello").passed
        assert rule.check("ACMErocks").suggestions == ["Do not use the company name"]
        assert rule.description == "Do not use the company name"
        assert "no_company_name" in repr(rule)

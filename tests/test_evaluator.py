"""Tests for the policy evaluator and the feedback it assembles."""

import pytest

from shared.config import PolicyConfig

from hardpass import evaluate, is_strong
from hardpass.core.evaluator import PolicyEvaluator, default_rules, mask_password
from hardpass.core.models import Feedback
from hardpass.rules.base import PredicateRule

STRONG_PASSWORDS = [
    "Cm;cF*1f5L",
    " ZHsyu6uK7",
    "ZHsyu6uK7 ",
    "krcWV*@R,#%ur5T*xq4XSThJ$d*1~59Z1!5,2t$Nb@45Fdk2SMm2D219H_E/~6zr",
]

UPPER = "Try adding at least 1 upper case character"
LOWER = "Try adding at least 1 lower case character"
DIGIT = "Try adding at least 1 digit"
SPECIAL = "Try adding at least 1 special character"
TOO_SHORT = "Must be at least 10 characters long"
TOO_LONG = "Can only be at most 128 characters long"
REPEATS = "Cannot have more than 2 identical characters in a row"


class TestScoring:
    """Score and feedback for representative passwords."""

    @pytest.mark.parametrize("password", STRONG_PASSWORDS)
    def test_strong_passwords(self, evaluator, password):
        result = evaluator.evaluate(password)
        assert result.score == 4
        assert result.feedback is None
        assert result.is_strong

    def test_too_short_only(self, evaluator):
        result = evaluator.evaluate('i"PSTg,98')
        assert result.score == 0
        assert result.feedback == Feedback(
            warning="Not complex enough", suggestions=[TOO_SHORT]
        )

    def test_missing_letters(self, evaluator):
        result = evaluator.evaluate("^#=383=11?")
        assert result.score == 0
        assert result.suggestions == [UPPER, LOWER]

    def test_missing_digit_and_special(self, evaluator):
        assert evaluator.evaluate("SWgsXLejJu").suggestions == [DIGIT, SPECIAL]

    def test_repeated_characters_only(self, evaluator):
        result = evaluator.evaluate("`$T3$6M5vGmj999.Jr")
        assert result.feedback.warning == "Not complex enough"
        assert result.suggestions == [REPEATS]

    def test_missing_one_class_is_strong(self, evaluator):
        assert evaluator.evaluate("abcdefgh1!").is_strong

    def test_banned_topology_only(self, evaluator):
        assert evaluator.evaluate("Falcon2024!").suggestions == [
            "Avoid common patterns such as a capitalised word "
            "followed by digits and a symbol"
        ]


class TestLengthBoundaries:
    """Inclusive 10 to 128 bounds on the verbatim length."""

    def test_nine_characters(self, evaluator):
        assert evaluator.evaluate("Cm;cF*1f5").suggestions == [TOO_SHORT]

    def test_ten_characters(self, evaluator):
        assert evaluator.evaluate("Cm;cF*1f5L").is_strong

    def test_128_characters(self, evaluator):
        assert evaluator.evaluate("Ab1!" * 32).is_strong

    def test_129_characters(self, evaluator):
        assert evaluator.evaluate("Ab1!" * 32 + "x").suggestions == [TOO_LONG]

    def test_spaces_count_towards_length(self, evaluator):
        assert evaluator.evaluate(" ZHsyu6uK7").is_strong
        assert evaluator.evaluate("ZHsyu6uK7").suggestions == [TOO_SHORT]


class TestSuggestionOrder:
    """Every violated rule reports, in a fixed order."""

    def test_empty_password(self, evaluator):
        assert evaluator.evaluate("").suggestions == [
            UPPER, LOWER, DIGIT, SPECIAL, TOO_SHORT,
        ]

    def test_short_with_run(self, evaluator):
        assert evaluator.evaluate("aaa").suggestions == [
            UPPER, DIGIT, SPECIAL, TOO_SHORT, REPEATS,
        ]

    def test_long_with_run(self, evaluator):
        assert evaluator.evaluate("a" * 129).suggestions == [
            UPPER, DIGIT, SPECIAL, TOO_LONG, REPEATS,
        ]

    def test_custom_rule_runs_last(self, evaluator):
        rule = PredicateRule(
            "no_company_name",
            lambda p: "acme" not in p.lower(),
            "Do not use the company name",
        )
        extended = evaluator.with_rules(rule)
        assert evaluator.evaluate("AcmeRocks!9x").is_strong
        assert extended.evaluate("AcmeRocks!9x").suggestions == [
            "Do not use the company name"
        ]
        assert extended.evaluate("acme").suggestions[-1] == "Do not use the company name"
        assert len(extended.rules) == len(evaluator.rules) + 1


class TestEvaluatorBehaviour:
    """Determinism, input validation and configuration."""

    def test_deterministic(self, evaluator):
        password = "`$T3$6M5vGmj999.Jr"
        assert evaluator.evaluate(password) == evaluator.evaluate(password)

    @pytest.mark.parametrize("value", [None, 12345, b"bytes-password"])
    def test_non_string_rejected(self, evaluator, value):
        with pytest.raises(TypeError):
            evaluator.evaluate(value)

    def test_module_level_helpers(self):
        assert evaluate("Cm;cF*1f5L").score == 4
        assert is_strong("Cm;cF*1f5L")
        assert not is_strong("^#=383=11?")

    def test_passes_agrees_with_evaluate(self, evaluator):
        for password in ["Cm;cF*1f5L", "Falcon2024!", "", "aaa"]:
            assert evaluator.passes(password) == evaluator.evaluate(password).is_strong

    def test_wire_shape(self, evaluator):
        assert evaluator.evaluate("Cm;cF*1f5L").to_dict() == {"score": 4}
        assert evaluator.evaluate("SWgsXLejJu").to_dict() == {
            "score": 0,
            "feedback": {
                "warning": "Not complex enough",
                "suggestions": [DIGIT, SPECIAL],
            },
        }

    def test_feedback_on_every_result(self):
        evaluator = PolicyEvaluator(feedback_max_score=4)
        result = evaluator.evaluate("Cm;cF*1f5L")
        assert result.score == 4
        assert result.feedback == Feedback(warning="", suggestions=[])

    @pytest.mark.parametrize("value", [-1, 5])
    def test_invalid_feedback_threshold(self, value):
        with pytest.raises(ValueError):
            PolicyEvaluator(feedback_max_score=value)

    def test_topology_check_can_be_disabled(self):
        policy = PolicyConfig(enable_topology_check=False)
        evaluator = PolicyEvaluator.from_config(policy)
        assert evaluator.evaluate("Falcon2024!").is_strong

    def test_from_config_uses_bounds(self):
        policy = PolicyConfig(min_length=12, max_length=64)
        evaluator = PolicyEvaluator.from_config(policy)
        assert evaluator.evaluate("Cm;cF*1f5L").suggestions == [
            "Must be at least 12 characters long"
        ]

    def test_inconsistent_policy(self):
        with pytest.raises(ValueError):
            default_rules(PolicyConfig(min_length=20, max_length=10))

    def test_describe_lists_every_rule(self, evaluator):
        statements = evaluator.describe()
        assert len(statements) == 5
        assert statements[1] == "Be at least 10 characters long"


class TestReport:
    """Per-rule detail for display."""

    def test_report_contents(self, evaluator):
        report = evaluator.report("^#=383=11?")
        assert report.password_masked == "^********?"
        assert report.length == 10
        assert report.class_counts.digit == 5
        assert report.class_counts.special == 5
        assert report.failed_rules == ["complexity"]
        assert report.result.score == 0

    def test_report_never_holds_the_password(self, evaluator):
        report = evaluator.report("Cm;cF*1f5L")
        assert "Cm;cF*1f5L" not in report.model_dump_json()

    @pytest.mark.parametrize(
        ("password", "masked"),
        [("", ""), ("a", "*"), ("ab", "**"), ("abc", "a*c")],
    )
    def test_mask_password(self, password, masked):
        assert mask_password(password) == masked

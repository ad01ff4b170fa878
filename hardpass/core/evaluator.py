"""
Policy Evaluator
=================

Runs every rule of a policy against a password and assembles the
feedback. Rules are evaluated unconditionally and in list order so the
caller learns about *every* violated requirement at once; the order of
the default list fixes the order of suggestions: complexity (upper,
lower, digit, special), minimum length, maximum length, repeated
characters, topology.

Scoring is binary: 4 when no rule produced a suggestion, 0 otherwise.

Usage::

    from hardpass import evaluate

    result = evaluate("Cm;cF*1f5L")
    assert result.score == 4

    evaluator = PolicyEvaluator().with_rules(my_dictionary_rule)
    evaluator.evaluate(candidate).feedback

The evaluator holds no per-call state and is safe to share between
threads.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from shared.config import PolicyConfig

from hardpass.core.models import (
    STRONG_SCORE,
    WEAK_SCORE,
    WEAK_WARNING,
    EvaluationResult,
    Feedback,
    PolicyReport,
    RuleOutcome,
)
from hardpass.rules.base import PolicyRule
from hardpass.rules.complexity import ComplexityRule
from hardpass.rules.counters import count_classes
from hardpass.rules.length import max_length_rule, min_length_rule
from hardpass.rules.repetition import RepeatedCharacterRule
from hardpass.rules.topology import TopologyRule


def default_rules(policy: Optional[PolicyConfig] = None) -> list[PolicyRule]:
    """Build the standard rule list for *policy* (defaults when ``None``).

    Raises:
        ValueError: If *policy* is inconsistent or names an invalid
            banned topology.
    """
    policy = policy or PolicyConfig()
    policy.validate()

    rules: list[PolicyRule] = [
        ComplexityRule(policy.min_complexity_classes),
        min_length_rule(policy.min_length),
        max_length_rule(policy.max_length),
        RepeatedCharacterRule(policy.max_consecutive_repeats),
    ]
    if policy.enable_topology_check:
        rules.append(TopologyRule(extra=policy.extra_banned_topologies))
    return rules


def mask_password(password: str) -> str:
    """Show the first and last character with asterisks in between."""
    if len(password) <= 2:
        return "*" * len(password)
    return password[0] + "*" * (len(password) - 2) + password[-1]


def _require_str(password: object) -> None:
    if not isinstance(password, str):
        raise TypeError(
            f"password must be str, not {type(password).__name__}"
        )


class PolicyEvaluator:
    """Compose rules into a single password policy.

    Args:
        rules: Rules to run, in suggestion order. Defaults to
            :func:`default_rules`.
        feedback_max_score: Attach feedback when the score is at or
            below this value. ``0`` attaches it to weak results only;
            ``4`` always attaches it.
    """

    def __init__(
        self,
        rules: Optional[Sequence[PolicyRule]] = None,
        feedback_max_score: int = WEAK_SCORE,
    ) -> None:
        if not WEAK_SCORE <= feedback_max_score <= STRONG_SCORE:
            raise ValueError(
                f"feedback_max_score must be between {WEAK_SCORE} and "
                f"{STRONG_SCORE}, got {feedback_max_score}"
            )
        self._rules: tuple[PolicyRule, ...] = tuple(
            default_rules() if rules is None else rules
        )
        self.feedback_max_score = feedback_max_score

    @classmethod
    def from_config(cls, policy: PolicyConfig) -> PolicyEvaluator:
        return cls(default_rules(policy), feedback_max_score=policy.feedback_max_score)

    @property
    def rules(self) -> tuple[PolicyRule, ...]:
        return self._rules

    def with_rules(self, *rules: PolicyRule) -> PolicyEvaluator:
        """Return a new evaluator with *rules* appended after the current ones."""
        return PolicyEvaluator(
            self._rules + tuple(rules),
            feedback_max_score=self.feedback_max_score,
        )

    def describe(self) -> list[str]:
        """Human-readable statement of every requirement, in rule order."""
        return [rule.description for rule in self._rules]

    # ------------------------------------------------------------------ #
    #  Evaluation
    # ------------------------------------------------------------------ #

    def check_rules(self, password: str) -> list[RuleOutcome]:
        """Run every rule and return their outcomes in order."""
        _require_str(password)
        return [rule.check(password) for rule in self._rules]

    def assemble(self, outcomes: Iterable[RuleOutcome]) -> EvaluationResult:
        """Turn rule outcomes into a scored result with feedback."""
        suggestions = [s for outcome in outcomes for s in outcome.suggestions]
        score = WEAK_SCORE if suggestions else STRONG_SCORE

        feedback = None
        if score <= self.feedback_max_score:
            feedback = Feedback(
                warning=WEAK_WARNING if suggestions else "",
                suggestions=suggestions,
            )
        return EvaluationResult(score=score, feedback=feedback)

    def evaluate(self, password: str) -> EvaluationResult:
        """Score *password* against the policy.

        Any string is valid input; the empty string fails the length and
        complexity rules and receives full feedback.

        Raises:
            TypeError: If *password* is not a ``str``.
        """
        return self.assemble(self.check_rules(password))

    def passes(self, password: str) -> bool:
        """Boolean form of :meth:`evaluate`."""
        return self.evaluate(password).is_strong

    def report(self, password: str) -> PolicyReport:
        """Evaluate *password* and keep the per-rule detail for display."""
        outcomes = self.check_rules(password)
        return PolicyReport(
            password_masked=mask_password(password),
            length=len(password),
            class_counts=count_classes(password),
            outcomes=outcomes,
            result=self.assemble(outcomes),
        )


_DEFAULT_EVALUATOR: Optional[PolicyEvaluator] = None


def _default_evaluator() -> PolicyEvaluator:
    global _DEFAULT_EVALUATOR
    if _DEFAULT_EVALUATOR is None:
        _DEFAULT_EVALUATOR = PolicyEvaluator()
    return _DEFAULT_EVALUATOR


def evaluate(password: str) -> EvaluationResult:
    """Evaluate *password* against the default policy."""
    return _default_evaluator().evaluate(password)


def is_strong(password: str) -> bool:
    """``True`` iff *password* satisfies every rule of the default policy."""
    return _default_evaluator().passes(password)

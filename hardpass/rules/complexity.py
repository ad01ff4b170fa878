"""
Complexity Rule
================

A password is complex enough when at least ``min_classes`` of the four
character classes (upper, lower, digit, special) appear in it. Meeting
the threshold earns silent partial credit: a password missing exactly
one class under the default threshold of 3 produces no suggestion.
"""

from __future__ import annotations

from hardpass.core.models import CharacterClass, RuleOutcome
from hardpass.rules.base import PolicyRule
from hardpass.rules.counters import count_classes

_SUGGESTIONS: dict[CharacterClass, str] = {
    CharacterClass.UPPER: "Try adding at least 1 upper case character",
    CharacterClass.LOWER: "Try adding at least 1 lower case character",
    CharacterClass.DIGIT: "Try adding at least 1 digit",
    CharacterClass.SPECIAL: "Try adding at least 1 special character",
}


def complexity_suggestion(char_class: CharacterClass) -> str:
    """Return the remediation text for a missing *char_class*."""
    return _SUGGESTIONS[char_class]


class ComplexityRule(PolicyRule):
    """Require ``min_classes`` of the four character classes."""

    name = "complexity"

    def __init__(self, min_classes: int = 3) -> None:
        if not 1 <= min_classes <= 4:
            raise ValueError(f"min_classes must be between 1 and 4, got {min_classes}")
        self.min_classes = min_classes

    @property
    def description(self) -> str:
        return (
            f"Contain at least {self.min_classes} of: upper case letter, "
            "lower case letter, digit, special character (space counts)"
        )

    def check(self, password: str) -> RuleOutcome:
        counts = count_classes(password)
        if counts.satisfied >= self.min_classes:
            return RuleOutcome(rule=self.name, passed=True)
        return RuleOutcome(
            rule=self.name,
            passed=False,
            suggestions=[complexity_suggestion(c) for c in counts.missing_classes],
        )

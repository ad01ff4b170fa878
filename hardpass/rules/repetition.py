"""
Repeated-Character Rule
========================

Rejects passwords containing a run of more than ``max_repeats``
identical characters (``"999"``, ``"aaa"``). Only characters whose total
occurrence count already exceeds the limit can form such a run, so the
occurrence map filters candidates before each one is searched for with
a literal pattern.
"""

from __future__ import annotations

import re

from hardpass.core.models import RuleOutcome
from hardpass.rules.base import PolicyRule
from hardpass.rules.counters import count_occurrences


def _run_pattern(char: str, min_run: int) -> re.Pattern[str]:
    # Password characters are data: escape before building the pattern
    return re.compile(f"(?:{re.escape(char)}){{{min_run},}}")


def find_repeated_runs(password: str, max_repeats: int = 2) -> list[str]:
    """Return characters that occur more than *max_repeats* times in a row.

    Characters are reported in order of first appearance.

    Args:
        password: The password to scan.
        max_repeats: Longest permitted run of one character.

    Returns:
        Characters with at least one run longer than *max_repeats*.
    """
    min_run = max_repeats + 1
    candidates = [
        char
        for char, occurrences in count_occurrences(password).items()
        if occurrences >= min_run
    ]
    return [
        char for char in candidates
        if _run_pattern(char, min_run).search(password)
    ]


class RepeatedCharacterRule(PolicyRule):
    """Forbid runs of more than ``max_repeats`` identical characters."""

    name = "repeated_characters"

    def __init__(self, max_repeats: int = 2) -> None:
        if max_repeats < 1:
            raise ValueError(f"max_repeats must be >= 1, got {max_repeats}")
        self.max_repeats = max_repeats

    @property
    def description(self) -> str:
        return (
            f"Not contain more than {self.max_repeats} identical "
            "characters in a row"
        )

    def check(self, password: str) -> RuleOutcome:
        if not find_repeated_runs(password, self.max_repeats):
            return RuleOutcome(rule=self.name, passed=True)
        return RuleOutcome(
            rule=self.name,
            passed=False,
            suggestions=[
                f"Cannot have more than {self.max_repeats} identical "
                "characters in a row"
            ],
        )

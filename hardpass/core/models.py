"""
Hardpass Core Data Models
==========================

Pydantic models for the hardpass policy evaluator. These models carry
the derived character-class counts, the per-rule outcomes, and the
evaluation result returned to callers.

The wire shape of :class:`EvaluationResult` is ``{score, feedback?}``
where ``score`` is either 0 (weak) or 4 (strong). The raw password is
never stored in any model.

References:
    - OWASP Authentication Cheat Sheet -- Password Complexity.
    - zxcvbn result format (Wheeler, 2016), which the score/feedback
      shape mirrors.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, Field


WEAK_SCORE = 0
STRONG_SCORE = 4
WEAK_WARNING = "Not complex enough"


class CharacterClass(str, enum.Enum):
    """Character-class tags used by the counters and topologies."""

    UPPER = "u"
    LOWER = "l"
    DIGIT = "d"
    SPECIAL = "s"
    ANY = "a"

    @property
    def label(self) -> str:
        _map = {
            "u": "upper case character",
            "l": "lower case character",
            "d": "digit",
            "s": "special character",
            "a": "character",
        }
        return _map[self.value]


# Fixed order for complexity feedback
COMPLEXITY_CLASSES: tuple[CharacterClass, ...] = (
    CharacterClass.UPPER,
    CharacterClass.LOWER,
    CharacterClass.DIGIT,
    CharacterClass.SPECIAL,
)


class CharacterClassCounts(BaseModel):
    """Number of characters in each of the four complexity classes.

    Attributes:
        upper: Count of ``A-Z``.
        lower: Count of ``a-z``.
        digit: Count of ``0-9``.
        special: Count of space and ASCII punctuation.
    """

    upper: int = Field(default=0, ge=0)
    lower: int = Field(default=0, ge=0)
    digit: int = Field(default=0, ge=0)
    special: int = Field(default=0, ge=0)

    def count_for(self, char_class: CharacterClass) -> int:
        mapping = {
            CharacterClass.UPPER: self.upper,
            CharacterClass.LOWER: self.lower,
            CharacterClass.DIGIT: self.digit,
            CharacterClass.SPECIAL: self.special,
        }
        return mapping.get(char_class, 0)

    @property
    def present_classes(self) -> list[CharacterClass]:
        return [c for c in COMPLEXITY_CLASSES if self.count_for(c) > 0]

    @property
    def missing_classes(self) -> list[CharacterClass]:
        """Absent classes, in the fixed order upper, lower, digit, special."""
        return [c for c in COMPLEXITY_CLASSES if self.count_for(c) == 0]

    @property
    def satisfied(self) -> int:
        """How many of the four classes appear at least once (0-4)."""
        return len(self.present_classes)


class RuleOutcome(BaseModel):
    """Result of running one rule against a password.

    Attributes:
        rule: Stable rule name (e.g. ``"length_min"``).
        passed: Whether the password satisfies the rule.
        suggestions: Remediation strings; empty when *passed*.
    """

    rule: str
    passed: bool = True
    suggestions: list[str] = Field(default_factory=list)


class Feedback(BaseModel):
    """Warning and ordered suggestions attached to a weak result."""

    warning: str = ""
    suggestions: list[str] = Field(default_factory=list)


class EvaluationResult(BaseModel):
    """Outcome of a policy evaluation.

    Attributes:
        score: ``4`` when no rule produced a suggestion, ``0`` otherwise.
        feedback: Present when the score is at or below the evaluator's
            feedback threshold (by default only for weak passwords).
    """

    score: int = Field(default=WEAK_SCORE, ge=0, le=4)
    feedback: Optional[Feedback] = None

    @property
    def is_strong(self) -> bool:
        return self.score == STRONG_SCORE

    @property
    def suggestions(self) -> list[str]:
        return list(self.feedback.suggestions) if self.feedback else []

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the ``{score, feedback?}`` wire shape."""
        return self.model_dump(exclude_none=True)


class PolicyReport(BaseModel):
    """Display-oriented summary of one evaluation for the CLI and engine.

    Attributes:
        password_masked: First and last character with asterisks between.
        length: Password length.
        class_counts: Per-class character counts.
        outcomes: Outcome of every rule, in policy order.
        result: The evaluation result.
    """

    password_masked: str = ""
    length: int = 0
    class_counts: CharacterClassCounts = Field(default_factory=CharacterClassCounts)
    outcomes: list[RuleOutcome] = Field(default_factory=list)
    result: EvaluationResult = Field(default_factory=EvaluationResult)

    @property
    def failed_rules(self) -> list[str]:
        return [o.rule for o in self.outcomes if not o.passed]

"""
Hardpass Core Module
=====================

Data models, the policy evaluator and the engine facade.
"""

from hardpass.core.models import (
    CharacterClass,
    CharacterClassCounts,
    EvaluationResult,
    Feedback,
    PolicyReport,
    RuleOutcome,
)
from hardpass.core.evaluator import PolicyEvaluator, default_rules, evaluate, is_strong
from hardpass.core.engine import HardpassEngine

__all__ = [
    "CharacterClass",
    "CharacterClassCounts",
    "EvaluationResult",
    "Feedback",
    "HardpassEngine",
    "PolicyEvaluator",
    "PolicyReport",
    "RuleOutcome",
    "default_rules",
    "evaluate",
    "is_strong",
]

"""
Length Rules
=============

Inclusive lower and upper bounds on the verbatim password length.
Nothing is trimmed or truncated first: leading and trailing spaces
count.
"""

from __future__ import annotations

from hardpass.rules.base import PredicateRule

MIN_LENGTH_RULE = "length_min"
MAX_LENGTH_RULE = "length_max"


def min_length_rule(minimum: int = 10) -> PredicateRule:
    return PredicateRule(
        MIN_LENGTH_RULE,
        lambda password: len(password) >= minimum,
        f"Must be at least {minimum} characters long",
        description=f"Be at least {minimum} characters long",
    )


def max_length_rule(maximum: int = 128) -> PredicateRule:
    return PredicateRule(
        MAX_LENGTH_RULE,
        lambda password: len(password) <= maximum,
        f"Can only be at most {maximum} characters long",
        description=f"Be at most {maximum} characters long",
    )

"""
Character-Class Counters
=========================

Counting primitives shared by the complexity, repetition and topology
rules. Classes are mutually exclusive: ``A-Z``, ``a-z``, ``0-9`` and the
special set (space plus the 32 ASCII punctuation characters). Anything
else, such as non-ASCII letters, belongs to no class.
"""

from __future__ import annotations

import string
from collections import Counter

from hardpass.core.models import CharacterClass, CharacterClassCounts

UPPERCASE: frozenset[str] = frozenset(string.ascii_uppercase)
LOWERCASE: frozenset[str] = frozenset(string.ascii_lowercase)
DIGITS: frozenset[str] = frozenset(string.digits)
SPECIALS: frozenset[str] = frozenset(" " + string.punctuation)

_CLASS_SETS: tuple[tuple[CharacterClass, frozenset[str]], ...] = (
    (CharacterClass.UPPER, UPPERCASE),
    (CharacterClass.LOWER, LOWERCASE),
    (CharacterClass.DIGIT, DIGITS),
    (CharacterClass.SPECIAL, SPECIALS),
)


def classify_char(char: str) -> CharacterClass:
    """Return the class tag of *char*, or ``CharacterClass.ANY`` if unclassed."""
    for char_class, members in _CLASS_SETS:
        if char in members:
            return char_class
    return CharacterClass.ANY


def _count_in(password: str, members: frozenset[str]) -> int:
    return sum(1 for c in password if c in members)


def count_uppercase(password: str) -> int:
    return _count_in(password, UPPERCASE)


def count_lowercase(password: str) -> int:
    return _count_in(password, LOWERCASE)


def count_digits(password: str) -> int:
    return _count_in(password, DIGITS)


def count_special(password: str) -> int:
    return _count_in(password, SPECIALS)


def count_classes(password: str) -> CharacterClassCounts:
    """Count every class in a single pass over *password*."""
    tally: Counter[CharacterClass] = Counter(classify_char(c) for c in password)
    return CharacterClassCounts(
        upper=tally[CharacterClass.UPPER],
        lower=tally[CharacterClass.LOWER],
        digit=tally[CharacterClass.DIGIT],
        special=tally[CharacterClass.SPECIAL],
    )


def count_occurrences(password: str) -> Counter[str]:
    """Map each character to its total number of occurrences."""
    return Counter(password)

"""
Topology Matcher
=================

A password's topology is the sequence of class tags of its characters:
``"Falcon2024!"`` has topology ``ullllldddds``. Cracking research shows
that users who satisfy complexity rules gravitate to a handful of
shapes (a capitalised word, then digits, then a symbol), so a policy
can reject those shapes outright. This is a denylist of structures,
not of literal strings.

Topologies are written either as plain tag strings (``"ullllldddds"``),
as run notation (``"u l5 d4 s"``), or as hashcat masks
(``"?u?l?l?l?l?l?d?d?d?d?s"``). A banned ``a`` tag matches any class.

References:
    - KoreLogic (2014). PathWell: Password Topology Histogram Wear-Leveling.
      BSides Asheville.
    - Weir, M., Aggarwal, S., Collins, M., & Stern, H. (2010). Testing
      Metrics for Password Creation Policies by Attacking Large Sets of
      Revealed Passwords. CCS.
"""

from __future__ import annotations

import re
from collections import defaultdict
from typing import Iterable

from hardpass.core.models import CharacterClass, RuleOutcome
from hardpass.rules.base import PolicyRule
from hardpass.rules.counters import classify_char

_TAGS = "".join(c.value for c in CharacterClass)
_RUN_TOKEN = re.compile(rf"([{_TAGS}])(\d+)")
_TAG_TOKEN = re.compile(rf"[{_TAGS}]+")
_MASK = re.compile(rf"(?:\?[{_TAGS}])+")


# Shapes long enough to pass the default length rule and spanning at
# least three classes, so the other rules would otherwise admit them.
BANNED_TOPOLOGIES: tuple[str, ...] = (
    # 10 characters
    "u l7 d2",
    "u l6 d3",
    "u l5 d4",
    "u l7 d s",
    "u l6 d2 s",
    "u l5 d3 s",
    "u l4 d4 s",
    "u l6 s d2",
    "u l4 s d4",
    # 11 characters
    "u l8 d2",
    "u l7 d3",
    "u l6 d4",
    "u l8 d s",
    "u l7 d2 s",
    "u l5 d4 s",
    "u l7 s d2",
    "u l5 s d4",
    # 12 characters
    "u l9 d2",
    "u l7 d4",
    "u l9 d s",
    "u l8 d2 s",
    "u l6 d4 s",
    "u l8 s d2",
    # 13 characters
    "u l10 d2",
    "u l8 d4",
    "u l9 d2 s",
    "u l7 d4 s",
    # 14 characters
    "u l11 d2",
    "u l9 d4",
    "u l10 d2 s",
    "u l8 d4 s",
)


def parse_topology(notation: str) -> str:
    """Expand *notation* into a plain tag string.

    Args:
        notation: Tag string, run notation or hashcat mask.

    Returns:
        The topology as a string of ``u``/``l``/``d``/``s``/``a`` tags.

    Raises:
        ValueError: If *notation* is empty or contains an unknown token.
    """
    stripped = notation.strip()
    if not stripped:
        raise ValueError("Topology notation is empty")

    if _MASK.fullmatch(stripped):
        return stripped.replace("?", "")

    tags: list[str] = []
    for token in stripped.split():
        run = _RUN_TOKEN.fullmatch(token)
        if run:
            count = int(run.group(2))
            if count < 1:
                raise ValueError(f"Run length must be positive in {token!r}")
            tags.append(run.group(1) * count)
        elif _TAG_TOKEN.fullmatch(token):
            tags.append(token)
        else:
            raise ValueError(f"Invalid topology token {token!r} in {notation!r}")
    return "".join(tags)


def topology_of(password: str) -> str:
    """Return the class-tag topology of *password*, one tag per character."""
    return "".join(classify_char(c).value for c in password)


def topology_matches(topology: str, banned: str) -> bool:
    """Per-position equality; a banned ``a`` accepts any tag."""
    if len(topology) != len(banned):
        return False
    wildcard = CharacterClass.ANY.value
    return all(b == wildcard or b == t for t, b in zip(topology, banned))


class TopologyRule(PolicyRule):
    """Reject passwords whose topology is on the banned list.

    Args:
        banned: Topologies to ban, in any accepted notation. Defaults
            to :data:`BANNED_TOPOLOGIES`.
        extra: Additional topologies appended to *banned*.
    """

    name = "topology"

    def __init__(
        self,
        banned: Iterable[str] | None = None,
        extra: Iterable[str] = (),
    ) -> None:
        source = list(BANNED_TOPOLOGIES if banned is None else banned)
        source.extend(extra)
        self._by_length: dict[int, set[str]] = defaultdict(set)
        for notation in source:
            shape = parse_topology(notation)
            self._by_length[len(shape)].add(shape)

    @property
    def description(self) -> str:
        return "Not follow a commonly guessed structure (e.g. Word1234!)"

    @property
    def banned(self) -> list[str]:
        return sorted(
            shape for shapes in self._by_length.values() for shape in shapes
        )

    def is_banned(self, password: str) -> bool:
        candidates = self._by_length.get(len(password))
        if not candidates:
            return False
        topology = topology_of(password)
        return any(topology_matches(topology, shape) for shape in candidates)

    def check(self, password: str) -> RuleOutcome:
        if not self.is_banned(password):
            return RuleOutcome(rule=self.name, passed=True)
        return RuleOutcome(
            rule=self.name,
            passed=False,
            suggestions=[
                "Avoid common patterns such as a capitalised word "
                "followed by digits and a symbol"
            ],
        )

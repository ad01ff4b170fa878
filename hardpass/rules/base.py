"""
Rule Abstractions
==================

A rule is a named check with a human-readable description. Running it
against a password yields a :class:`RuleOutcome` carrying zero or more
remediation suggestions. The evaluator composes rules from a stable
list, so new checks (dictionary lookups, breach services) plug in as
further :class:`PolicyRule` instances.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from hardpass.core.models import RuleOutcome


class PolicyRule(ABC):
    """Base class for every policy rule."""

    #: Stable identifier reported in outcomes and findings.
    name: str = "rule"

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line statement of the requirement, for policy listings."""

    @abstractmethod
    def check(self, password: str) -> RuleOutcome:
        """Evaluate *password*; must not raise for any ``str`` input."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class PredicateRule(PolicyRule):
    """A rule built from a predicate and the single suggestion it emits.

    Args:
        name: Stable rule identifier.
        predicate: Returns ``True`` when the password satisfies the rule.
        suggestion: Emitted when the predicate returns ``False``.
        description: Policy statement; defaults to *suggestion*.
    """

    def __init__(
        self,
        name: str,
        predicate: Callable[[str], bool],
        suggestion: str,
        description: str | None = None,
    ) -> None:
        self.name = name
        self._predicate = predicate
        self._suggestion = suggestion
        self._description = description or suggestion

    @property
    def description(self) -> str:
        return self._description

    @property
    def suggestion(self) -> str:
        return self._suggestion

    def check(self, password: str) -> RuleOutcome:
        if self._predicate(password):
            return RuleOutcome(rule=self.name, passed=True)
        return RuleOutcome(
            rule=self.name, passed=False, suggestions=[self._suggestion]
        )

"""
Hardpass Rules
===============

Independent rule checks composed by the policy evaluator. Each rule
reports its own suggestions; none short-circuits another.
"""

from hardpass.rules.base import PolicyRule, PredicateRule
from hardpass.rules.complexity import ComplexityRule
from hardpass.rules.length import max_length_rule, min_length_rule
from hardpass.rules.repetition import RepeatedCharacterRule, find_repeated_runs
from hardpass.rules.topology import (
    BANNED_TOPOLOGIES,
    TopologyRule,
    parse_topology,
    topology_of,
)

__all__ = [
    "BANNED_TOPOLOGIES",
    "ComplexityRule",
    "PolicyRule",
    "PredicateRule",
    "RepeatedCharacterRule",
    "TopologyRule",
    "find_repeated_runs",
    "max_length_rule",
    "min_length_rule",
    "parse_topology",
    "topology_of",
]

"""
Hardpass -- Password Complexity Policy Evaluator
=================================================

Evaluates candidate passwords against the OWASP complexity policy and
explains every violated requirement:

    - at least 3 of: upper case, lower case, digit, special character
    - 10 to 128 characters, counted verbatim
    - no more than 2 identical characters in a row
    - no commonly guessed structural topology

Modules:
    - hardpass.rules: Individual rule checks
    - hardpass.core.evaluator: Policy evaluator and feedback assembly
    - hardpass.core.engine: Facade used by the CLI
    - hardpass.output: Console and JSON output
    - hardpass.cli: Click-based command-line interface

References:
    - OWASP Authentication Cheat Sheet -- Password Complexity.
    - KoreLogic (2014). PathWell: Password Topology Histogram Wear-Leveling.
"""

from hardpass.core.evaluator import PolicyEvaluator, evaluate, is_strong
from hardpass.core.models import EvaluationResult, Feedback

__version__ = "1.0.0"
__tool_name__ = "hardpass"

__all__ = [
    "EvaluationResult",
    "Feedback",
    "PolicyEvaluator",
    "evaluate",
    "is_strong",
]

"""
Hardpass Engine
================

Facade over the policy evaluator used by the command-line front end.
Wraps each evaluation in a :class:`shared.models.ScanResult` with one
finding per violated rule and the :class:`PolicyReport` in ``metadata``.

Nothing derived from the password beyond its masked form, its length
and per-class counts leaves this module; the logger only ever sees rule
names.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
    - OWASP Authentication Cheat Sheet -- Password Complexity.
"""

from __future__ import annotations

from typing import Iterable, Optional

from shared.config import HardpassConfig
from shared.logger import HardpassLogger
from shared.models import Finding, ScanResult, Severity

from hardpass.core.evaluator import PolicyEvaluator
from hardpass.core.models import PolicyReport, RuleOutcome
from hardpass.rules.base import PolicyRule

_OWASP_REFERENCE = (
    "OWASP Authentication Cheat Sheet, Password Complexity. "
    "https://cheatsheetseries.owasp.org/cheatsheets/Authentication_Cheat_Sheet.html"
)

_RULE_SEVERITY: dict[str, Severity] = {
    "complexity": Severity.HIGH,
    "length_min": Severity.HIGH,
    "length_max": Severity.MEDIUM,
    "repeated_characters": Severity.MEDIUM,
    "topology": Severity.MEDIUM,
}


class HardpassEngine:
    """Evaluate passwords and wrap the outcome for presentation.

    Usage::

        engine = HardpassEngine()
        result = engine.check_password("Cm;cF*1f5L")
        report = PolicyReport(**result.metadata)

    Attributes:
        config: Active configuration.
        evaluator: Policy evaluator built from ``config.policy``.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[HardpassConfig] = None,
        *,
        extra_rules: Iterable[PolicyRule] = (),
        logger: Optional[HardpassLogger] = None,
    ) -> None:
        self.config = config or HardpassConfig()
        self.logger = logger or HardpassLogger.from_config("engine", self.config)
        self.evaluator = PolicyEvaluator.from_config(self.config.policy).with_rules(
            *extra_rules
        )

    # ------------------------------------------------------------------ #
    #  Evaluation
    # ------------------------------------------------------------------ #

    def check_password(self, password: str, label: str = "[password]") -> ScanResult:
        """Evaluate one password.

        Args:
            password: The candidate password, used verbatim.
            label: Target label for the result (never the password).

        Returns:
            ScanResult whose ``metadata`` is a serialised PolicyReport.
        """
        if not isinstance(password, str):
            raise TypeError(f"password must be str, not {type(password).__name__}")
        result = ScanResult(tool_name="hardpass", target=label)

        with self.logger.operation("check_password"):
            try:
                report = self.evaluator.report(password)
            except Exception as exc:
                # Only injected rules can fail; built-in rules accept any str.
                # The message may quote the password, so only the type is kept.
                error = type(exc).__name__
                self.logger.error(
                    "Policy evaluation failed: %s", error,
                    exc_info=self.config.global_settings.debug,
                )
                result.add_finding(Finding(
                    title="Policy Evaluation Error",
                    description=f"A policy rule raised {error}.",
                    severity=Severity.MEDIUM,
                ))
                return result.finalize(summary=f"Error: {error}")

            result.metadata = report.model_dump()
            for outcome in report.outcomes:
                if not outcome.passed:
                    self.logger.debug("Rule failed: %s", outcome.rule, rule=outcome.rule)
                    result.add_finding(self._finding_for(outcome))

        return result.finalize(summary=self._summary(report))

    def check_many(self, passwords: Iterable[str]) -> list[ScanResult]:
        """Evaluate several passwords; targets are labelled by position."""
        with self.logger.timed("batch evaluation"):
            results = [
                self.check_password(password, label=f"[password #{idx}]")
                for idx, password in enumerate(passwords, start=1)
            ]
        weak = sum(1 for r in results if r.findings)
        self.logger.debug("Batch complete", total=len(results), weak=weak)
        return results

    def describe_policy(self) -> list[str]:
        return self.evaluator.describe()

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _finding_for(outcome: RuleOutcome) -> Finding:
        return Finding(
            title=f"Policy Rule Failed: {outcome.rule}",
            description=" ".join(f"{s}." for s in outcome.suggestions)
            or f"The password does not satisfy the {outcome.rule} rule.",
            severity=_RULE_SEVERITY.get(outcome.rule, Severity.MEDIUM),
            evidence={"rule": outcome.rule},
            recommendation=outcome.suggestions[0] if outcome.suggestions else "",
            references=[_OWASP_REFERENCE],
        )

    @staticmethod
    def _summary(report: PolicyReport) -> str:
        if report.result.is_strong:
            return f"Strong: all policy rules satisfied (score {report.result.score}/4)"
        return (
            f"Weak: {len(report.failed_rules)} rule(s) failed "
            f"({', '.join(report.failed_rules)}), score {report.result.score}/4"
        )

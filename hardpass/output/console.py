"""
Hardpass Console Output
========================

Rich-based formatters for policy evaluations: a verdict panel, the
per-rule checklist, character-class counts and the suggestion list.

Uses the shared console infrastructure for consistent styling.
"""

from __future__ import annotations

from typing import Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import HardpassConsole
from hardpass.core.models import PolicyReport

_VERDICT_STYLES: dict[bool, str] = {
    True: "bold bright_green",
    False: "bold white on red",
}


class HardpassConsoleOutput:
    """Render :class:`PolicyReport` objects on a :class:`HardpassConsole`."""

    def __init__(self, console: HardpassConsole) -> None:
        self.console = console
        self._rich = console.rich

    def display_report(self, report: PolicyReport) -> None:
        """Display one evaluation: verdict, rule checklist and suggestions."""
        self.console.section("Password Policy")

        strong = report.result.is_strong
        verdict = Text()
        verdict.append("Score: ", style="bold")
        verdict.append(f"{report.result.score}/4  ")
        verdict.append("STRONG" if strong else "WEAK", style=_VERDICT_STYLES[strong])
        if report.result.feedback and report.result.feedback.warning:
            verdict.append(f"  {report.result.feedback.warning}", style="yellow")
        self._rich.print(Panel(verdict, title="Verdict", border_style="cyan"))

        details = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        details.add_column("Property", style="bold")
        details.add_column("Value")
        details.add_row("Password", Text(report.password_masked))
        details.add_row("Length", str(report.length))
        counts = report.class_counts
        details.add_row("Upper case", str(counts.upper))
        details.add_row("Lower case", str(counts.lower))
        details.add_row("Digits", str(counts.digit))
        details.add_row("Special", str(counts.special))
        self._rich.print(details)

        rules = Table(
            title="Rules",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        rules.add_column("Rule", style="bold")
        rules.add_column("Status", justify="center")
        for outcome in report.outcomes:
            status = (
                Text("PASS", style="green") if outcome.passed
                else Text("FAIL", style="bold red")
            )
            rules.add_row(outcome.rule, status)
        self._rich.print(rules)

        self.display_suggestions(report.result.suggestions)

    def display_suggestions(self, suggestions: Sequence[str]) -> None:
        if not suggestions:
            self.console.success("Password satisfies every policy rule.")
            return
        body = Text()
        for idx, suggestion in enumerate(suggestions, start=1):
            if idx > 1:
                body.append("\n")
            body.append(f"{idx}. ", style="dim")
            body.append(suggestion)
        self._rich.print(Panel(body, title="Suggestions", border_style="yellow"))

    def display_batch(self, reports: Sequence[PolicyReport]) -> None:
        """One row per password with its verdict and failed rules."""
        self.console.section("Batch Results")
        rows = [
            (
                idx,
                report.password_masked,
                report.length,
                f"{report.result.score}/4",
                ", ".join(report.failed_rules) or "-",
            )
            for idx, report in enumerate(reports, start=1)
        ]
        self.console.table(
            "Passwords",
            ["#", "Password", "Length", "Score", "Failed rules"],
            rows,
            caption=f"{sum(r.result.is_strong for r in reports)}/{len(reports)} strong",
        )

    def display_policy(self, statements: Sequence[str]) -> None:
        self.console.section("Active Policy")
        body = Text("A password must:\n", style="bold")
        for statement in statements:
            body.append(f"  - {statement}\n", style="")
        self._rich.print(Panel(body, border_style="cyan"))

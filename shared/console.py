"""
Hardpass Console Interface
===========================

Rich console wrapper used by the hardpass command-line front end: a
themed banner, section rules, a success line and bordered tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from shared.models import Finding

_HARDPASS_THEME = Theme(
    {
        "hardpass.banner": "bold bright_cyan",
        "hardpass.section": "bold bright_magenta",
        "hardpass.success": "bold green",
        "hardpass.info": "bold bright_blue",
        "hardpass.dim": "dim white",
        "hardpass.critical": "bold white on red",
        "hardpass.high": "bold red",
        "hardpass.medium": "bold yellow",
        "hardpass.low": "bold bright_cyan",
        "hardpass.informational": "bold bright_blue",
    }
)

_BANNER_ART = r"""[bright_cyan]
  _                   _
 | |__   __ _ _ __ __| |_ __   __ _ ___ ___
 | '_ \ / _` | '__/ _` | '_ \ / _` / __/ __|
 | | | | (_| | | | (_| | |_) | (_| \__ \__ \
 |_| |_|\__,_|_|  \__,_| .__/ \__,_|___/___/
                       |_|
[/bright_cyan]"""

_TAGLINE = "Password complexity policy evaluator"

_SEVERITY_STYLES: dict[str, str] = {
    "CRITICAL": "hardpass.critical",
    "HIGH": "hardpass.high",
    "MEDIUM": "hardpass.medium",
    "LOW": "hardpass.low",
    "INFO": "hardpass.informational",
}


class HardpassConsole:
    """Presentation layer shared by every hardpass command.

    Cell and message text may contain user-supplied data (masked
    passwords, rule names from injected rules), so it is always wrapped
    in :class:`rich.text.Text` and never parsed as markup.

    Usage::

        con = HardpassConsole()
        con.banner("1.0.0")
        con.section("Password Policy")
        con.success("Password satisfies every policy rule.")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        self._console = Console(
            theme=_HARDPASS_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        return self._console

    def banner(self, version: str) -> None:
        """Logo panel with tagline and version."""
        body = Text.from_markup(_BANNER_ART)
        body.append("\n")
        body.append(_TAGLINE, style="hardpass.info")
        body.append(f"\nVersion: {version}", style="hardpass.dim")
        self._console.print(
            Panel(Align.center(body), border_style="hardpass.banner", padding=(0, 2))
        )

    def section(self, title: str) -> None:
        self._console.rule(Text(f"  {title}  "), style="hardpass.section")
        self._console.print()

    def success(self, message: str) -> None:
        line = Text("[✔] ", style="hardpass.success")
        line.append(message)
        self._console.print(line)

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    @staticmethod
    def _styled_table(title: str, caption: str | None = None) -> Table:
        return Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Iterable[Sequence[Any]],
        *,
        caption: str | None = None,
    ) -> None:
        """Print *rows* under *columns*; every cell is stringified."""
        tbl = self._styled_table(title, caption)
        for name in columns:
            tbl.add_column(name)
        for row in rows:
            tbl.add_row(*(Text(str(cell)) for cell in row))
        self._console.print(tbl)

    def findings_table(self, findings: Sequence[Finding]) -> None:
        """One row per finding, severity coloured."""
        tbl = self._styled_table("Findings")
        tbl.add_column("Severity", width=10)
        tbl.add_column("Title")
        tbl.add_column("Detail", ratio=2)
        for finding in findings:
            severity = finding.severity
            tbl.add_row(
                Text(severity.label, style=_SEVERITY_STYLES.get(severity.value, "")),
                Text(finding.title),
                Text(finding.description),
            )
        self._console.print(tbl)

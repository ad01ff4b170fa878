"""
Hardpass CLI
=============

Click-based command-line interface for the hardpass policy evaluator.

Usage::

    python -m hardpass check                  # prompts without echo
    python -m hardpass check "Cm;cF*1f5L"
    python -m hardpass --output json check --raw "Cm;cF*1f5L"
    python -m hardpass batch passwords.txt
    python -m hardpass policy

``check`` and ``batch`` exit with status 1 when any password is weak,
so they can gate scripts and CI jobs.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, TextIO

import click

import hardpass
from shared.config import HardpassConfig
from shared.console import HardpassConsole
from shared.models import ScanResult

from hardpass.core.engine import HardpassEngine
from hardpass.core.models import PolicyReport
from hardpass.output.console import HardpassConsoleOutput
from hardpass.output.report import HardpassReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(hardpass.__version__, prog_name="hardpass")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a hardpass configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Output format (defaults to the configured format).",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the JSON report to this file.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """Hardpass -- password complexity policy evaluator.

    Checks passwords against the OWASP complexity policy and lists every
    requirement a password fails.
    """
    ctx.ensure_object(dict)

    try:
        hardpass_config = HardpassConfig.load(config) if config else HardpassConfig()
        engine = HardpassEngine(hardpass_config)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc

    output_format = output or hardpass_config.global_settings.output_format
    if output_format not in ("console", "json"):
        raise click.BadParameter(
            f"unsupported output format {output_format!r}", param_hint="--output"
        )

    console = HardpassConsole(quiet=quiet or output_format == "json")
    ctx.obj["config"] = hardpass_config
    ctx.obj["output_format"] = output_format
    ctx.obj["output_file"] = output_file
    ctx.obj["console"] = console
    ctx.obj["engine"] = engine
    ctx.obj["display"] = HardpassConsoleOutput(console)
    ctx.obj["reporter"] = HardpassReportGenerator()

    if not quiet and output_format == "console":
        console.banner(version=hardpass.__version__)


def _handle_output(ctx: click.Context, results: list[ScanResult]) -> None:
    """Emit *results* as a JSON report on stdout or into ``--output-file``."""
    reporter: HardpassReportGenerator = ctx.obj["reporter"]
    output_file = ctx.obj["output_file"]

    if output_file:
        path = reporter.generate_json(results, Path(output_file))
        click.echo(f"JSON report saved to: {path}", err=True)
    else:
        click.echo(reporter.render(results))


def _reports(results: list[ScanResult]) -> list[PolicyReport]:
    return [PolicyReport(**r.metadata) for r in results if r.metadata]


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password", required=False)
@click.option(
    "--raw",
    is_flag=True,
    default=False,
    help="With JSON output, print only {score, feedback}.",
)
@click.pass_context
def check(ctx: click.Context, password: Optional[str], raw: bool) -> None:
    """Check one password against the policy.

    When PASSWORD is omitted it is read from a hidden prompt, which keeps
    it out of shell history and process listings.
    """
    if password is None:
        password = click.prompt("Password", hide_input=True, err=True)

    engine: HardpassEngine = ctx.obj["engine"]
    result = engine.check_password(password)
    reports = _reports([result])

    if ctx.obj["output_format"] == "console":
        display: HardpassConsoleOutput = ctx.obj["display"]
        for report in reports:
            display.display_report(report)
        if not reports:
            ctx.obj["console"].findings_table(result.findings)
    elif raw and reports:
        click.echo(json.dumps(reports[0].result.to_dict(), ensure_ascii=False))
    else:
        _handle_output(ctx, [result])

    strong = bool(reports) and reports[0].result.is_strong
    ctx.exit(0 if strong else 1)


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.pass_context
def batch(ctx: click.Context, source: TextIO) -> None:
    """Check one password per line of SOURCE ("-" reads stdin).

    Only the line terminator is removed; leading and trailing spaces
    are part of the password. Empty lines are skipped.
    """
    passwords = [
        line[:-1] if line.endswith("\n") else line
        for line in source
    ]
    passwords = [p for p in passwords if p]

    engine: HardpassEngine = ctx.obj["engine"]
    results = engine.check_many(passwords)
    reports = _reports(results)

    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_batch(reports)
    else:
        _handle_output(ctx, results)

    all_strong = len(reports) == len(results) and all(
        r.result.is_strong for r in reports
    )
    ctx.exit(0 if all_strong else 1)


@cli.command()
@click.pass_context
def policy(ctx: click.Context) -> None:
    """Show the requirements of the active policy."""
    engine: HardpassEngine = ctx.obj["engine"]
    statements = engine.describe_policy()

    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_policy(statements)
    else:
        click.echo(json.dumps({"policy": statements}, indent=2, ensure_ascii=False))


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the hardpass CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()

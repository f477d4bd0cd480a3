"""CLI entry point - Click commands for stylint."""

from __future__ import annotations

import dataclasses
import logging
import sys

import click

from stylint import __version__
from stylint.cli._output import (
    FileReport,
    format_json,
    format_rules_json,
    format_rules_text,
    format_text,
    summary_line,
)
from stylint.core._types import Category, Severity
from stylint.core.config import (
    BUILTIN_PROFILES,
    ConfigError,
    StylintConfig,
    check_rule_patterns,
    load_config,
)
from stylint.core.scanner import scan_file
from stylint.core.violation import InputError
from stylint.rules import ALL_RULES, default_registry

EXIT_ERRORS = 1
EXIT_BAD_INPUT = 2


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", message="stylint %(version)s")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """stylint - line-oriented style checker."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
@click.option("--exclude-rules", default="", help="Comma-separated rule IDs to exclude.")
@click.option(
    "--min-severity",
    type=click.Choice([s.value for s in Severity]),
    default="warning",
    help="Minimum severity to report.",
)
@click.option("--no-color", is_flag=True, envvar="NO_COLOR", help="Disable ANSI colors.")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=False),
    help="Path to .stylint.toml or pyproject.toml config file.",
)
@click.option(
    "--profile",
    type=click.Choice(list(BUILTIN_PROFILES)),
    default=None,
    help="Rule filter profile (overrides config file profile).",
)
def lint(
    files: tuple[str, ...],
    fmt: str,
    exclude_rules: str,
    min_severity: str,
    no_color: bool,
    config_path: str | None,
    profile: str | None,
) -> None:
    """Check FILES for style violations.

    Exits 0 when no error-severity violation is found, 1 when at least one
    is, and 2 when a file cannot be read or decoded.
    """
    try:
        config: StylintConfig = load_config(config_path)
    except ConfigError as exc:
        click.echo(f"Error: invalid config: {exc}", err=True)
        sys.exit(EXIT_BAD_INPUT)

    if profile is not None:
        base = BUILTIN_PROFILES[profile]
        # Config file exclusions stay on top of the profile's.
        config = dataclasses.replace(
            config,
            min_severity=base.min_severity,
            include_rules=base.include_rules,
            categories=base.categories,
            exclude_rules=base.exclude_rules | config.exclude_rules,
        )

    if exclude_rules:
        try:
            extra = check_rule_patterns(
                (r.strip() for r in exclude_rules.split(",") if r.strip()), key="--exclude-rules"
            )
        except ConfigError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(EXIT_BAD_INPUT)
        config = dataclasses.replace(config, exclude_rules=config.exclude_rules | extra)

    registry = default_registry().select(config)
    severity = Severity(min_severity)

    reports: list[FileReport] = []
    failed = False
    for path in files:
        try:
            result = scan_file(path, registry)
        except InputError as exc:
            click.echo(f"Error: {exc}", err=True)
            failed = True
            continue
        reports.append(FileReport(path=path, result=result))

    if fmt == "json":
        click.echo(format_json(reports, min_severity=severity))
    else:
        for line in format_text(reports, min_severity=severity, no_color=no_color):
            click.echo(line)
        click.echo(summary_line(reports, min_severity=severity, no_color=no_color), err=True)

    if failed:
        sys.exit(EXIT_BAD_INPUT)
    if any(r.result.has_errors for r in reports):
        sys.exit(EXIT_ERRORS)


@cli.command()
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
@click.option("--no-color", is_flag=True, envvar="NO_COLOR", help="Disable ANSI colors.")
@click.option(
    "--category",
    default=None,
    type=click.Choice([c.value for c in Category]),
    help="Filter by category.",
)
@click.option(
    "--severity",
    "sev",
    default=None,
    type=click.Choice([s.value for s in Severity]),
    help="Filter by severity.",
)
def rules(fmt: str, no_color: bool, category: str | None, sev: str | None) -> None:
    """List all style rules."""
    filtered = list(ALL_RULES)
    if category is not None:
        filtered = [r for r in filtered if r.category == category]
    if sev is not None:
        severity = Severity(sev)
        filtered = [r for r in filtered if r.severity == severity]

    total = len(ALL_RULES) if (category is not None or sev is not None) else None

    if fmt == "json":
        click.echo(format_rules_json(filtered))
    else:
        click.echo(format_rules_text(filtered, no_color=no_color, total=total))

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

import click

from stylint import __version__
from stylint.core._types import Category, Severity

if TYPE_CHECKING:
    from stylint.core.rule import Rule
    from stylint.core.violation import ScanResult, Violation

_SEVERITY_COLORS: dict[Severity, str] = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
}

_LINE_WIDTH = 66


@dataclass(frozen=True, slots=True)
class FileReport:
    path: str
    result: ScanResult


def _use_color(no_color: bool) -> bool:
    if no_color:
        return False
    return not os.environ.get("NO_COLOR", "")


def _c(text: str, *, color: bool, fg: str | None = None, bold: bool | None = None) -> str:
    if not color:
        return text
    return click.style(text, fg=fg, bold=bold)


def format_violation(v: Violation, *, prefix: str = "", no_color: bool = False) -> str:
    """Render ``<line>:<column?>: <severity>: <message> [<rule-id>]``."""
    sev = _c(str(v.severity), color=_use_color(no_color), fg=_SEVERITY_COLORS.get(v.severity))
    return f"{prefix}{v.location} {sev}: {v.message} [{v.rule_id}]"


def format_text(
    reports: list[FileReport],
    *,
    min_severity: Severity = Severity.WARNING,
    no_color: bool = False,
) -> list[str]:
    """One line per violation, file by file, in scan order.

    Lines carry a ``<path>:`` prefix only when more than one file is reported.
    """
    show_path = len(reports) > 1
    lines: list[str] = []
    for report in reports:
        prefix = f"{report.path}:" if show_path else ""
        lines.extend(
            format_violation(v, prefix=prefix, no_color=no_color)
            for v in report.result.filtered(min_severity)
        )
    return lines


def summary_line(
    reports: list[FileReport],
    *,
    min_severity: Severity = Severity.WARNING,
    no_color: bool = False,
) -> str:
    color = _use_color(no_color)
    violations = [v for r in reports for v in r.result.filtered(min_severity)]
    total = len(violations)
    if total == 0:
        return _c("No violations found.", color=color, fg="green")
    by_sev: dict[Severity, int] = dict.fromkeys(Severity, 0)
    for v in violations:
        by_sev[v.severity] += 1
    parts = [
        _c(f"{by_sev[s]} {s}", color=color, fg=_SEVERITY_COLORS.get(s))
        for s in (Severity.ERROR, Severity.WARNING)
        if by_sev[s]
    ]
    noun = "violation" if total == 1 else "violations"
    return f"{total} {noun} ({', '.join(parts)})"


def format_json(
    reports: list[FileReport],
    *,
    min_severity: Severity = Severity.WARNING,
) -> str:
    files = []
    by_sev: dict[Severity, int] = dict.fromkeys(Severity, 0)
    for report in reports:
        violations = report.result.filtered(min_severity)
        for v in violations:
            by_sev[v.severity] += 1
        files.append(
            {
                "path": report.path,
                "lines": report.result.line_count,
                "violations": [
                    {
                        "rule_id": v.rule_id,
                        "severity": str(v.severity),
                        "line": v.line,
                        "column": v.column,
                        "message": v.message,
                        "hint": v.hint,
                    }
                    for v in violations
                ],
            }
        )

    data = {
        "version": __version__,
        "files": files,
        "summary": {
            "total": sum(by_sev.values()),
            "error": by_sev[Severity.ERROR],
            "warning": by_sev[Severity.WARNING],
        },
    }
    return json.dumps(data, indent=2)


_CATEGORY_TITLES: dict[str, str] = {
    Category.WHITESPACE: "Whitespace",
    Category.SYNTAX: "Syntax",
    Category.NAMING: "Naming",
    Category.OPTIONALS: "Optionals",
}


def format_rules_text(
    rules: list[Rule],
    *,
    no_color: bool = False,
    total: int | None = None,
) -> str:
    color = _use_color(no_color)
    lines: list[str] = []
    w = lines.append

    id_w = max((len(r.id) for r in rules), default=0)
    sev_w = max((len(str(r.severity)) for r in rules), default=0)

    groups: dict[str, list[Rule]] = {}
    for r in rules:
        groups.setdefault(r.category, []).append(r)

    count = len(rules)
    header = f"stylint {__version__} - {count} rules"
    if total is not None and total != count:
        header += f" (filtered from {total})"
    w(header)

    for category, group in groups.items():
        title = _CATEGORY_TITLES.get(category, category or "Other")
        header = f"── {title} ({len(group)}) "
        fill = "─" * max(0, _LINE_WIDTH - len(header))
        w("")
        w(_c(header + fill, color=color, bold=True))
        w("")
        for r in group:
            rule_id = _c(r.id.ljust(id_w), color=color, bold=True)
            severity = _c(
                str(r.severity).ljust(sev_w), color=color, fg=_SEVERITY_COLORS.get(r.severity)
            )
            w(f"  {rule_id}  {severity}  {r.summary}")

    return "\n".join(lines)


def format_rules_json(rules: list[Rule]) -> str:
    data = {
        "version": __version__,
        "rules": [
            {
                "id": r.id,
                "severity": str(r.severity),
                "summary": r.summary,
                "hint": r.hint,
                "category": r.category,
            }
            for r in rules
        ],
        "total": len(rules),
    }
    return json.dumps(data, indent=2)

from dataclasses import dataclass

from stylint.core._types import SEVERITY_LEVEL, Severity


@dataclass(frozen=True, slots=True)
class Violation:
    """One line failing one rule."""

    rule_id: str
    severity: Severity
    line: int
    message: str
    column: int | None = None
    hint: str = ""

    @property
    def location(self) -> str:
        if self.column is None:
            return f"{self.line}:"
        return f"{self.line}:{self.column}:"


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Snapshot of a single scan.

    Violations are ordered by line number, then by rule registration order
    within a line.
    """

    violations: tuple[Violation, ...] = ()
    line_count: int = 0

    @property
    def errors(self) -> tuple[Violation, ...]:
        return tuple(v for v in self.violations if v.severity == Severity.ERROR)

    @property
    def warnings(self) -> tuple[Violation, ...]:
        return tuple(v for v in self.violations if v.severity == Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        return any(v.severity == Severity.ERROR for v in self.violations)

    def filtered(self, min_severity: Severity) -> tuple[Violation, ...]:
        level = SEVERITY_LEVEL[min_severity]
        return tuple(v for v in self.violations if SEVERITY_LEVEL[v.severity] >= level)

    def __len__(self) -> int:
        return len(self.violations)


class StylintError(Exception):
    """Base class for errors raised by stylint itself (not rule violations)."""


class DuplicateRuleError(StylintError, ValueError):
    """Raised when two rules share an identifier."""

    def __init__(self, rule_id: str) -> None:
        self.rule_id = rule_id
        super().__init__(f"Duplicate rule ID: {rule_id}")


class InputError(StylintError):
    """Raised when source text cannot be read."""


class InvalidEncodingError(InputError):
    """Raised when source bytes are not valid UTF-8."""

    def __init__(self, reason: str, *, source: str = "<input>") -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: cannot decode as UTF-8: {reason}")

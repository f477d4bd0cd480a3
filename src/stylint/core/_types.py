from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from stylint.core.lexer import Line
    from stylint.core.rule import Hit


class Severity(StrEnum):
    """Violation severity levels (ordered lowest → highest)."""

    WARNING = "warning"
    ERROR = "error"


SEVERITY_LEVEL: dict[Severity, int] = {
    Severity.WARNING: 0,
    Severity.ERROR: 1,
}


class Category(StrEnum):
    """Grouping labels for built-in rules."""

    WHITESPACE = "whitespace"
    SYNTAX = "syntax"
    NAMING = "naming"
    OPTIONALS = "optionals"


Matcher: TypeAlias = "Callable[[Line], Hit | None]"

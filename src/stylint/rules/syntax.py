from stylint.core._types import Category, Severity
from stylint.core.matchers import pattern
from stylint.core.rule import Rule

_CATEGORY = Category.SYNTAX

NO_SEMICOLONS = Rule(
    "no-semicolons",
    Severity.ERROR,
    "Line contains a semicolon",
    pattern(r";"),
    hint="Put each statement on its own line without a trailing ';'",
    category=_CATEGORY,
)
BRACE_SAME_LINE = Rule(
    "brace-same-line",
    Severity.WARNING,
    "Opening brace on its own line",
    pattern(r"^\s*(?P<at>\{)\s*(?://.*)?$"),
    hint="Open braces on the same line as the statement they belong to",
    category=_CATEGORY,
)
COLON_SPACING = Rule(
    "colon-spacing",
    Severity.WARNING,
    "Colon in declaration of '{name}' should follow the name and be followed by one space",
    pattern(r"\b(?:let|var)\s+(?P<name>\w+)\s*(?P<at>:)(?:(?<=\s:)|(?=\S))"),
    hint="Write 'name: Type'",
    category=_CATEGORY,
)

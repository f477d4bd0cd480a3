from stylint.core._types import Category, Severity
from stylint.core.lexer import Line
from stylint.core.matchers import pattern
from stylint.core.rule import Hit, Rule

_CATEGORY = Category.WHITESPACE


def _space_before_tab(line: Line) -> Hit | None:
    indent = line.indent
    first_space = indent.find(" ")
    if first_space == -1 or "\t" not in indent[first_space:]:
        return None
    return Hit(column=first_space + 1)


NO_SPACE_INDENT = Rule(
    "no-space-indent",
    Severity.WARNING,
    "Indentation has a space before a tab",
    _space_before_tab,
    hint="Indent with tabs only, or with spaces only",
    category=_CATEGORY,
)
TRAILING_WHITESPACE = Rule(
    "trailing-whitespace",
    Severity.WARNING,
    "Line has trailing whitespace",
    pattern(r"(?P<at>[ \t]+)$", source="text"),
    category=_CATEGORY,
)

from stylint.core._types import Category, Severity
from stylint.core.matchers import pattern
from stylint.core.rule import Rule

_CATEGORY = Category.OPTIONALS

NO_FORCE_CAST = Rule(
    "no-force-cast",
    Severity.WARNING,
    "Forced cast with 'as!'",
    pattern(r"\bas!"),
    hint="Use 'as?' and handle the nil case",
    category=_CATEGORY,
)
NO_FORCE_TRY = Rule(
    "no-force-try",
    Severity.WARNING,
    "Forced 'try!'",
    pattern(r"\btry!"),
    hint="Use 'try' inside 'do/catch', or 'try?'",
    category=_CATEGORY,
)

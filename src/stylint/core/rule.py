from collections import defaultdict
from dataclasses import dataclass, field

from stylint.core._types import Matcher, Severity


@dataclass(frozen=True, slots=True)
class Hit:
    """A matcher's report that a line breaks a rule.

    ``column`` is 1-based, or ``None`` when the rule applies to the whole
    line.  ``params`` fill the placeholders of the rule's ``summary``.
    """

    column: int | None = None
    params: dict[str, str] = field(default_factory=dict, hash=False)


@dataclass(frozen=True, slots=True)
class Rule:
    """A single checkable style rule.

    Rule instances are data plus a pure predicate: ``matcher`` looks at one
    :class:`~stylint.core.lexer.Line` and returns a :class:`Hit` or ``None``.

    Example::

        NO_SEMICOLONS = Rule(
            id="no-semicolons",
            severity=Severity.ERROR,
            summary="Statement ends with a semicolon",
            matcher=pattern(r";"),
            hint="Drop the trailing ';'",
            category=Category.SYNTAX,
        )
    """

    id: str
    severity: Severity
    summary: str
    matcher: Matcher = field(compare=False, repr=False)
    hint: str = ""
    category: str = ""

    def render(self, hit: Hit) -> str:
        """Fill the summary template from *hit*'s params.

        A placeholder the hit has no value for (an optional group that did not
        take part in the match) renders as an empty string.
        """
        if not hit.params:
            return self.summary
        return self.summary.format_map(defaultdict(str, hit.params))

    def __str__(self) -> str:
        return f"[{self.id}] {self.summary}"

"""Matcher factories for building rules from regular expressions."""

import re
from typing import Literal

from stylint.core._types import Matcher
from stylint.core.lexer import Line
from stylint.core.rule import Hit


def pattern(regex: str | re.Pattern[str], *, source: Literal["code", "text"] = "code") -> Matcher:
    """Return a matcher that searches each line for *regex*.

    By default the search runs over :attr:`Line.code`, so string literals and
    comments never match.  Pass ``source="text"`` to search the raw line.

    The hit's column points at the named group ``at`` if the pattern defines
    one, otherwise at the start of the match.  All other named groups become
    the hit's params.
    """
    compiled = re.compile(regex) if isinstance(regex, str) else regex
    has_anchor = "at" in compiled.groupindex

    def match(line: Line) -> Hit | None:
        m = compiled.search(line.code if source == "code" else line.text)
        if m is None:
            return None
        start = m.start("at") if has_anchor else m.start()
        params = {k: v for k, v in m.groupdict().items() if k != "at" and v is not None}
        return Hit(column=start + 1, params=params)

    return match


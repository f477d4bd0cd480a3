"""Line splitting and literal masking.

Rules match against :attr:`Line.code`, a copy of the raw line in which every
character inside a string literal or comment is blanked out.  Delimiters stay
in place so columns computed on ``code`` are valid for ``text`` too.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class Line:
    """A single source line with its literal-masked counterpart."""

    number: int
    text: str
    code: str

    @property
    def indent(self) -> str:
        """Leading spaces and tabs of the raw line."""
        return self.text[: len(self.text) - len(self.text.lstrip(" \t"))]


def split_lines(text: str) -> list[str]:
    """Split *text* on ``\\n``, ``\\r\\n`` and ``\\r``.

    An empty string has no lines, and a trailing terminator does not open an
    extra empty line.
    """
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


class _State(Enum):
    STRING = auto()
    TEXT_BLOCK = auto()
    BLOCK_COMMENT = auto()
    INTERPOLATION = auto()


class _Masker:
    """Carries literal/comment state from one line to the next.

    ``stack`` holds the open constructs, innermost last; an empty stack means
    plain code.  ``\\(`` inside a string opens an interpolation whose body is
    code again, closed by the matching ``)``.
    """

    def __init__(self) -> None:
        self.stack: list[_State] = []
        self.comment_depth = 0
        self.parens: list[int] = []

    @property
    def state(self) -> _State | None:
        return self.stack[-1] if self.stack else None

    def mask(self, raw: str) -> str:
        out = list(raw)
        i = 0
        n = len(raw)
        while i < n:
            state = self.state
            if state is None or state is _State.INTERPOLATION:
                if raw.startswith("//", i):
                    out[i + 2 :] = " " * (n - i - 2)
                    break
                if raw.startswith("/*", i):
                    self.stack.append(_State.BLOCK_COMMENT)
                    self.comment_depth = 1
                    i += 2
                elif raw.startswith('"""', i):
                    self.stack.append(_State.TEXT_BLOCK)
                    i += 3
                elif raw[i] == '"':
                    self.stack.append(_State.STRING)
                    i += 1
                elif state is _State.INTERPOLATION and raw[i] in "()":
                    self.parens[-1] += 1 if raw[i] == "(" else -1
                    if self.parens[-1] == 0:
                        self.parens.pop()
                        self.stack.pop()
                        out[i] = " "
                    i += 1
                else:
                    i += 1
            elif state is _State.BLOCK_COMMENT:
                if raw.startswith("/*", i):
                    # Block comments nest.
                    self.comment_depth += 1
                    out[i : i + 2] = "  "
                    i += 2
                elif raw.startswith("*/", i):
                    self.comment_depth -= 1
                    if self.comment_depth == 0:
                        self.stack.pop()
                    else:
                        out[i : i + 2] = "  "
                    i += 2
                else:
                    out[i] = " "
                    i += 1
            elif raw.startswith("\\(", i):
                out[i : i + 2] = "  "
                self.stack.append(_State.INTERPOLATION)
                self.parens.append(1)
                i += 2
            elif raw[i] == "\\":
                out[i : i + 2] = " " * len(out[i : i + 2])
                i += 2
            elif state is _State.TEXT_BLOCK and raw.startswith('"""', i):
                self.stack.pop()
                i += 3
            elif state is _State.STRING and raw[i] == '"':
                self.stack.pop()
                i += 1
            else:
                out[i] = " "
                i += 1

        # Single-line string literals cannot span a line break; drop the
        # outermost open one together with everything nested inside it.
        if _State.STRING in self.stack:
            cut = self.stack.index(_State.STRING)
            dropped = self.stack[cut:].count(_State.INTERPOLATION)
            del self.stack[cut:]
            if dropped:
                del self.parens[-dropped:]
        return "".join(out)


def tokenize_lines(text: str) -> list[Line]:
    """Split *text* into :class:`Line` records numbered from 1."""
    masker = _Masker()
    return [
        Line(number=number, text=raw, code=masker.mask(raw))
        for number, raw in enumerate(split_lines(text), start=1)
    ]

import codecs
import logging
from collections.abc import Iterable
from pathlib import Path

from stylint.core.lexer import tokenize_lines
from stylint.core.rule import Rule
from stylint.core.violation import InputError, InvalidEncodingError, ScanResult, Violation

logger = logging.getLogger("stylint")


def decode_source(data: bytes, *, source: str = "<input>") -> str:
    """Decode *data* as strict UTF-8, dropping a leading byte-order mark."""
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8) :]
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError(str(exc), source=source) from exc


def check_text(text: str, *, source: str = "<input>") -> str:
    """Reject ``str`` input that has no UTF-8 form (e.g. lone surrogates)."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidEncodingError(str(exc), source=source) from exc
    return text


def scan(text: str | bytes, rules: Iterable[Rule]) -> ScanResult:
    """Check every line of *text* against *rules*.

    Args:
        text: Source text. ``bytes`` are decoded as UTF-8 first.
        rules: Rules in registration order, typically a
               :class:`~stylint.core.registry.RuleRegistry`.

    Returns:
        A :class:`ScanResult` whose violations are ordered by line, then by
        the order of *rules*.

    Raises:
        :class:`InvalidEncodingError`: If *text* is ``bytes`` that are not
            valid UTF-8, or a ``str`` holding lone surrogates.  No partial
            result is produced.

    """
    text = decode_source(text) if isinstance(text, bytes) else check_text(text)

    ordered = tuple(rules)
    lines = tokenize_lines(text)
    violations: list[Violation] = []

    for line in lines:
        for rule in ordered:
            try:
                hit = rule.matcher(line)
                if hit is None:
                    continue
                message = rule.render(hit)
            except Exception:
                logger.exception("Rule %s raised on line %d", rule.id, line.number)
                continue
            v = Violation(
                rule_id=rule.id,
                severity=rule.severity,
                line=line.number,
                message=message,
                column=hit.column,
                hint=rule.hint,
            )
            logger.debug("[%s] %s %s %s", v.rule_id, v.severity, v.location, v.message)
            violations.append(v)

    logger.debug(
        "Scanned %d lines with %d rules: %d violations",
        len(lines),
        len(ordered),
        len(violations),
    )
    return ScanResult(violations=tuple(violations), line_count=len(lines))


def scan_file(path: Path | str, rules: Iterable[Rule]) -> ScanResult:
    """Read *path* as bytes and :func:`scan` it.

    Raises:
        :class:`InputError`: If the file cannot be read.
        :class:`InvalidEncodingError`: If its contents are not valid UTF-8.

    """
    resolved = Path(path)
    try:
        data = resolved.read_bytes()
    except OSError as exc:
        raise InputError(f"{resolved}: {exc.strerror or exc}") from exc
    return scan(decode_source(data, source=str(resolved)), rules)

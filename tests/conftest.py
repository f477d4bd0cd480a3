from stylint.core.lexer import Line, tokenize_lines
from stylint.core.violation import ScanResult, Violation


def make_line(text: str, *, number: int = 1) -> Line:
    """Build a single masked Line as the scanner would see it."""
    (line,) = tokenize_lines(text)
    if number == 1:
        return line
    return Line(number=number, text=line.text, code=line.code)


def assert_violation(result: ScanResult, rule_id: str) -> Violation:
    matching = [v for v in result.violations if v.rule_id == rule_id]
    assert matching, (
        f"Expected violation {rule_id}, got: {[v.rule_id for v in result.violations] or 'none'}"
    )
    return matching[0]


def assert_no_violations(result: ScanResult) -> None:
    assert result.violations == (), (
        f"Expected no violations, got: {[(v.rule_id, v.message) for v in result.violations]}"
    )


def positions(result: ScanResult) -> list[tuple[int, str]]:
    return [(v.line, v.rule_id) for v in result.violations]

from stylint.core._types import Category, Severity
from stylint.core.matchers import pattern
from stylint.core.rule import Rule

_CATEGORY = Category.NAMING

# A declaration keyword only counts at the start of a statement, after
# attributes and access/declaration modifiers. `actor` is contextual and
# `class` doubles as a member modifier (`class func`, `class var`).
_DECLARATION_PREFIX = (
    r"^\s*(?:@\w+(?:\([^)]*\))?\s+)*"
    r"(?:(?:public|private|fileprivate|internal|package|open|final|indirect|"
    r"nonisolated|distributed)\s+)*"
)
_NOT_MODIFIER = (
    r"(?!(?:func|var|let|subscript|init|deinit|override|final|static|"
    r"private|fileprivate|internal|public|open|convenience|required)\b)"
)

TYPE_NAME_CAPITALIZED = Rule(
    "type-name-capitalized",
    Severity.ERROR,
    "Type name '{name}' should start with an uppercase letter",
    pattern(
        _DECLARATION_PREFIX
        + r"(?P<keyword>class|struct|enum|protocol|actor|typealias)\s+"
        + _NOT_MODIFIER
        + r"(?P<at>(?P<name>[a-z]\w*))"
    ),
    hint="Use UpperCamelCase for type names",
    category=_CATEGORY,
)
NO_K_PREFIX = Rule(
    "no-k-prefix",
    Severity.WARNING,
    "Constant '{name}' uses a 'k' prefix",
    pattern(r"\b(?:let|var)\s+(?P<at>(?P<name>k[A-Z]\w*))"),
    hint="Use lowerCamelCase without Hungarian-style prefixes",
    category=_CATEGORY,
)

from importlib.metadata import version

from stylint.core._types import Category, Severity
from stylint.core.config import BUILTIN_PROFILES, ConfigError, StylintConfig, load_config
from stylint.core.lexer import Line
from stylint.core.registry import RuleRegistry
from stylint.core.rule import Hit, Rule
from stylint.core.scanner import scan, scan_file
from stylint.core.violation import (
    DuplicateRuleError,
    InputError,
    InvalidEncodingError,
    ScanResult,
    StylintError,
    Violation,
)

__version__ = version("stylint")


__all__ = [
    "BUILTIN_PROFILES",
    "Category",
    "ConfigError",
    "DuplicateRuleError",
    "Hit",
    "InputError",
    "InvalidEncodingError",
    "Line",
    "Rule",
    "RuleRegistry",
    "ScanResult",
    "Severity",
    "StylintConfig",
    "StylintError",
    "Violation",
    "__version__",
    "load_config",
    "scan",
    "scan_file",
]

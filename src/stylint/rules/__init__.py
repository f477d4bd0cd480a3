from types import ModuleType

from stylint.core.registry import RuleRegistry
from stylint.core.rule import Rule
from stylint.rules import naming, optionals, syntax, whitespace


def _collect_rules(*modules: ModuleType) -> list[Rule]:
    """Collect module-level Rule instances in definition order."""
    return [obj for module in modules for obj in vars(module).values() if isinstance(obj, Rule)]


ALL_RULES: tuple[Rule, ...] = RuleRegistry.from_rules(
    _collect_rules(whitespace, syntax, naming, optionals)
).all()


def default_registry() -> RuleRegistry:
    """Build a fresh registry holding every built-in rule."""
    return RuleRegistry.from_rules(ALL_RULES)


__all__ = ["ALL_RULES", "default_registry"]

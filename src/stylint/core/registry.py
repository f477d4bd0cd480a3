"""Ordered, duplicate-checked rule registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stylint.core.violation import DuplicateRuleError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from stylint.core.config import StylintConfig
    from stylint.core.rule import Rule


class RuleRegistry:
    """Rules keyed by ID, iterated in registration order.

    Registration order is the tie-break order for violations reported on the
    same line.  Build the registry once at startup and pass it to
    :func:`~stylint.core.scanner.scan`; scanning never modifies it.
    """

    def __init__(self) -> None:
        self._rules: dict[str, Rule] = {}

    @classmethod
    def from_rules(cls, rules: Iterable[Rule]) -> RuleRegistry:
        """Build a registry, failing on the first duplicate ID."""
        registry = cls()
        for rule in rules:
            registry.register(rule)
        return registry

    def register(self, rule: Rule) -> None:
        """Append *rule*.

        Raises:
            :class:`DuplicateRuleError`: If a rule with the same ID exists.

        """
        if rule.id in self._rules:
            raise DuplicateRuleError(rule.id)
        self._rules[rule.id] = rule

    def all(self) -> tuple[Rule, ...]:
        """Return every rule in registration order."""
        return tuple(self._rules.values())

    def get(self, rule_id: str) -> Rule | None:
        return self._rules.get(rule_id)

    def select(self, config: StylintConfig) -> RuleRegistry:
        """Return a new registry holding only the rules *config* allows."""
        return RuleRegistry.from_rules(r for r in self._rules.values() if config.allows(r))

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleRegistry({list(self._rules)!r})"

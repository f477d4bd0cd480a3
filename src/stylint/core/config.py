"""Rule selection for a lint run.

Settings live in ``.stylint.toml`` or the ``[tool.stylint]`` table of
``pyproject.toml``::

    [tool.stylint]
    profile = "recommended"
    exclude_rules = ["no-force-*"]
    categories = ["whitespace", "naming"]

Every value is checked against the built-in rule table, so a misspelt rule ID
or category is a :class:`ConfigError` rather than a silently empty rule set.
"""

from __future__ import annotations

import dataclasses
import fnmatch
import functools
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from stylint.core._types import SEVERITY_LEVEL, Category, Severity
from stylint.core.violation import StylintError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stylint.core.rule import Rule

_CONFIG_FILE = ".stylint.toml"
_KNOWN_KEYS = frozenset({"profile", "min_severity", "include_rules", "exclude_rules", "categories"})


class ConfigError(StylintError, ValueError):
    """Raised when a config file contains an invalid value."""


def _is_glob(pattern: str) -> bool:
    return any(c in pattern for c in "*?[")


@dataclass(frozen=True, slots=True)
class _IdFilter:
    """Rule-ID patterns split into exact IDs and compiled globs."""

    exact: frozenset[str] = frozenset()
    globs: tuple[re.Pattern[str], ...] = ()

    @classmethod
    def build(cls, patterns: Iterable[str]) -> _IdFilter:
        patterns = sorted(patterns)
        return cls(
            exact=frozenset(p for p in patterns if not _is_glob(p)),
            globs=tuple(re.compile(fnmatch.translate(p)) for p in patterns if _is_glob(p)),
        )

    def matches(self, rule_id: str) -> bool:
        return rule_id in self.exact or any(g.match(rule_id) for g in self.globs)


@dataclass(frozen=True)
class StylintConfig:
    """Which rules run.

    Filters apply in field order: ``min_severity``, then ``categories``, then
    ``include_rules``, then ``exclude_rules``.  Empty sets do not filter.
    Rule patterns are exact IDs (``"no-semicolons"``) or globs (``"no-*"``).
    """

    min_severity: Severity = Severity.WARNING
    include_rules: frozenset[str] = field(default_factory=frozenset)
    exclude_rules: frozenset[str] = field(default_factory=frozenset)
    categories: frozenset[str] = field(default_factory=frozenset)

    _include: _IdFilter = field(
        default_factory=_IdFilter, init=False, compare=False, hash=False, repr=False
    )
    _exclude: _IdFilter = field(
        default_factory=_IdFilter, init=False, compare=False, hash=False, repr=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "_include", _IdFilter.build(self.include_rules))
        object.__setattr__(self, "_exclude", _IdFilter.build(self.exclude_rules))

    @functools.cache  # noqa: B019
    def allows(self, rule: Rule) -> bool:
        """Return ``True`` if *rule* passes every active filter."""
        if SEVERITY_LEVEL[rule.severity] < SEVERITY_LEVEL[self.min_severity]:
            return False
        if self.categories and rule.category not in self.categories:
            return False
        if self.include_rules and not self._include.matches(rule.id):
            return False
        return not self._exclude.matches(rule.id)


BUILTIN_PROFILES: dict[str, StylintConfig] = {
    "strict": StylintConfig(),
    "recommended": StylintConfig(exclude_rules=frozenset({"trailing-whitespace"})),
    "minimal": StylintConfig(min_severity=Severity.ERROR),
}


def check_rule_patterns(patterns: Iterable[str], *, key: str) -> frozenset[str]:
    """Return *patterns* as a set, rejecting exact IDs that name no built-in rule.

    Globs are accepted as written; they may legitimately match nothing.
    """
    from stylint.rules import ALL_RULES

    known = {r.id for r in ALL_RULES}
    result = frozenset(patterns)
    unknown = sorted(p for p in result if not _is_glob(p) and p not in known)
    if unknown:
        names = ", ".join(repr(p) for p in unknown)
        raise ConfigError(f"Unknown rule ID in {key}: {names}")
    return result


def load_config(path: Path | str | None = None) -> StylintConfig:
    """Load :class:`StylintConfig` from a TOML file.

    With no *path*, the nearest ``.stylint.toml`` or ``pyproject.toml`` at or
    above the current directory is used; the first ``pyproject.toml`` ends the
    search even without a ``[tool.stylint]`` table.  An explicit *path* that
    does not exist yields the defaults.

    Raises:
        :class:`ConfigError`: On unreadable or malformed TOML, unknown keys,
            or values outside the rule table.

    """
    if path is not None:
        resolved = Path(path)
        data = _read_file(resolved) if resolved.exists() else {}
    else:
        data = _find_config()

    return _parse_config(data)


def _find_config() -> dict[str, Any]:
    for directory in (Path.cwd(), *Path.cwd().parents):
        for name in (_CONFIG_FILE, "pyproject.toml"):
            candidate = directory / name
            if candidate.exists():
                return _read_file(candidate)
    return {}


def _read_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            raw: dict[str, Any] = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    if path.name == "pyproject.toml":
        section: dict[str, Any] = raw.get("tool", {}).get("stylint", {})
        return section
    return raw


def _string_set(value: object, key: str) -> frozenset[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{key} must be a list of strings, got {value!r}")
    return frozenset(value)


def _parse_config(data: dict[str, Any]) -> StylintConfig:
    """Build a :class:`StylintConfig` from a TOML table.

    A ``profile`` key picks the :data:`BUILTIN_PROFILES` entry to start from;
    the other keys replace its fields.
    """
    unknown_keys = sorted(set(data) - _KNOWN_KEYS)
    if unknown_keys:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown_keys)}")

    base = StylintConfig()
    if (profile_name := data.get("profile")) is not None:
        if (profile := BUILTIN_PROFILES.get(str(profile_name))) is None:
            known = ", ".join(f'"{p}"' for p in BUILTIN_PROFILES)
            raise ConfigError(f"Unknown profile {profile_name!r}. Known profiles: {known}")
        base = profile

    changes: dict[str, Any] = {}
    if (v := data.get("min_severity")) is not None:
        try:
            changes["min_severity"] = Severity(v)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

    for key in ("include_rules", "exclude_rules"):
        if key in data:
            changes[key] = check_rule_patterns(_string_set(data[key], key), key=key)

    if "categories" in data:
        categories = _string_set(data["categories"], "categories")
        unknown = sorted(categories - {c.value for c in Category})
        if unknown:
            known = ", ".join(c.value for c in Category)
            raise ConfigError(f"Unknown category {unknown[0]!r}. Known categories: {known}")
        changes["categories"] = categories

    return dataclasses.replace(base, **changes)

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

from stylint import BUILTIN_PROFILES
from stylint.core._types import Severity
from stylint.core.config import ConfigError, StylintConfig, _parse_config, load_config
from stylint.core.matchers import pattern
from stylint.core.rule import Rule

# Helpers

_WARN_RULE = Rule("trailing-whitespace", Severity.WARNING, "w", pattern(r"x"), category="whitespace")
_ERR_RULE = Rule("no-semicolons", Severity.ERROR, "e", pattern(r";"), category="syntax")
_NAME_RULE = Rule("no-k-prefix", Severity.WARNING, "n", pattern(r"k"), category="naming")


# StylintConfig defaults


def test_config_defaults() -> None:
    cfg = StylintConfig()
    assert cfg.min_severity == Severity.WARNING
    assert cfg.include_rules == frozenset()
    assert cfg.exclude_rules == frozenset()
    assert cfg.categories == frozenset()


# StylintConfig.allows(): severity filtering


def test_allows_default_passes_everything() -> None:
    cfg = StylintConfig()
    assert cfg.allows(_WARN_RULE) is True
    assert cfg.allows(_ERR_RULE) is True


def test_allows_blocks_rule_below_min_severity() -> None:
    cfg = StylintConfig(min_severity=Severity.ERROR)
    assert cfg.allows(_WARN_RULE) is False
    assert cfg.allows(_ERR_RULE) is True


# StylintConfig.allows(): categories


def test_allows_category_match() -> None:
    cfg = StylintConfig(categories=frozenset({"whitespace", "naming"}))
    assert cfg.allows(_WARN_RULE) is True
    assert cfg.allows(_NAME_RULE) is True
    assert cfg.allows(_ERR_RULE) is False


# StylintConfig.allows(): include / exclude


def test_allows_include_rules_allows_only_listed() -> None:
    cfg = StylintConfig(include_rules=frozenset({"no-semicolons"}))
    assert cfg.allows(_ERR_RULE) is True
    assert cfg.allows(_WARN_RULE) is False


def test_allows_include_rules_glob() -> None:
    cfg = StylintConfig(include_rules=frozenset({"no-*"}))
    assert cfg.allows(_ERR_RULE) is True
    assert cfg.allows(_NAME_RULE) is True
    assert cfg.allows(_WARN_RULE) is False


def test_allows_exclude_rules_glob() -> None:
    cfg = StylintConfig(exclude_rules=frozenset({"no-*"}))
    assert cfg.allows(_ERR_RULE) is False
    assert cfg.allows(_NAME_RULE) is False
    assert cfg.allows(_WARN_RULE) is True


def test_allows_exclude_takes_precedence_over_include() -> None:
    cfg = StylintConfig(
        include_rules=frozenset({"no-semicolons"}),
        exclude_rules=frozenset({"no-semicolons"}),
    )
    assert cfg.allows(_ERR_RULE) is False


def test_config_is_frozen() -> None:
    import dataclasses

    cfg = StylintConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.min_severity = Severity.ERROR  # type: ignore[misc]


# BUILTIN_PROFILES


def test_profile_strict_allows_all() -> None:
    cfg = BUILTIN_PROFILES["strict"]
    assert cfg.allows(_WARN_RULE) is True
    assert cfg.allows(_ERR_RULE) is True


def test_profile_recommended_skips_trailing_whitespace() -> None:
    cfg = BUILTIN_PROFILES["recommended"]
    assert cfg.allows(_WARN_RULE) is False
    assert cfg.allows(_NAME_RULE) is True


def test_profile_minimal_allows_only_errors() -> None:
    cfg = BUILTIN_PROFILES["minimal"]
    assert cfg.allows(_NAME_RULE) is False
    assert cfg.allows(_ERR_RULE) is True


# _parse_config


def test_parse_config_empty() -> None:
    assert _parse_config({}) == StylintConfig()


def test_parse_config_profile_then_override() -> None:
    cfg = _parse_config({"profile": "minimal", "min_severity": "warning"})
    assert cfg.min_severity == Severity.WARNING


def test_parse_config_lists() -> None:
    cfg = _parse_config(
        {
            "include_rules": ["no-semicolons"],
            "exclude_rules": ["no-force-*"],
            "categories": ["syntax"],
        }
    )
    assert cfg.include_rules == frozenset({"no-semicolons"})
    assert cfg.exclude_rules == frozenset({"no-force-*"})
    assert cfg.categories == frozenset({"syntax"})


def test_parse_config_non_list_raises_config_error() -> None:
    with pytest.raises(ConfigError, match="exclude_rules must be a list"):
        _parse_config({"exclude_rules": "no-semicolons"})
    with pytest.raises(ConfigError, match="categories must be a list"):
        _parse_config({"categories": ["syntax", 3]})


def test_parse_config_unknown_category_raises_config_error() -> None:
    with pytest.raises(ConfigError, match="'whitespce'"):
        _parse_config({"categories": ["whitespce"]})


@pytest.mark.parametrize("key", ["include_rules", "exclude_rules"])
def test_parse_config_unknown_rule_id_raises_config_error(key: str) -> None:
    with pytest.raises(ConfigError, match=f"{key}: 'no-semicolon'"):
        _parse_config({key: ["no-semicolon"]})


def test_parse_config_glob_matching_nothing_is_accepted() -> None:
    cfg = _parse_config({"exclude_rules": ["legacy-*"]})
    assert cfg.exclude_rules == frozenset({"legacy-*"})


def test_parse_config_unknown_key_raises_config_error() -> None:
    with pytest.raises(ConfigError, match="exclude_rule"):
        _parse_config({"exclude_rule": ["no-semicolons"]})


def test_parse_config_invalid_profile_raises_config_error() -> None:
    with pytest.raises(ConfigError, match="'typo'"):
        _parse_config({"profile": "typo"})


def test_parse_config_invalid_min_severity_raises_config_error() -> None:
    with pytest.raises(ConfigError, match="'extreme'"):
        _parse_config({"min_severity": "extreme"})


# load_config: explicit path


def test_load_config_explicit_stylint_toml(tmp_path: Path) -> None:
    toml = tmp_path / ".stylint.toml"
    toml.write_bytes(b'profile = "minimal"\nexclude_rules = ["no-semicolons"]\n')
    cfg = load_config(toml)
    assert cfg.min_severity == Severity.ERROR
    assert "no-semicolons" in cfg.exclude_rules


def test_load_config_explicit_pyproject_toml(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_bytes(b'[tool.stylint]\ncategories = ["naming"]\n')
    cfg = load_config(pyproject)
    assert cfg.categories == frozenset({"naming"})


def test_load_config_nonexistent_path_returns_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "nonexistent.toml") == StylintConfig()


def test_load_config_malformed_toml_raises_config_error(tmp_path: Path) -> None:
    toml = tmp_path / ".stylint.toml"
    toml.write_bytes(b"this is not valid toml ][[\n")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(toml)


# load_config: auto-detection


def test_load_config_auto_detects_stylint_toml(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".stylint.toml").write_bytes(b'profile = "minimal"\n')
    assert load_config().min_severity == Severity.ERROR


def test_load_config_walks_up_from_subdirectory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "pyproject.toml").write_bytes(b'[tool.stylint]\nmin_severity = "error"\n')
    nested = tmp_path / "Sources" / "App"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    assert load_config().min_severity == Severity.ERROR


def test_load_config_stylint_toml_takes_priority(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".stylint.toml").write_bytes(b'profile = "minimal"\n')
    (tmp_path / "pyproject.toml").write_bytes(b'[tool.stylint]\nprofile = "strict"\n')
    assert load_config().min_severity == Severity.ERROR


def test_load_config_pyproject_without_section_stops_search(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / ".stylint.toml").write_bytes(b'profile = "minimal"\n')
    project = tmp_path / "project"
    project.mkdir()
    (project / "pyproject.toml").write_bytes(b'[project]\nname = "x"\n')
    monkeypatch.chdir(project)
    assert load_config() == StylintConfig()

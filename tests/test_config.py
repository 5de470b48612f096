from __future__ import annotations

from pathlib import Path

import pytest

from bytegrep.core.config import (
    ConfigError,
    SearchConfig,
    get_config_path,
    load_config,
    parse_config,
)


def test_defaults() -> None:
    cfg = SearchConfig()
    assert (cfg.width, cfg.context, cfg.endian) == (16, 0, "big")


def test_endian_normalized() -> None:
    assert SearchConfig(endian="LITTLE").endian == "little"  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0},
        {"width": -4},
        {"width": "16"},
        {"context": -1},
        {"endian": "pdp"},
        {"width": True},
    ],
)
def test_invalid_values(kwargs: dict) -> None:
    with pytest.raises(ConfigError):
        SearchConfig(**kwargs)


def test_with_overrides_only_applies_given_values() -> None:
    base = SearchConfig(width=8, context=2, endian="little")
    assert base.with_overrides() is base
    cfg = base.with_overrides(context=0, endian=None)
    assert (cfg.width, cfg.context, cfg.endian) == (8, 0, "little")
    with pytest.raises(ConfigError):
        base.with_overrides(width=0)


def test_parse_config_yaml() -> None:
    cfg = parse_config("width: 32\ncontext: 1\nendian: little\n")
    assert cfg == SearchConfig(width=32, context=1, endian="little")


def test_parse_config_empty_is_default() -> None:
    assert parse_config("") == SearchConfig()


@pytest.mark.parametrize(
    "text",
    ["- 1\n- 2\n", "width: [\n", "colour: red\n", "width: zero\n", "1: 2\nfoo: 3\n"],
)
def test_parse_config_errors(text: str) -> None:
    with pytest.raises(ConfigError):
        parse_config(text)


def test_load_config_missing_default_file_uses_defaults(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("BYTEGREP_CONFIG", str(tmp_path / "nope.yaml"))
    assert load_config() == SearchConfig()


def test_load_config_missing_explicit_path(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="nope.yaml"):
        load_config(tmp_path / "nope.yaml")


def test_load_config_not_utf8(tmp_path: Path) -> None:
    p = tmp_path / "config.yaml"
    p.write_bytes(b"width: \xff\xfe\n")
    with pytest.raises(ConfigError, match="config.yaml"):
        load_config(p)


def test_load_config_from_file(tmp_path: Path) -> None:
    p = tmp_path / "config.yaml"
    p.write_text("context: 3\n", encoding="utf-8")
    assert load_config(p).context == 3


def test_load_config_error_names_file(tmp_path: Path) -> None:
    p = tmp_path / "config.yaml"
    p.write_text("width: -1\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="config.yaml"):
        load_config(p)


def test_config_path_env_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "custom.yaml"
    monkeypatch.setenv("BYTEGREP_CONFIG", str(target))
    assert get_config_path() == target
    target.write_text("width: 8\n", encoding="utf-8")
    assert load_config().width == 8


def test_config_path_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BYTEGREP_CONFIG", raising=False)
    path = get_config_path()
    assert path.name == "config.yaml"
    assert path.parent.name == "bytegrep"

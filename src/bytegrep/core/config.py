"""Search settings and the optional YAML config file."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

import yaml

from bytegrep.core.endian import DEFAULT_ENDIAN, Endian, normalize_endian

DEFAULT_WIDTH = 16
DEFAULT_CONTEXT = 0
CONFIG_ENV = "BYTEGREP_CONFIG"
CONFIG_KEYS = ("width", "context", "endian")


class ConfigError(ValueError):
    """Raised when a config file or setting is malformed."""


@dataclass(frozen=True)
class SearchConfig:
    width: int = DEFAULT_WIDTH  # bytes per row
    context: int = DEFAULT_CONTEXT  # rows shown before and after each match
    endian: Endian = DEFAULT_ENDIAN  # byte order for 0x... patterns

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width < 1:
            raise ConfigError(f"width must be a positive integer, got {self.width!r}")
        if isinstance(self.context, bool) or not isinstance(self.context, int) or self.context < 0:
            raise ConfigError(f"context must be a non-negative integer, got {self.context!r}")
        try:
            endian = normalize_endian(self.endian)
        except ValueError as e:
            raise ConfigError(str(e)) from None
        object.__setattr__(self, "endian", endian)

    def with_overrides(
        self,
        *,
        width: int | None = None,
        context: int | None = None,
        endian: str | None = None,
    ) -> SearchConfig:
        """Return a copy with every non-None override applied."""
        changes: dict[str, object] = {}
        if width is not None:
            changes["width"] = width
        if context is not None:
            changes["context"] = context
        if endian is not None:
            changes["endian"] = endian
        return replace(self, **changes) if changes else self


def get_config_path() -> Path:
    """Get platform-appropriate config file path, honoring BYTEGREP_CONFIG."""
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    if os.name == "nt":  # Windows
        base = os.environ.get("APPDATA", os.path.expanduser("~"))
        return Path(base) / "bytegrep" / "config.yaml"
    else:  # macOS, Linux
        return Path.home() / ".config" / "bytegrep" / "config.yaml"


def parse_config(text: str, *, source: str = "<config>") -> SearchConfig:
    """Parse YAML config text into a SearchConfig."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"{source}: invalid YAML: {e}") from None
    if data is None:
        return SearchConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: expected a mapping at top level")

    unknown = sorted(str(k) for k in set(data) - set(CONFIG_KEYS))
    if unknown:
        raise ConfigError(f"{source}: unknown key(s): {', '.join(unknown)}")

    try:
        return SearchConfig(**data)
    except ConfigError as e:
        raise ConfigError(f"{source}: {e}") from None


def load_config(path: Path | str | None = None) -> SearchConfig:
    """Load settings from `path` (or the default location).

    The default location may be missing, which yields the defaults. An
    explicit `path` must exist. An unreadable or malformed file raises
    ConfigError.
    """
    if path is not None:
        p = Path(path)
        if not p.exists():
            raise ConfigError(f"{p}: config file not found")
    else:
        p = get_config_path()
        if not p.exists():
            return SearchConfig()
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"{p}: {e}") from None
    return parse_config(text, source=str(p))

"""Configuration loader for phrasemark.toml."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

from .core.model import EmphasisKind
from .theme import DEFAULT_CLASS_PREFIX, DEFAULT_CODE_FONT_FAMILY


class ConfigError(ValueError):
    """Raised when phrasemark.toml holds an invalid value."""


@dataclass
class EmphasisConfig:
    """Which emphasis kinds are decorated."""
    kinds: tuple[EmphasisKind, ...] = tuple(EmphasisKind)


@dataclass
class ThemeConfig:
    """Style class configuration."""
    class_prefix: str = DEFAULT_CLASS_PREFIX
    code_font_family: str = DEFAULT_CODE_FONT_FAMILY


@dataclass
class PhrasemarkConfig:
    """Complete phrasemark configuration."""
    emphasis: EmphasisConfig = field(default_factory=EmphasisConfig)
    theme: ThemeConfig = field(default_factory=ThemeConfig)
    source: Path | None = None


def _expect_str(section: str, key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"[{section}] {key} must be a string, got {type(value).__name__}")
    return value


def _expect_table(section: str, value: Any) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(f"[{section}] must be a table")
    return value


def load_config(config_path: Path | None = None) -> PhrasemarkConfig:
    """
    Load configuration from phrasemark.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/phrasemark.toml

    Args:
        config_path: Explicit path to config file

    Returns:
        PhrasemarkConfig with resolved settings

    Raises:
        ConfigError: If a value has the wrong type or names an unknown kind
    """
    toml_data: dict[str, Any] = {}
    source = None

    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / "phrasemark.toml")

    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            source = path
            break

    # Parse emphasis config
    emphasis_data = _expect_table("emphasis", toml_data.get("emphasis", {}))
    emphasis_config = EmphasisConfig()
    if "kinds" in emphasis_data:
        names = emphasis_data["kinds"]
        if not isinstance(names, list):
            raise ConfigError("[emphasis] kinds must be a list of kind names")
        try:
            kinds = tuple(EmphasisKind.from_name(_expect_str("emphasis", "kinds", n)) for n in names)
        except ValueError as e:
            raise ConfigError(str(e)) from e
        emphasis_config = EmphasisConfig(kinds=kinds)

    # Parse theme config
    theme_data = _expect_table("theme", toml_data.get("theme", {}))
    theme_config = ThemeConfig(
        class_prefix=_expect_str(
            "theme", "class_prefix", theme_data.get("class_prefix", DEFAULT_CLASS_PREFIX)
        ),
        code_font_family=_expect_str(
            "theme", "code_font_family", theme_data.get("code_font_family", DEFAULT_CODE_FONT_FAMILY)
        ),
    )

    return PhrasemarkConfig(
        emphasis=emphasis_config,
        theme=theme_config,
        source=source,
    )

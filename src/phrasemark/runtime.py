"""Extension wiring: plugin factory plus theme, built from configuration."""

from dataclasses import dataclass
from pathlib import Path

from .config import PhrasemarkConfig, load_config
from .core.model import RuleTable
from .core.ports import HostView
from .core.scanner import build_rule_table
from .plugin import PhraseEmphasisPlugin
from .theme import Theme, base_theme


@dataclass(frozen=True)
class PhraseEmphasisExtension:
    """Container for the wired components a host installs."""
    rules: RuleTable
    theme: Theme
    config: PhrasemarkConfig

    def create_plugin(self, view: HostView) -> PhraseEmphasisPlugin:
        return PhraseEmphasisPlugin(view, rules=self.rules, theme=self.theme)


def phrase_emphasis(
    config: PhrasemarkConfig | None = None,
    config_path: Path | None = None,
) -> PhraseEmphasisExtension:
    """Build the extension; loads phrasemark.toml unless a config is given."""
    if config is None:
        config = load_config(config_path=config_path)

    rules = build_rule_table(config.emphasis.kinds)
    theme = base_theme(
        class_prefix=config.theme.class_prefix,
        code_font_family=config.theme.code_font_family,
    )

    return PhraseEmphasisExtension(rules=rules, theme=theme, config=config)

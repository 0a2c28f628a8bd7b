"""Base theme: style classes registered once for the emphasis widgets."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .core.model import EmphasisKind

DEFAULT_CLASS_PREFIX = "pm-"
DEFAULT_CODE_FONT_FAMILY = "ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, monospace"


@dataclass(frozen=True)
class Theme:
    """Immutable style-class table."""
    class_prefix: str
    styles: Mapping[str, Mapping[str, str]]

    def class_for(self, kind: EmphasisKind) -> str:
        return f"{self.class_prefix}{kind.value}"

    def style_for(self, kind: EmphasisKind) -> Mapping[str, str]:
        return self.styles[self.class_for(kind)]

    def to_css(self) -> str:
        """Render the table as a stylesheet, one rule per class."""
        rules = []
        for class_name, attrs in self.styles.items():
            body = "; ".join(f"{k}: {v}" for k, v in attrs.items())
            rules.append(f".{class_name} {{ {body} }}")
        return "\n".join(rules) + "\n"


def base_theme(
    class_prefix: str = DEFAULT_CLASS_PREFIX,
    code_font_family: str = DEFAULT_CODE_FONT_FAMILY,
) -> Theme:
    """
    Build the style table for bold, italic and inline code.

    Args:
        class_prefix: Prefix prepended to every class name
        code_font_family: Font family token used for inline code

    Returns:
        Theme with read-only style mappings
    """
    raw = {
        EmphasisKind.BOLD: {"font-weight": "bold"},
        EmphasisKind.ITALIC: {"font-style": "italic"},
        EmphasisKind.INLINE_CODE: {"font-family": code_font_family},
    }
    styles = {
        f"{class_prefix}{kind.value}": MappingProxyType(attrs)
        for kind, attrs in raw.items()
    }
    return Theme(class_prefix=class_prefix, styles=MappingProxyType(styles))


DEFAULT_THEME = base_theme()

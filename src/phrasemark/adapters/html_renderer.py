import html
from typing import Iterable

from ..core.model import Decoration
from ..core.ports import Renderer
from ..theme import DEFAULT_THEME, Theme


class HtmlRenderer(Renderer):
    """Renders document text with its decorations replaced by styled spans."""

    def __init__(self, theme: Theme = DEFAULT_THEME):
        self.theme = theme

    def render_html(self, text: str, decorations: Iterable[Decoration]) -> str:
        parts: list[str] = []
        pos = 0
        for deco in decorations:
            # Decorations are expected sorted; skip anything overlapping output already emitted
            if deco.start < pos:
                continue
            parts.append(html.escape(text[pos:deco.start]))
            node = deco.widget.render_to_visual_tree(self.theme)
            parts.append(
                f'<{node.tag} class="{html.escape(node.class_name)}">'
                f"{html.escape(node.text)}</{node.tag}>"
            )
            pos = deco.end
        parts.append(html.escape(text[pos:]))
        return "".join(parts)

    def render_page(self, text: str, decorations: Iterable[Decoration]) -> str:
        body = self.render_html(text, decorations)
        return (
            "<!DOCTYPE html>\n<html>\n<head>\n<meta charset=\"utf-8\">\n"
            f"<style>\n{self.theme.to_css()}</style>\n</head>\n"
            f"<body>\n<pre>{body}</pre>\n</body>\n</html>\n"
        )

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .model import EmphasisKind

if TYPE_CHECKING:
    from ..theme import Theme


@dataclass(frozen=True)
class VisualNode:
    tag: str
    text: str
    class_name: str


@dataclass(frozen=True)
class EmphasisWidget:
    """
    Replacement shown in place of a marked span: the inner text, styled by
    kind, with the delimiters hidden. The document text is left untouched.
    """

    kind: EmphasisKind
    raw_text: str
    inner_text: str

    def eq(self, other: object) -> bool:
        # Host skips re-rendering when this holds
        if not isinstance(other, EmphasisWidget):
            return False
        return self.kind is other.kind and self.raw_text == other.raw_text

    def render_to_visual_tree(self, theme: "Theme") -> VisualNode:
        return VisualNode(
            tag="span",
            text=self.inner_text,
            class_name=theme.class_for(self.kind),
        )

    def ignore_event(self) -> bool:
        return False

from __future__ import annotations
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterator, Sequence

Offset = int


class EmphasisKind(Enum):
    BOLD = "bold"
    ITALIC = "italic"
    INLINE_CODE = "inline-code"

    @classmethod
    def from_name(cls, name: str) -> "EmphasisKind":
        """Look up a kind by its style name ("bold", "inline-code", ...)."""
        normalized = name.strip().lower().replace("_", "-")
        for kind in cls:
            if kind.value == normalized:
                return kind
        raise ValueError(f"Unknown emphasis kind: {name!r}")


@dataclass(frozen=True)
class TextRange:
    start: Offset
    end: Offset

    @property
    def empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True)
class Rule:
    kind: EmphasisKind
    pattern: re.Pattern[str]

    def extract(self, m: re.Match[str]) -> tuple[str, str]:
        # (raw text including delimiters, visible inner text)
        return m.group(0), m.group(1)


RuleTable = dict[EmphasisKind, tuple[Rule, ...]]


@dataclass(frozen=True)
class Candidate:
    kind: EmphasisKind
    start: Offset  # absolute document offsets
    end: Offset
    raw_text: str
    inner_text: str


@dataclass(frozen=True)
class Decoration:
    start: Offset
    end: Offset
    widget: "EmphasisWidget"


@dataclass(frozen=True)
class DecorationSet:
    """Ordered, non-overlapping decorations sorted by start offset."""

    items: tuple[Decoration, ...] = ()

    @classmethod
    def none(cls) -> "DecorationSet":
        return _EMPTY

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Decoration]:
        return iter(self.items)

    def __getitem__(self, i: int) -> Decoration:
        return self.items[i]

    def ranges(self) -> list[tuple[Offset, Offset]]:
        return [(d.start, d.end) for d in self.items]


_EMPTY = DecorationSet()


CursorQuery = Callable[[Offset, Offset], bool]


@dataclass
class ViewUpdate:
    """Notification delivered by the host after a transaction."""

    doc_changed: bool = False
    viewport_changed: bool = False
    selection: Sequence[TextRange] = field(default_factory=tuple)

    def is_cursor_inside(self, start: Offset, end: Offset) -> bool:
        # collapsed cursor: start <= head < end; selection: any intersection
        for sel in self.selection:
            if sel.empty:
                if start <= sel.start < end:
                    return True
            elif sel.start < end and sel.end > start:
                return True
        return False


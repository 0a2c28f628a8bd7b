from typing import Iterator, Sequence

from ..core.model import Offset, TextRange, ViewUpdate
from ..core.ports import HostView, ViewPlugin


def map_pos(pos: Offset, changes: Sequence[tuple[Offset, Offset, str]]) -> Offset:
    """Map a pre-change offset through non-overlapping (start, end, insert) edits.

    Offsets at or after an edit's end shift by the edit's length delta;
    offsets inside a replaced range collapse to its start.
    """
    shift = 0
    for start, end, insert in sorted(changes, key=lambda c: c[0]):
        if pos >= end:
            shift += len(insert) - (end - start)
        elif pos > start:
            return start + shift
        else:
            break
    return pos + shift


class TextDocument:
    """Immutable in-memory document text."""

    def __init__(self, text: str):
        self.text = text

    @property
    def length(self) -> int:
        return len(self.text)

    def _check(self, start: Offset, end: Offset) -> None:
        if not 0 <= start <= end <= len(self.text):
            raise ValueError(f"Range [{start}, {end}) outside document of length {len(self.text)}")

    def iter_range(self, start: Offset, end: Offset) -> Iterator[tuple[str, bool]]:
        """Yield (chunk, is_line_break); each "\\n" is its own chunk."""
        self._check(start, end)
        pos = start
        while pos < end:
            nl = self.text.find("\n", pos, end)
            if nl == -1:
                yield self.text[pos:end], False
                return
            if nl > pos:
                yield self.text[pos:nl], False
            yield "\n", True
            pos = nl + 1

    def replace(self, start: Offset, end: Offset, insert: str) -> "TextDocument":
        self._check(start, end)
        return TextDocument(self.text[:start] + insert + self.text[end:])


class EditorView(HostView):
    """
    Minimal host: a document, its visible ranges and a selection. Plugins
    attached here are notified on every dispatch, like a real editor view.
    Visible ranges default to the whole document.
    """

    def __init__(
        self,
        doc: TextDocument | str,
        visible_ranges: Sequence[TextRange] | None = None,
        selection: Sequence[TextRange] | None = None,
    ):
        self.doc = doc if isinstance(doc, TextDocument) else TextDocument(doc)
        self._visible = tuple(visible_ranges) if visible_ranges is not None else None
        self.selection: tuple[TextRange, ...] = tuple(selection or (TextRange(0, 0),))
        self.plugins: list[ViewPlugin] = []

    @property
    def visible_ranges(self) -> Sequence[TextRange]:
        if self._visible is None:
            return (TextRange(0, self.doc.length),)
        return self._visible

    def iter_text_range(self, start: Offset, end: Offset) -> Iterator[tuple[str, bool]]:
        return self.doc.iter_range(start, end)

    def attach(self, extension) -> ViewPlugin:
        plugin = extension.create_plugin(self)
        self.plugins.append(plugin)
        return plugin

    def dispatch(
        self,
        changes: Sequence[tuple[Offset, Offset, str]] | None = None,
        selection: Sequence[TextRange] | None = None,
        visible_ranges: Sequence[TextRange] | None = None,
    ) -> ViewUpdate:
        """Apply a transaction and notify attached plugins.

        Args:
            changes: (start, end, insert) edits in pre-change coordinates,
                non-overlapping
            selection: New selection ranges
            visible_ranges: New visible ranges

        Returns:
            The update delivered to plugins
        """
        doc_changed = False
        if changes:
            doc = self.doc
            for start, end, insert in sorted(changes, key=lambda c: c[0], reverse=True):
                doc = doc.replace(start, end, insert)
            doc_changed = doc.text != self.doc.text
            self.doc = doc

        viewport_changed = False
        if visible_ranges is not None:
            new_visible = tuple(visible_ranges)
            viewport_changed = new_visible != tuple(self.visible_ranges)
            self._visible = new_visible
        elif doc_changed and self._visible is not None:
            self._visible = self._map_ranges(self._visible, changes)

        if selection is not None:
            self.selection = tuple(selection)
        elif doc_changed:
            self.selection = self._map_ranges(self.selection, changes)

        update = ViewUpdate(
            doc_changed=doc_changed,
            viewport_changed=viewport_changed,
            selection=self.selection,
        )
        for plugin in self.plugins:
            plugin.update(update)
        return update

    @staticmethod
    def _map_ranges(ranges, changes) -> tuple[TextRange, ...]:
        return tuple(
            TextRange(map_pos(r.start, changes), map_pos(r.end, changes)) for r in ranges
        )

    def destroy(self) -> None:
        for plugin in self.plugins:
            plugin.destroy()
        self.plugins.clear()

from typing import Iterable, Iterator, Protocol, Sequence

from .model import Offset, TextRange


class HostView(Protocol):
    """
    Read-only view of the host editor. Text is pulled in chunks; a chunk is
    either a run of text within one line or a single line break.
    """

    @property
    def visible_ranges(self) -> Sequence[TextRange]:
        pass

    def iter_text_range(self, start: Offset, end: Offset) -> Iterator[tuple[str, bool]]:
        """Yield (chunk_text, is_line_break) covering [start, end)."""
        pass


class ViewPlugin(Protocol):
    """
    Anything the host notifies after a transaction.
    """

    def update(self, update) -> bool:
        pass

    def destroy(self) -> None:
        pass


class Renderer(Protocol):
    def render_html(self, text: str, decorations: Iterable) -> str:
        pass

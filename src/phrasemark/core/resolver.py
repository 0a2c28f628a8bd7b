from collections.abc import Iterable

from .model import Candidate, CursorQuery, Decoration, DecorationSet, Offset
from .widget import EmphasisWidget


def cursor_query(positions: Iterable[Offset]) -> CursorQuery:
    """Cursor check for plain caret positions: start <= p < end."""
    pos = tuple(positions)

    def inside(start: Offset, end: Offset) -> bool:
        return any(start <= p < end for p in pos)

    return inside


def filter_candidates(
    candidates: Iterable[Candidate],
    is_cursor_inside: CursorQuery | None = None,
) -> list[Candidate]:
    """
    Sort by start and drop nested or cursor-covered candidates.

    Nesting is checked against the last kept span only, so a span nested
    two levels under a non-adjacent ancestor survives. The last-kept span
    is updated before the cursor check, so a span hidden by the cursor
    still suppresses what it contains.
    """
    ordered = sorted(candidates, key=lambda c: c.start)

    kept: list[Candidate] = []
    prev_start: Offset | None = None
    prev_end: Offset | None = None
    for c in ordered:
        if prev_start is not None and c.start > prev_start and c.end < prev_end:
            continue
        prev_start, prev_end = c.start, c.end

        if is_cursor_inside is not None and is_cursor_inside(c.start, c.end):
            continue
        kept.append(c)
    return kept


def resolve(
    candidates: Iterable[Candidate],
    is_cursor_inside: CursorQuery | None = None,
) -> DecorationSet:
    kept = filter_candidates(candidates, is_cursor_inside)
    return DecorationSet(
        tuple(
            Decoration(c.start, c.end, EmphasisWidget(c.kind, c.raw_text, c.inner_text))
            for c in kept
        )
    )

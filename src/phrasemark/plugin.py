"""View plugin that keeps the emphasis decoration set in sync with the host."""

import logging
from enum import Enum

from .core.model import DecorationSet, RuleTable, ViewUpdate
from .core.ports import HostView
from .core.resolver import resolve
from .core.scanner import DEFAULT_RULES, scan_ranges
from .theme import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)


class PluginState(Enum):
    IDLE = "idle"
    RECOMPUTING = "recomputing"
    DESTROYED = "destroyed"


class PhraseEmphasisPlugin:
    """Recomputes decorations for all visible ranges on every qualifying update.

    There is no debouncing: each document or viewport change rescans every
    visible range. The previous set stays published until the new one is
    complete.
    """

    def __init__(
        self,
        view: HostView,
        rules: RuleTable = DEFAULT_RULES,
        theme: Theme = DEFAULT_THEME,
    ):
        self.view = view
        self.rules = rules
        self.theme = theme
        self.state = PluginState.IDLE
        self.decorations = DecorationSet.none()
        self.recompute()

    def recompute(self, update: ViewUpdate | None = None) -> DecorationSet:
        if self.state is PluginState.DESTROYED:
            return DecorationSet.none()
        self.state = PluginState.RECOMPUTING
        try:
            candidates = scan_ranges(self.view, self.view.visible_ranges, self.rules)
            # Without an update there is no cursor to honour (initial mount)
            cursor = update.is_cursor_inside if update is not None else None
            decorations = resolve(candidates, cursor)
        finally:
            self.state = PluginState.IDLE
        self.decorations = decorations
        logger.debug(
            "Recomputed emphasis: %d candidates, %d decorations",
            len(candidates),
            len(decorations),
        )
        return decorations

    def update(self, update: ViewUpdate) -> bool:
        """Handle a host notification; returns True if a recompute ran."""
        if self.state is PluginState.DESTROYED:
            return False
        if update.doc_changed or update.viewport_changed:
            self.recompute(update)
            return True
        return False

    def destroy(self) -> None:
        self.state = PluginState.DESTROYED
        self.decorations = DecorationSet.none()

"""Tests for the recomputing view plugin and extension wiring."""

import logging

from phrasemark import phrase_emphasis
from phrasemark.adapters.memory_view import EditorView
from phrasemark.config import EmphasisConfig, PhrasemarkConfig, ThemeConfig
from phrasemark.core.model import DecorationSet, EmphasisKind, TextRange, ViewUpdate
from phrasemark.plugin import PhraseEmphasisPlugin, PluginState


def _extension(**kwargs):
    return phrase_emphasis(config=PhrasemarkConfig(**kwargs))


def test_initial_mount_computes_decorations():
    """Test the constructor publishes a set right away."""
    view = EditorView("a **bold** b")
    plugin = view.attach(_extension())
    assert plugin.decorations.ranges() == [(2, 10)]
    assert plugin.state is PluginState.IDLE


def test_initial_mount_ignores_cursor():
    """Test there is no cursor suppression before the first update."""
    view = EditorView("a *it* b", selection=[TextRange(3, 3)])
    plugin = view.attach(_extension())
    assert len(plugin.decorations) == 1


def test_doc_change_applies_cursor_suppression():
    """Test that an edit recomputes with the cursor taken into account."""
    view = EditorView("a *it* b", selection=[TextRange(3, 3)])
    plugin = view.attach(_extension())
    view.dispatch(changes=[(8, 8, "!")])
    assert view.doc.text == "a *it* b!"
    assert len(plugin.decorations) == 0


def test_recompute_with_update_suppresses_under_cursor():
    """Test recompute honours the cursor carried by an update."""
    view = EditorView("a *it* b")
    plugin = PhraseEmphasisPlugin(view)
    result = plugin.recompute(ViewUpdate(doc_changed=True, selection=[TextRange(3, 3)]))
    assert result is plugin.decorations
    assert len(result) == 0


def test_selection_only_update_does_not_recompute():
    """Test that moving the cursor alone leaves the set untouched."""
    view = EditorView("a *it* b")
    plugin = view.attach(_extension())
    before = plugin.decorations
    update = view.dispatch(selection=[TextRange(3, 3)])
    assert not update.doc_changed
    assert not update.viewport_changed
    assert plugin.decorations is before


def test_update_requires_a_flag():
    """Test update() only recomputes for document or viewport changes."""
    plugin = PhraseEmphasisPlugin(EditorView("*a*"))
    assert plugin.update(ViewUpdate()) is False
    assert plugin.update(ViewUpdate(viewport_changed=True)) is True
    assert plugin.update(ViewUpdate(doc_changed=True)) is True


def test_viewport_change_rescans_visible_ranges():
    """Test only visible ranges are decorated."""
    text = "**a** and **b**"
    view = EditorView(text, visible_ranges=[TextRange(0, 5)], selection=[TextRange(7, 7)])
    plugin = view.attach(_extension())
    assert plugin.decorations.ranges() == [(0, 5)]

    update = view.dispatch(visible_ranges=[TextRange(0, len(text))])
    assert update.viewport_changed
    assert plugin.decorations.ranges() == [(0, 5), (10, 15)]


def test_edit_adds_new_emphasis():
    """Test typing a closing delimiter produces a decoration."""
    view = EditorView("see `code")
    plugin = view.attach(_extension())
    assert plugin.decorations == DecorationSet.none()

    view.dispatch(changes=[(9, 9, "`")], selection=[TextRange(0, 0)])
    assert plugin.decorations.ranges() == [(4, 10)]
    assert plugin.decorations[0].widget.kind is EmphasisKind.INLINE_CODE


def test_disabled_kinds_are_not_decorated():
    """Test configured kinds restrict what is decorated."""
    ext = _extension(emphasis=EmphasisConfig(kinds=(EmphasisKind.INLINE_CODE,)))
    view = EditorView("**a** `b`")
    plugin = view.attach(ext)
    assert [d.widget.inner_text for d in plugin.decorations] == ["b"]


def test_extension_theme_from_config():
    """Test theme settings reach the plugin."""
    ext = _extension(theme=ThemeConfig(class_prefix="md-", code_font_family="monospace"))
    plugin = ext.create_plugin(EditorView("`x`"))
    node = plugin.decorations[0].widget.render_to_visual_tree(plugin.theme)
    assert node.class_name == "md-inline-code"
    assert plugin.theme.style_for(EmphasisKind.INLINE_CODE)["font-family"] == "monospace"


def test_destroy_stops_updates():
    """Test a destroyed plugin ignores notifications."""
    view = EditorView("*a*")
    plugin = view.attach(_extension())
    view.destroy()
    assert plugin.state is PluginState.DESTROYED
    assert len(plugin.decorations) == 0
    assert plugin.update(ViewUpdate(doc_changed=True)) is False
    assert view.plugins == []


def test_recompute_logs_counts(caplog):
    """Test recompute emits a debug record."""
    with caplog.at_level(logging.DEBUG, logger="phrasemark.plugin"):
        PhraseEmphasisPlugin(EditorView("**a _b_ c**"))
    assert "2 candidates, 1 decorations" in caplog.text


def test_viewport_change_hides_span_under_caret_at_start():
    """Test a caret on a span's start offset hides it after a viewport change."""
    text = "**a** and **b**"
    view = EditorView(text, visible_ranges=[TextRange(0, 5)], selection=[TextRange(10, 10)])
    plugin = view.attach(_extension())

    view.dispatch(visible_ranges=[TextRange(0, len(text))])
    assert plugin.decorations.ranges() == [(0, 5)]


def test_insert_before_caret_keeps_span_hidden():
    """Test the caret follows an edit made before it."""
    view = EditorView("a *it* b", selection=[TextRange(3, 3)])
    plugin = view.attach(_extension())

    view.dispatch(changes=[(0, 0, "zzzz")])
    assert view.doc.text == "zzzza *it* b"
    assert view.selection == (TextRange(7, 7),)
    assert len(plugin.decorations) == 0


def test_recompute_after_destroy_publishes_nothing():
    """Test a destroyed plugin no longer rescans."""
    view = EditorView("*a*")
    plugin = view.attach(_extension())
    plugin.destroy()
    assert plugin.recompute(ViewUpdate(doc_changed=True)) == DecorationSet.none()
    assert len(plugin.decorations) == 0
    assert plugin.state is PluginState.DESTROYED

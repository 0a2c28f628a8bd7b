"""phrasemark - inline emphasis decorations for editor views."""

from .config import PhrasemarkConfig, load_config
from .core.model import Candidate, Decoration, DecorationSet, EmphasisKind, TextRange, ViewUpdate
from .core.resolver import resolve
from .core.scanner import scan, scan_ranges
from .plugin import PhraseEmphasisPlugin
from .runtime import PhraseEmphasisExtension, phrase_emphasis

__version__ = "0.1.0"

__all__ = [
    "Candidate",
    "Decoration",
    "DecorationSet",
    "EmphasisKind",
    "PhraseEmphasisExtension",
    "PhraseEmphasisPlugin",
    "PhrasemarkConfig",
    "TextRange",
    "ViewUpdate",
    "load_config",
    "phrase_emphasis",
    "resolve",
    "scan",
    "scan_ranges",
]

"""Regex scanner producing raw emphasis candidates from visible text."""

import re
from collections.abc import Iterable

from .model import Candidate, EmphasisKind, Offset, Rule, RuleTable, TextRange
from .ports import HostView

# Lookaround guards keep "**x**" from also matching as two italics and
# keep runs of three or more delimiters from matching at all.
BOLD_STAR_RE = re.compile(r"(?<!\*)\*\*([^*]+?)\*\*(?!\*)")
BOLD_UNDERSCORE_RE = re.compile(r"(?<!_)__([^_]+?)__(?!_)")
ITALIC_STAR_RE = re.compile(r"(?<!\*)\*([^*]+?)\*(?!\*)")
ITALIC_UNDERSCORE_RE = re.compile(r"(?<!_)_([^_]+?)_(?!_)")
INLINE_CODE_RE = re.compile(r"(?<!`)`([^`]+?)`(?!`)")

DEFAULT_RULES: RuleTable = {
    EmphasisKind.BOLD: (
        Rule(EmphasisKind.BOLD, BOLD_STAR_RE),
        Rule(EmphasisKind.BOLD, BOLD_UNDERSCORE_RE),
    ),
    EmphasisKind.ITALIC: (
        Rule(EmphasisKind.ITALIC, ITALIC_STAR_RE),
        Rule(EmphasisKind.ITALIC, ITALIC_UNDERSCORE_RE),
    ),
    EmphasisKind.INLINE_CODE: (
        Rule(EmphasisKind.INLINE_CODE, INLINE_CODE_RE),
    ),
}


def build_rule_table(kinds: Iterable[EmphasisKind | str]) -> RuleTable:
    """Restrict the default rule table to the given kinds.

    Evaluation order stays bold, italic, inline code regardless of the
    order the kinds are listed in.

    Raises:
        ValueError: If a kind name is unknown
    """
    wanted = {
        k if isinstance(k, EmphasisKind) else EmphasisKind.from_name(k)
        for k in kinds
    }
    return {kind: rules for kind, rules in DEFAULT_RULES.items() if kind in wanted}


def scan(
    view: HostView,
    start: Offset,
    end: Offset,
    rules: RuleTable = DEFAULT_RULES,
) -> list[Candidate]:
    """Scan [start, end) of the host text for emphasis candidates.

    Each rule walks the range chunk by chunk. Line-break chunks are skipped,
    so no match can span lines; offsets found inside a chunk are translated
    to absolute document offsets.

    Args:
        view: Host text access
        start: Absolute start offset
        end: Absolute end offset
        rules: Rule table, evaluated in its iteration order

    Returns:
        Unordered, possibly overlapping candidates
    """
    out: list[Candidate] = []
    for kind_rules in rules.values():
        for rule in kind_rules:
            pos = start
            for chunk, is_line_break in view.iter_text_range(start, end):
                if not is_line_break:
                    for m in rule.pattern.finditer(chunk):
                        raw, inner = rule.extract(m)
                        at = pos + m.start()
                        out.append(Candidate(rule.kind, at, at + len(raw), raw, inner))
                pos += len(chunk)
    return out


def scan_ranges(
    view: HostView,
    ranges: Iterable[TextRange],
    rules: RuleTable = DEFAULT_RULES,
) -> list[Candidate]:
    """Scan several ranges and merge the candidates into one list."""
    out: list[Candidate] = []
    for r in ranges:
        out.extend(scan(view, r.start, r.end, rules))
    return out

"""Stateful per-line classifier.

Classification is heuristic and line-granular: delimiters are only looked
for at the start of a trimmed line (openers, prefixes) or anywhere in it
(closers, quotes). Nesting depth and delimiters hidden inside string
literals are not tracked.
"""

from collections.abc import Iterable
from typing import Union

from .models import LineKind, LineStats, ScannerState
from .rules import BLOCK, DOCSTRING, LineRules, get_line_rules


class LineScanner:
    """Classifies every line of a file as empty, comment or code.

    Usage:
        >>> stats = LineScanner("rust").scan('// c\\nlet s = "x";\\n')
        >>> (stats.comment_lines, stats.code_lines, stats.string_lines)
        (1, 1, 1)
    """

    def __init__(self, language: str):
        self.language = language
        self.rules = get_line_rules(language)

    def scan(self, content: Union[str, Iterable[str]]) -> LineStats:
        """Classify ``content`` (full text or an ordered sequence of lines).

        A fresh ScannerState is created per call, so scanning the same
        content twice yields identical results.
        """
        lines = content.splitlines() if isinstance(content, str) else content
        state = ScannerState()
        stats = LineStats()

        for line in lines:
            kind, is_string = classify_line(line, self.rules, state)
            stats.record(kind, is_string)

        return stats


def classify_line(line: str, rules: LineRules, state: ScannerState) -> tuple[LineKind, bool]:
    """Classify one line, updating ``state`` in place.

    Returns:
        (kind, is_string) where ``is_string`` is only ever True for CODE lines.
    """
    trimmed = line.strip()
    if not trimmed:
        return LineKind.EMPTY, False

    if rules.style == BLOCK:
        return _classify_block(trimmed, rules, state)
    if rules.style == DOCSTRING:
        return _classify_docstring(trimmed, rules, state)
    return _classify_plain(trimmed, rules)


def _classify_block(trimmed: str, rules: LineRules, state: ScannerState) -> tuple[LineKind, bool]:
    opener, closer = rules.block_comment or ("/*", "*/")

    if state.in_multiline_comment:
        if closer in trimmed:
            state.in_multiline_comment = False
        return LineKind.COMMENT, False

    if trimmed.startswith(rules.line_comment_prefixes):
        return LineKind.COMMENT, False

    if trimmed.startswith(opener):
        state.in_multiline_comment = closer not in trimmed
        return LineKind.COMMENT, False

    return LineKind.CODE, _has_quote(trimmed, rules)


def _classify_docstring(trimmed: str, rules: LineRules, state: ScannerState) -> tuple[LineKind, bool]:
    # Lines inside or delimiting a triple-quoted block are code lines flagged
    # as strings, which keeps empty + comment + code equal to the line count.
    markers = rules.triple_quote_markers

    if state.in_multiline_string:
        if any(marker in trimmed for marker in markers):
            state.in_multiline_string = False
        return LineKind.CODE, True

    if trimmed.startswith(rules.line_comment_prefixes):
        return LineKind.COMMENT, False

    if any(marker in trimmed for marker in markers):
        # One lone marker opens a block; a matched pair stays on this line.
        if any(trimmed.count(marker) == 1 for marker in markers):
            state.in_multiline_string = True
        return LineKind.CODE, True

    return LineKind.CODE, _has_quote(trimmed, rules)


def _classify_plain(trimmed: str, rules: LineRules) -> tuple[LineKind, bool]:
    if trimmed.startswith(rules.line_comment_prefixes):
        return LineKind.COMMENT, False
    return LineKind.CODE, _has_quote(trimmed, rules)


def _has_quote(trimmed: str, rules: LineRules) -> bool:
    return any(marker in trimmed for marker in rules.quote_markers)


def scan_lines(content: Union[str, Iterable[str]], language: str) -> LineStats:
    """Detailed classification of one file's content."""
    return LineScanner(language).scan(content)


def count_code_lines(content: Union[str, Iterable[str]]) -> int:
    """Cheap code line count used when detailed mode is off.

    A line counts unless it is blank or starts with ``//`` or ``#``. Block
    comments and docstrings are counted as code.
    """
    lines = content.splitlines() if isinstance(content, str) else content
    count = 0
    for line in lines:
        trimmed = line.strip()
        if trimmed and not trimmed.startswith(("//", "#")):
            count += 1
    return count

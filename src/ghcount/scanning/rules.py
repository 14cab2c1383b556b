"""Line classification rules, one descriptor per language.

Adding a language to the detailed scanner:
  1. Add a LineRules entry to RULES below.
  2. That's it. LineScanner picks it up by (lowercased) language name.

Unknown languages use FALLBACK_RULES.
"""

from dataclasses import dataclass
from typing import Optional

# Rule styles understood by LineScanner
BLOCK = "block"  # C-family: // line comments, /* */ block comments
DOCSTRING = "docstring"  # Python: # comments, triple-quoted strings
PLAIN = "plain"  # Fallback: prefix comments only, no multiline state


@dataclass(frozen=True)
class LineRules:
    """Everything the scanner needs to know to classify one line."""

    style: str

    # A trimmed line starting with any of these is a comment.
    line_comment_prefixes: tuple[str, ...] = ()

    # (opener, closer) for block comments, BLOCK style only.
    block_comment: Optional[tuple[str, str]] = None

    # A code line containing any of these is flagged as a string line.
    quote_markers: tuple[str, ...] = ('"', "'")

    # Multiline string delimiters, DOCSTRING style only.
    triple_quote_markers: tuple[str, ...] = ()


# ── Re-usable building blocks ──────────────────────────────────────

_C_BLOCK_COMMENT = ("/*", "*/")
_BACKTICK_QUOTES = ('"', "'", "`")

_JS_RULES = LineRules(
    style=BLOCK,
    line_comment_prefixes=("//",),
    block_comment=_C_BLOCK_COMMENT,
    quote_markers=_BACKTICK_QUOTES,
)

_C_RULES = LineRules(
    style=BLOCK,
    # Preprocessor directives are not counted as code.
    line_comment_prefixes=("//", "#"),
    block_comment=_C_BLOCK_COMMENT,
)


# ── Language rules ─────────────────────────────────────────────────

RULES = {
    "rust": LineRules(
        style=BLOCK,
        line_comment_prefixes=("//", "///", "//!"),
        block_comment=_C_BLOCK_COMMENT,
        quote_markers=('"', "'", 'r"', 'r#"'),
    ),
    "javascript": _JS_RULES,
    "typescript": _JS_RULES,
    "python": LineRules(
        style=DOCSTRING,
        line_comment_prefixes=("#",),
        triple_quote_markers=('"""', "'''"),
    ),
    "java": LineRules(
        style=BLOCK,
        line_comment_prefixes=("//",),
        block_comment=_C_BLOCK_COMMENT,
    ),
    "go": LineRules(
        style=BLOCK,
        line_comment_prefixes=("//",),
        block_comment=_C_BLOCK_COMMENT,
        quote_markers=_BACKTICK_QUOTES,
    ),
    "c": _C_RULES,
    "c++": _C_RULES,
}

FALLBACK_RULES = LineRules(style=PLAIN, line_comment_prefixes=("//", "#", "--"))


def get_line_rules(language: str) -> LineRules:
    """Look up classification rules by case-insensitive language name. Never fails."""
    return RULES.get(language.lower(), FALLBACK_RULES)

"""Test/production attribution: built-in scanning and differential cloc passes."""

from .builtin import analyze_tree
from .differential import compute_delta, language_totals, saturating_sub, to_code_stats

__all__ = [
    "analyze_tree",
    "compute_delta",
    "language_totals",
    "saturating_sub",
    "to_code_stats",
]

"""External line counters."""

from .cloc import ClocRunner, parse_cloc_json

__all__ = ["ClocRunner", "parse_cloc_json"]

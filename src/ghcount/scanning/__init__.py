"""Language-aware line classification and test-file matching."""

from .languages import FALLBACK_CONFIG, LANGUAGES, LanguageConfig, get_language_config, supported_languages
from .matcher import PRODUCTION, TEST, TestFileMatcher
from .models import LineKind, LineStats, ScannerState
from .rules import FALLBACK_RULES, RULES, LineRules, get_line_rules
from .scanner import LineScanner, classify_line, count_code_lines, scan_lines

__all__ = [
    # Language tables
    "LanguageConfig",
    "LANGUAGES",
    "FALLBACK_CONFIG",
    "get_language_config",
    "supported_languages",
    "LineRules",
    "RULES",
    "FALLBACK_RULES",
    "get_line_rules",
    # Scanner
    "LineKind",
    "LineStats",
    "ScannerState",
    "LineScanner",
    "classify_line",
    "scan_lines",
    "count_code_lines",
    # Attribution
    "TestFileMatcher",
    "TEST",
    "PRODUCTION",
]

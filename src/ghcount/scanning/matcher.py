"""Whole-file test/production attribution."""

import re
from pathlib import PurePath
from typing import Optional, Union

from .languages import LanguageConfig, get_language_config

TEST = "test"
PRODUCTION = "production"


class TestFileMatcher:
    """Decides which paths are sources of a language and which of those are tests.

    A file contributes entirely to production or entirely to test counts.
    Splitting below file granularity would need structural parsing.
    """

    __test__ = False

    def __init__(self, language: str):
        self.language = language
        self.config: LanguageConfig = get_language_config(language)
        # Matched against lowercased paths; IGNORECASE keeps capitalised
        # patterns such as Java's "Test[^/]*\.java$" effective.
        self._test_regexes = [re.compile(p, re.IGNORECASE) for p in self.config.test_patterns]

    def is_source_file(self, path: Union[str, PurePath]) -> bool:
        return _normalize(path).endswith(self.config.extensions)

    def is_test_file(self, path: Union[str, PurePath]) -> bool:
        normalized = _normalize(path)
        return any(regex.search(normalized) for regex in self._test_regexes)

    def classify(self, path: Union[str, PurePath]) -> Optional[str]:
        """Return TEST, PRODUCTION, or None when the path is not a source file."""
        if not self.is_source_file(path):
            return None
        return TEST if self.is_test_file(path) else PRODUCTION


def _normalize(path: Union[str, PurePath]) -> str:
    if isinstance(path, PurePath):
        path = path.as_posix()
    return path.replace("\\", "/").lower()

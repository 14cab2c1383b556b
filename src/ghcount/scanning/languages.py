"""Source extensions and test-path patterns per language.

Test patterns are regular expressions searched (not anchored) in the
lowercased file path; a file matching any one of them is a test file. Order
inside a tuple is for readability only.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LanguageConfig:
    """Which files belong to a language, and which of those are tests."""

    name: str
    extensions: tuple[str, ...]
    test_patterns: tuple[str, ...]


_JS_CONFIG = LanguageConfig(
    name="javascript",
    extensions=(".js", ".ts", ".jsx", ".tsx"),
    test_patterns=(
        r"test",
        r"tests/",
        r"spec/",
        r"__tests__/",
        r"\.test\.",
        r"\.spec\.",
    ),
)

_C_CONFIG = LanguageConfig(
    name="c",
    extensions=(".c", ".cpp", ".cc", ".cxx", ".h", ".hpp"),
    test_patterns=(r"test", r"tests/"),
)


LANGUAGES = {
    "rust": LanguageConfig(
        name="rust",
        extensions=(".rs",),
        test_patterns=(r"test", r"tests/", r"_test\.rs$", r"test_.*\.rs$"),
    ),
    "javascript": _JS_CONFIG,
    "typescript": _JS_CONFIG,
    "python": LanguageConfig(
        name="python",
        extensions=(".py",),
        test_patterns=(r"test", r"tests/", r"test_.*\.py$", r".*_test\.py$"),
    ),
    "java": LanguageConfig(
        name="java",
        extensions=(".java",),
        test_patterns=(
            r"src/test/",
            r"/test/",
            r"/tests/",
            r"Test[^/]*\.java$",
            r"[^/]*Test\.java$",
            r"[^/]*Tests\.java$",
        ),
    ),
    "go": LanguageConfig(
        name="go",
        extensions=(".go",),
        test_patterns=(r"_test\.go$",),
    ),
    "c": _C_CONFIG,
    "c++": _C_CONFIG,
}

# Unrecognized languages: plain text files, anything mentioning "test".
FALLBACK_CONFIG = LanguageConfig(name="unknown", extensions=(".txt",), test_patterns=(r"test",))


def get_language_config(language: str) -> LanguageConfig:
    """Look up a language by case-insensitive name, falling back for unknown ones."""
    return LANGUAGES.get(language.lower(), FALLBACK_CONFIG)


def supported_languages() -> list[str]:
    return sorted(LANGUAGES)

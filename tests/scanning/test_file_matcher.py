"""Tests for language configs and whole-file test attribution."""

import pytest

from ghcount.scanning import (
    FALLBACK_CONFIG,
    PRODUCTION,
    TEST,
    TestFileMatcher,
    get_language_config,
    supported_languages,
)


class TestLanguageConfig:
    """Language lookup table."""

    def test_rust(self):
        config = get_language_config("rust")
        assert config.extensions == (".rs",)
        assert "test" in config.test_patterns
        assert r"_test\.rs$" in config.test_patterns

    def test_java(self):
        config = get_language_config("java")
        assert config.extensions == (".java",)
        assert "/test/" in config.test_patterns
        assert r"[^/]*Test\.java$" in config.test_patterns

    def test_typescript(self):
        config = get_language_config("typescript")
        assert ".ts" in config.extensions
        assert ".tsx" in config.extensions
        assert "__tests__/" in config.test_patterns
        assert r"\.test\." in config.test_patterns

    def test_unknown_language_falls_back(self):
        config = get_language_config("unknown")
        assert config == FALLBACK_CONFIG
        assert config.extensions == (".txt",)
        assert config.test_patterns == ("test",)

    @pytest.mark.parametrize("name", ["RUST", "Rust", "rust"])
    def test_case_insensitive(self, name):
        assert get_language_config(name).extensions == (".rs",)

    def test_javascript_and_typescript_share_config(self):
        assert get_language_config("JavaScript") == get_language_config("TypeScript")

    def test_c_and_cpp_share_config(self):
        assert get_language_config("C") == get_language_config("C++")

    @pytest.mark.parametrize("language", supported_languages())
    def test_every_language_is_populated_and_stable(self, language):
        config = get_language_config(language)
        assert config.extensions
        assert config.test_patterns
        assert get_language_config(language) == config


class TestTestFileMatcher:
    """Source selection and test classification."""

    def test_java_maven_layout(self):
        matcher = TestFileMatcher("java")
        assert matcher.classify("src/test/java/Foo.java") == TEST
        assert matcher.classify("src/main/java/Foo.java") == PRODUCTION

    def test_java_capitalised_test_suffix(self):
        matcher = TestFileMatcher("Java")
        assert matcher.is_test_file("/src/main/java/com/acme/ParserTest.java")
        assert matcher.is_test_file("/src/main/java/com/acme/ParserTests.java")
        assert matcher.is_test_file("/src/main/java/com/acme/TestParser.java")

    def test_go_only_test_suffix(self):
        matcher = TestFileMatcher("go")
        assert matcher.classify("pkg/server/server_test.go") == TEST
        assert matcher.classify("pkg/testdata/server.go") == PRODUCTION

    def test_javascript_spec_files(self):
        matcher = TestFileMatcher("typescript")
        assert matcher.classify("src/app/button.spec.tsx") == TEST
        assert matcher.classify("src/__tests__/button.ts") == TEST
        assert matcher.classify("src/app/button.tsx") == PRODUCTION

    def test_rust_integration_tests(self):
        matcher = TestFileMatcher("rust")
        assert matcher.classify("tests/integration.rs") == TEST
        assert matcher.classify("src/main.rs") == PRODUCTION

    def test_python_bare_test_substring_matches(self):
        matcher = TestFileMatcher("python")
        # Unanchored "test" matches anywhere in the path.
        assert matcher.classify("src/contest/rules.py") == TEST

    def test_non_source_file(self):
        matcher = TestFileMatcher("rust")
        assert matcher.classify("tests/README.md") is None
        assert not matcher.is_source_file("build.rs.bak")

    def test_extension_match_is_case_insensitive(self):
        assert TestFileMatcher("c++").is_source_file("include/Widget.HPP")

    def test_windows_separators(self):
        matcher = TestFileMatcher("java")
        assert matcher.classify("src\\test\\java\\Foo.java") == TEST

    def test_unknown_language_uses_txt(self):
        matcher = TestFileMatcher("Brainfuck")
        assert matcher.classify("docs/notes.txt") == PRODUCTION
        assert matcher.classify("docs/test_notes.txt") == TEST
        assert matcher.classify("src/main.bf") is None

"""Tests for the per-line classifier."""

import pytest

from ghcount.scanning import (
    LineKind,
    LineScanner,
    ScannerState,
    classify_line,
    count_code_lines,
    get_line_rules,
)

RUST_SAMPLE = """// Comment
fn main() {
    println!("Hello");
    /* Block comment */
    let x = 5;

    let s = "string literal";
}
"""

JAVA_SAMPLE = """// Java comment
public class Test {
    public static void main(String[] args) {
        System.out.println("Hello");
        /* Multi-line
           comment */
        int x = 5;
    }
}
"""


class TestBlockStyle:
    """C-family languages: // and /* */ comments."""

    def test_rust_sample(self):
        stats = LineScanner("rust").scan(RUST_SAMPLE)
        assert stats.code_lines == 5  # fn main, println, let x, let s, }
        assert stats.comment_lines == 2
        assert stats.empty_lines == 1
        assert stats.string_lines == 2  # println and let s

    def test_java_multiline_comment(self):
        stats = LineScanner("java").scan(JAVA_SAMPLE)
        assert stats.comment_lines == 3
        assert stats.code_lines == 6
        assert stats.string_lines == 1

    def test_comment_then_code_then_blank(self):
        content = '// c\nfn main(){println!("hi");}\n\nlet x=5;\n'
        stats = LineScanner("rust").scan(content)
        assert stats.comment_lines == 1
        assert stats.empty_lines == 1
        assert stats.string_lines == 1
        assert stats.code_lines == 2
        assert stats.total_lines == 4

    def test_rust_doc_comments(self):
        stats = LineScanner("rust").scan("//! crate docs\n/// item docs\nfn f() {}\n")
        assert stats.comment_lines == 2
        assert stats.code_lines == 1

    def test_line_inside_block_comment_is_comment(self):
        content = "/*\nlet x = \"not code\";\n*/\nlet y = 1;\n"
        stats = LineScanner("rust").scan(content)
        assert stats.comment_lines == 3
        assert stats.code_lines == 1
        assert stats.string_lines == 0

    def test_single_line_block_comment_leaves_no_state(self):
        state = ScannerState()
        rules = get_line_rules("java")
        assert classify_line("/* done */", rules, state) == (LineKind.COMMENT, False)
        assert state.in_multiline_comment is False
        assert classify_line("int x = 1;", rules, state) == (LineKind.CODE, False)

    def test_c_preprocessor_is_comment(self):
        stats = LineScanner("c").scan("#include <stdio.h>\nint main(void) { return 0; }\n")
        assert stats.comment_lines == 1
        assert stats.code_lines == 1

    def test_backtick_string_in_javascript(self):
        stats = LineScanner("javascript").scan("const s = `x`;\nconst n = 1;\n")
        assert stats.string_lines == 1

    def test_backtick_not_a_quote_in_java(self):
        stats = LineScanner("java").scan("int `x` = 1;\n")
        assert stats.string_lines == 0


class TestDocstringStyle:
    """Python: # comments and triple-quoted strings."""

    def test_hash_comment(self):
        stats = LineScanner("python").scan("# comment\nx = 1\n")
        assert stats.comment_lines == 1
        assert stats.code_lines == 1

    def test_multiline_docstring_lines_are_string_code(self):
        content = 'def f():\n    """Start\n    middle\n    end"""\n    return 1\n'
        stats = LineScanner("python").scan(content)
        assert stats.comment_lines == 0
        assert stats.code_lines == 5
        assert stats.string_lines == 3

    def test_single_line_docstring_keeps_no_state(self):
        state = ScannerState()
        rules = get_line_rules("python")
        assert classify_line('"""One line."""', rules, state) == (LineKind.CODE, True)
        assert state.in_multiline_string is False

    def test_single_quoted_triple_opens_block(self):
        state = ScannerState()
        rules = get_line_rules("python")
        classify_line("x = '''", rules, state)
        assert state.in_multiline_string is True
        assert classify_line("# not a comment in here", rules, state) == (LineKind.CODE, True)
        classify_line("'''", rules, state)
        assert state.in_multiline_string is False

    def test_plain_quote_flags_string(self):
        stats = LineScanner("python").scan("name = 'x'\ncount = 2\n")
        assert stats.string_lines == 1
        assert stats.code_lines == 2


class TestFallback:
    """Unknown languages use prefix comments only."""

    @pytest.mark.parametrize("line", ["// c", "# c", "-- c"])
    def test_comment_prefixes(self, line):
        stats = LineScanner("COBOL").scan(line)
        assert stats.comment_lines == 1

    def test_block_opener_is_code(self):
        stats = LineScanner("haskell").scan("/* not special */\n")
        assert stats.code_lines == 1


class TestScannerProperties:
    """Properties that hold for every language."""

    @pytest.mark.parametrize("language", ["rust", "python", "java", "go", "c++", "unknown"])
    def test_blank_only_input(self, language):
        stats = LineScanner(language).scan("\n   \n\t\n")
        assert stats.code_lines == 0
        assert stats.comment_lines == 0
        assert stats.empty_lines == 3

    @pytest.mark.parametrize("language", ["rust", "python", "typescript"])
    def test_partition_and_string_bound(self, language):
        content = RUST_SAMPLE + JAVA_SAMPLE + '"""\nx\n"""\n'
        stats = LineScanner(language).scan(content)
        assert stats.total_lines == len(content.splitlines())
        assert stats.string_lines <= stats.code_lines

    def test_scanning_is_idempotent(self):
        scanner = LineScanner("java")
        unterminated = "/* opened\nstill comment\n"
        first = scanner.scan(unterminated)
        second = scanner.scan(unterminated)
        assert first == second
        # No state leaks into the next file either.
        assert scanner.scan("int x = 1;\n").code_lines == 1

    def test_accepts_line_sequence(self):
        stats = LineScanner("rust").scan(["// c", "let x = 1;", ""])
        assert (stats.comment_lines, stats.code_lines, stats.empty_lines) == (1, 1, 1)

    def test_language_lookup_is_case_insensitive(self):
        assert LineScanner("RUST").scan(RUST_SAMPLE) == LineScanner("rust").scan(RUST_SAMPLE)


class TestCountCodeLines:
    """Simple mode counter."""

    def test_excludes_comments_and_blank_lines(self):
        sample = '// This is a comment\nfn main() {\n    println!("Hello, world!");\n    \n    // Another comment\n    let x = 5;\n}\n'
        assert count_code_lines(sample) == 4

    def test_hash_lines_are_skipped(self):
        assert count_code_lines("# heading\nx = 1\n") == 1

    def test_block_comments_count_as_code(self):
        assert count_code_lines("/* a\n b */\n") == 2

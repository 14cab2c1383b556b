"""Data models for the scanning layer."""

from dataclasses import dataclass
from enum import Enum


class LineKind(Enum):
    """Mutually exclusive line categories. String-ness is a separate flag."""

    EMPTY = "empty"
    COMMENT = "comment"
    CODE = "code"


@dataclass
class ScannerState:
    """Multiline state carried across the lines of exactly one file."""

    in_multiline_comment: bool = False
    in_multiline_string: bool = False


@dataclass
class LineStats:
    """Per-file classification result.

    ``code_lines + comment_lines + empty_lines`` equals the number of lines
    scanned; ``string_lines`` counts code lines flagged as strings.
    """

    code_lines: int = 0
    comment_lines: int = 0
    empty_lines: int = 0
    string_lines: int = 0

    @property
    def total_lines(self) -> int:
        return self.code_lines + self.comment_lines + self.empty_lines

    def record(self, kind: LineKind, is_string: bool = False) -> None:
        if kind is LineKind.EMPTY:
            self.empty_lines += 1
        elif kind is LineKind.COMMENT:
            self.comment_lines += 1
        else:
            self.code_lines += 1
            if is_string:
                self.string_lines += 1

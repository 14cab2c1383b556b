"""Built-in counting: walk a working tree and scan each source file."""

from pathlib import Path

from ..logging_config import get_logger
from ..models import CodeStats
from ..scanning import LineScanner, TestFileMatcher, count_code_lines

logger = get_logger(__name__)

SKIP_DIRS = frozenset({".git"})


def analyze_tree(root: Path, language: str, detailed: bool = False) -> CodeStats:
    """Count production and test lines of ``language`` under ``root``.

    Paths are matched relative to ``root`` with a leading slash, so
    directory patterns like ``/test/`` also match at the top level and the
    clone location never influences the result.

    Args:
        root: Working tree to walk
        language: Repository's primary language
        detailed: Also collect comment/empty/string counts

    Returns:
        CodeStats for the whole tree
    """
    matcher = TestFileMatcher(language)
    scanner = LineScanner(language)
    stats = CodeStats()
    scanned = 0

    for path in sorted(root.rglob("*")):
        relative = path.relative_to(root)
        if any(part in SKIP_DIRS for part in relative.parts):
            continue
        if not path.is_file():
            continue

        match_path = "/" + relative.as_posix()
        if not matcher.is_source_file(match_path):
            continue

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Skipping unreadable file {relative}: {e}")
            continue

        if detailed:
            line_stats = scanner.scan(content)
            code_lines = line_stats.code_lines
            stats.comment_lines += line_stats.comment_lines
            stats.empty_lines += line_stats.empty_lines
            stats.string_lines += line_stats.string_lines
        else:
            code_lines = count_code_lines(content)

        if matcher.is_test_file(match_path):
            stats.test_lines += code_lines
        else:
            stats.production_lines += code_lines
        scanned += 1

    logger.debug(f"Scanned {scanned} {language} files under {root}")
    return stats

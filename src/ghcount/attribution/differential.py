"""Differential test/production attribution over two cloc passes.

cloc has no notion of test code, so it runs twice: once over the whole tree
and once with test directories and test file names excluded. Test lines are
the difference. Only code lines are split between production and test;
comment and blank counts on the resulting CodeStats are the unfiltered
totals.
"""

from ..logging_config import get_logger
from ..models import ClocReport, CodeStats, LanguageCount, TestLineDelta

logger = get_logger(__name__)


def saturating_sub(minuend: int, subtrahend: int) -> int:
    """``minuend - subtrahend`` clamped at zero."""
    return minuend - subtrahend if minuend > subtrahend else 0


def language_totals(report: ClocReport, language: str) -> LanguageCount:
    """Sum every entry of ``report`` whose name matches ``language``.

    Matching is case-insensitive; a language may appear more than once and
    all matching entries are summed.
    """
    target = language.lower()
    files = blank = comment = code = 0
    for entry in report.languages:
        if entry.language.lower() == target:
            files += entry.files
            blank += entry.blank
            comment += entry.comment
            code += entry.code
    return LanguageCount(language=language, files=files, blank=blank, comment=comment, code=code)


def compute_delta(total: ClocReport, production_only: ClocReport, language: str) -> TestLineDelta:
    """Test lines for ``language``: unfiltered counts minus production-only counts.

    No component is ever negative. If the production pass reports more than
    the unfiltered pass, that component clamps to zero.
    """
    all_lines = language_totals(total, language)
    production = language_totals(production_only, language)

    delta = TestLineDelta(
        code=saturating_sub(all_lines.code, production.code),
        comment=saturating_sub(all_lines.comment, production.comment),
        blank=saturating_sub(all_lines.blank, production.blank),
    )
    if production.code > all_lines.code:
        logger.warning(
            f"{language}: production-only pass reported {production.code} code lines, "
            f"more than the unfiltered {all_lines.code}; test lines clamped to 0"
        )
    logger.debug(f"{language}: {production.code} production lines, {delta.code} test lines")
    return delta


def to_code_stats(total: ClocReport, delta: TestLineDelta, language: str) -> CodeStats:
    """Combine the unfiltered report and the test delta into CodeStats."""
    all_lines = language_totals(total, language)
    return CodeStats(
        production_lines=saturating_sub(all_lines.code, delta.code),
        test_lines=delta.code,
        comment_lines=all_lines.comment,
        empty_lines=all_lines.blank,
    )

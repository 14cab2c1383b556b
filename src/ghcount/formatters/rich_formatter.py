"""Rich terminal formatter for ghcount reports."""

import io
from typing import Optional

from rich.console import Console
from rich.table import Table

from ..models import ClocReport, CodeStats, ReportData
from .base import BaseFormatter, ReportOptions

NONE_LABEL = "(none)"


def _stats_columns(table: Table, detailed: bool) -> None:
    table.add_column("Production", justify="right")
    table.add_column("Test", justify="right")
    if detailed:
        table.add_column("Comments", justify="right")
        table.add_column("Empty", justify="right")
        table.add_column("Strings", justify="right")


def _stats_cells(stats: CodeStats, detailed: bool) -> list[str]:
    cells = [str(stats.production_lines), str(stats.test_lines)]
    if detailed:
        cells += [str(stats.comment_lines), str(stats.empty_lines), str(stats.string_lines)]
    return cells


def _percent(part: int, whole: int) -> str:
    return f"{part / whole * 100:.1f}%"


class RichFormatter(BaseFormatter):
    """Tables for repository, team and organization rollups, plus the cloc detail.

    All three rollup sections are printed even when empty, so a run with no
    teams or no successful repositories still produces a complete report.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, report: ReportData, options: ReportOptions) -> None:
        self._render_to(self.console, report, options)

    def format(self, report: ReportData, options: ReportOptions) -> str:
        buffer = io.StringIO()
        self._render_to(Console(file=buffer, width=120, color_system=None), report, options)
        return buffer.getvalue()

    def _render_to(self, console: Console, report: ReportData, options: ReportOptions) -> None:
        detailed = options.show_detailed_breakdown
        self._print_repositories(console, report, detailed)
        self._print_teams(console, report, detailed)
        self._print_organization(console, report, detailed)
        if report.failures:
            self._print_failures(console, report)
        if options.use_cloc and report.cloc_results:
            self._print_cloc_details(console, report, options)

    # ── rollups ────────────────────────────────────────────────────────

    def _print_repositories(self, console: Console, report: ReportData, detailed: bool) -> None:
        _heading(console, "=== Repository Statistics ===")
        if not report.repository_stats:
            console.print(NONE_LABEL)
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("Repository", style="cyan")
        table.add_column("Language")
        _stats_columns(table, detailed)
        for full_name in sorted(report.repository_stats):
            for language, stats in sorted(report.repository_stats[full_name].items()):
                table.add_row(full_name, language, *_stats_cells(stats, detailed))
        console.print(table)

    def _print_teams(self, console: Console, report: ReportData, detailed: bool) -> None:
        _heading(console, "=== Team Statistics ===")
        if not report.team_stats:
            console.print(NONE_LABEL)
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("Team", style="cyan")
        table.add_column("Language")
        _stats_columns(table, detailed)
        for team_name in sorted(report.team_stats):
            for language, stats in sorted(report.team_stats[team_name].items()):
                table.add_row(team_name, language, *_stats_cells(stats, detailed))
        console.print(table)

    def _print_organization(self, console: Console, report: ReportData, detailed: bool) -> None:
        _heading(console, "=== Organization Statistics ===")
        if not report.organization_stats:
            console.print(NONE_LABEL)
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("Language", style="cyan")
        _stats_columns(table, detailed)
        for language, stats in sorted(report.organization_stats.items()):
            table.add_row(language, *_stats_cells(stats, detailed))
        console.print(table)

    def _print_failures(self, console: Console, report: ReportData) -> None:
        _heading(console, "=== Failed Repositories ===")
        table = Table(show_header=True, header_style="bold")
        table.add_column("Repository", style="cyan")
        table.add_column("Code")
        table.add_column("Reason", style="red")
        for failure in report.failures:
            table.add_row(failure.full_name, failure.code, failure.reason)
        console.print(table)

    # ── cloc detail ────────────────────────────────────────────────────

    def _print_cloc_details(self, console: Console, report: ReportData, options: ReportOptions) -> None:
        _heading(console, "=== Detailed Cloc Analysis ===")
        for full_name in sorted(report.cloc_results):
            _heading(console, f"--- Repository: {full_name} ---")
            language_stats = report.repository_stats.get(full_name, {})
            stats = next(iter(language_stats.values()), None)
            self._print_cloc_result(console, report.cloc_results[full_name], stats, options)

    def _print_cloc_result(
        self,
        console: Console,
        cloc_result: ClocReport,
        stats: Optional[CodeStats],
        options: ReportOptions,
    ) -> None:
        _heading(console, "=== Cloc Analysis Results ===")
        console.print(cloc_result.header, markup=False, highlight=False)

        table = Table(show_header=True, header_style="bold")
        table.add_column("Language", style="cyan")
        for column in ("Files", "Blank", "Comment", "Code"):
            table.add_column(column, justify="right")

        shown = [entry for entry in cloc_result.languages if options.allows(entry.language)]
        for entry in shown:
            table.add_row(
                entry.language, str(entry.files), str(entry.blank), str(entry.comment), str(entry.code)
            )
        if len(shown) > 1:
            table.add_section()
            table.add_row(
                "SUM",
                str(sum(e.files for e in shown)),
                str(sum(e.blank for e in shown)),
                str(sum(e.comment for e in shown)),
                str(sum(e.code for e in shown)),
                style="bold",
            )
        console.print(table)

        if stats is None:
            return

        _heading(console, "=== Production vs Test Code Breakdown ===")
        breakdown = Table(show_header=True, header_style="bold")
        breakdown.add_column("Category")
        breakdown.add_column("Lines", justify="right")
        breakdown.add_row("Production Code", str(stats.production_lines))
        breakdown.add_row("Test Code", str(stats.test_lines))
        breakdown.add_section()
        breakdown.add_row("Total Code", str(stats.total_code_lines), style="bold")
        console.print(breakdown)

        total = stats.total_code_lines
        if total > 0:
            _heading(console, "=== Code Distribution ===")
            console.print(
                f"Production: {_percent(stats.production_lines, total)} ({stats.production_lines} lines)",
                highlight=False,
            )
            console.print(
                f"Test:       {_percent(stats.test_lines, total)} ({stats.test_lines} lines)",
                highlight=False,
            )


def _heading(console: Console, text: str) -> None:
    console.print()
    console.print(text, style="bold", markup=False, highlight=False)

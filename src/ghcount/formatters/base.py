"""Base formatter interface for ghcount report rendering."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..models import ReportData


@dataclass(frozen=True)
class ReportOptions:
    """What the report shows.

    Attributes:
        show_detailed_breakdown: Add comment/empty/string columns
        language_allow_list: Restrict the cloc per-language table
        use_cloc: Print the detailed cloc section
    """

    show_detailed_breakdown: bool = False
    language_allow_list: Optional[tuple[str, ...]] = None
    use_cloc: bool = False

    def allows(self, language: str) -> bool:
        if not self.language_allow_list:
            return True
        return language.lower() in {lang.lower() for lang in self.language_allow_list}


class BaseFormatter(ABC):
    """Abstract base class for report formatters."""

    @abstractmethod
    def render(self, report: ReportData, options: ReportOptions) -> None:
        """Write the report to the formatter's output."""

    @abstractmethod
    def format(self, report: ReportData, options: ReportOptions) -> str:
        """Return the report as a string."""

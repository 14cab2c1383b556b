"""Report formatters."""

from .base import BaseFormatter, ReportOptions
from .rich_formatter import RichFormatter

__all__ = ["BaseFormatter", "ReportOptions", "RichFormatter"]

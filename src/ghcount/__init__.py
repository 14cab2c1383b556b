"""
ghcount - production vs test line counts across GitHub repositories

Attributes source lines of every repository a team owns to production or
test code, per language, and rolls them up per repository, per team and for
the whole organization. Counting is done by a built-in line scanner or
delegated to cloc.
"""

__version__ = "0.3.0"

from .models import CodeStats, ReportData, Repository, Team, TeamsConfig
from .pipeline import RunOptions, run
from .scanning import LineScanner, LineStats, TestFileMatcher, get_language_config

__all__ = [
    "run",  # Main entry point
    "RunOptions",
    "ReportData",
    "CodeStats",
    "Repository",
    "Team",
    "TeamsConfig",
    "LineScanner",
    "LineStats",
    "TestFileMatcher",
    "get_language_config",
]

"""Core data models shared by the counting pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Optional


@dataclass
class CodeStats:
    """Line counts for one language, at repository, team or organization level.

    ``comment_lines``, ``empty_lines`` and ``string_lines`` are only filled in
    detailed mode (or mirrored from cloc on the delegated path).
    """

    production_lines: int = 0
    test_lines: int = 0
    comment_lines: int = 0
    empty_lines: int = 0
    string_lines: int = 0

    def add(self, other: CodeStats) -> None:
        """Field-wise addition of ``other`` into this record."""
        for f in fields(self):
            setattr(self, f.name, getattr(self, f.name) + getattr(other, f.name))

    @property
    def total_code_lines(self) -> int:
        return self.production_lines + self.test_lines


@dataclass(frozen=True)
class Repository:
    """Repository metadata as returned by the hosting API."""

    name: str
    full_name: str
    clone_url: str
    language: Optional[str] = None


@dataclass(frozen=True)
class Team:
    """A team and the repositories (names without org prefix) it owns."""

    name: str
    organization: str
    repositories: tuple[str, ...] = ()

    def owns(self, repo: Repository) -> bool:
        return repo.full_name == f"{self.organization}/{repo.name}" and repo.name in self.repositories


@dataclass(frozen=True)
class TeamsConfig:
    teams: tuple[Team, ...] = ()


@dataclass(frozen=True)
class LanguageCount:
    """One language entry of a cloc report."""

    language: str
    files: int = 0
    blank: int = 0
    comment: int = 0
    code: int = 0


@dataclass
class ClocReport:
    """Aggregate per-language report produced by one cloc pass."""

    header: str = "cloc output"
    languages: list[LanguageCount] = field(default_factory=list)


@dataclass(frozen=True)
class TestLineDelta:
    """Lines attributed to tests: unfiltered minus production-only counts."""

    __test__ = False

    code: int = 0
    comment: int = 0
    blank: int = 0


@dataclass(frozen=True)
class RepositoryFailure:
    """A repository that dropped out of the run, and why."""

    full_name: str
    reason: str
    code: str = ""


@dataclass
class ReportData:
    """Everything the report renderer needs, keyed for display."""

    # full_name -> language -> stats
    repository_stats: dict[str, dict[str, CodeStats]] = field(default_factory=dict)
    # team name -> language -> stats
    team_stats: dict[str, dict[str, CodeStats]] = field(default_factory=dict)
    # language -> stats
    organization_stats: dict[str, CodeStats] = field(default_factory=dict)
    # full_name -> unfiltered cloc report
    cloc_results: dict[str, ClocReport] = field(default_factory=dict)
    failures: list[RepositoryFailure] = field(default_factory=list)

"""Fold per-repository results into repository, team and organization rollups."""

from typing import Optional

from .logging_config import get_logger
from .models import (
    ClocReport,
    CodeStats,
    ReportData,
    Repository,
    RepositoryFailure,
    TeamsConfig,
)

logger = get_logger(__name__)


def resolve_targets(teams_config: TeamsConfig) -> list[str]:
    """Unique ``organization/name`` targets declared across all teams, sorted."""
    targets = {
        f"{team.organization}/{repo_name}"
        for team in teams_config.teams
        for repo_name in team.repositories
    }
    return sorted(targets)


class StatsAggregator:
    """Accumulates CodeStats for the whole run.

    Rollups are only ever added to. A repository declared under several
    teams (same organization and name) is credited in full to each of them;
    the organization rollup is folded once per repository, so it never
    double counts.
    """

    def __init__(self, teams_config: TeamsConfig):
        self.teams = teams_config.teams
        self.report = ReportData()

    def add(
        self,
        repo: Repository,
        language: str,
        stats: CodeStats,
        cloc_result: Optional[ClocReport] = None,
    ) -> None:
        """Fold one repository's stats for ``language`` into every rollup."""
        if cloc_result is not None:
            self.report.cloc_results[repo.full_name] = cloc_result

        _fold(self.report.repository_stats.setdefault(repo.full_name, {}), language, stats)
        _fold(self.report.organization_stats, language, stats)

        for team in self.teams:
            if team.owns(repo):
                _fold(self.report.team_stats.setdefault(team.name, {}), language, stats)
                logger.debug(f"{repo.full_name} credited to team {team.name}")

    def record_failure(self, full_name: str, reason: str, code: str = "") -> None:
        self.report.failures.append(RepositoryFailure(full_name=full_name, reason=reason, code=code))


def _fold(bucket: dict[str, CodeStats], language: str, stats: CodeStats) -> None:
    bucket.setdefault(language, CodeStats()).add(stats)

"""Sequential driver: fetch, clone, measure, clean up and fold, one repository at a time.

Each repository is finished (clone removed, stats folded) before the next
one starts. Failures scoped to a repository are printed, recorded on the
report and skipped; fatal errors (a missing cloc) propagate to the caller.
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console

from .aggregate import StatsAggregator, resolve_targets
from .attribution import analyze_tree, compute_delta, language_totals, to_code_stats
from .config import CounterConfig
from .exceptions import CloneError, ExternalToolExecutionError, GhcountError, MetadataFetchError
from .logging_config import get_logger
from .models import ClocReport, CodeStats, ReportData, Repository, TeamsConfig
from .remote import GitHubClient, WorkingTree, clone_repository
from .tooling import ClocRunner

logger = get_logger(__name__)


@dataclass(frozen=True)
class RunOptions:
    """Per-run switches that come from the command line.

    Attributes:
        token: GitHub token, used for the API and embedded into clone URLs
        detailed: Collect comment/empty/string counts on the built-in path
        use_cloc: Delegate counting to cloc (two passes per repository)
        languages: Optional allow-list of primary languages, any case
    """

    token: str
    detailed: bool = False
    use_cloc: bool = False
    languages: Optional[tuple[str, ...]] = None

    def allows(self, language: str) -> bool:
        if not self.languages:
            return True
        return language.lower() in {lang.lower() for lang in self.languages}


async def run(
    teams_config: TeamsConfig,
    options: RunOptions,
    config: Optional[CounterConfig] = None,
    client: Optional[GitHubClient] = None,
    console: Optional[Console] = None,
) -> ReportData:
    """Count every repository declared in ``teams_config``.

    Args:
        teams_config: Teams and the repositories they own
        options: Run switches
        config: Collaborator settings (defaults if omitted)
        client: GitHub client to use; one is created (and closed) if omitted
        console: Where progress lines go

    Returns:
        The folded report, including per-repository failures

    Raises:
        ExternalToolMissingError: If ``use_cloc`` is set and cloc is absent
    """
    config = config or CounterConfig()
    console = console or Console()

    targets = resolve_targets(teams_config)
    console.print(f"Target repositories: {{{', '.join(targets)}}}", markup=False, highlight=False)

    cloc_runner = None
    if options.use_cloc:
        cloc_runner = ClocRunner(config)
        cloc_runner.ensure_available()

    aggregator = StatsAggregator(teams_config)
    tree = WorkingTree(config.work_path)
    owns_client = client is None
    if client is None:
        client = GitHubClient(options.token, config)

    try:
        for target in targets:
            await _process(target, client, aggregator, options, config, tree, cloc_runner, console)
    finally:
        if owns_client:
            await client.close()
        tree.reset()

    report = aggregator.report
    logger.info(
        f"Counted {len(report.repository_stats)} of {len(targets)} repositories, "
        f"{len(report.failures)} failed"
    )
    return report


async def _process(
    target: str,
    client: GitHubClient,
    aggregator: StatsAggregator,
    options: RunOptions,
    config: CounterConfig,
    tree: WorkingTree,
    cloc_runner: Optional[ClocRunner],
    console: Console,
) -> None:
    parts = target.split("/")
    if len(parts) != 2 or not all(parts):
        logger.warning(f"Ignoring malformed repository target '{target}'")
        return
    owner, name = parts

    _say(console, f"Fetching repository: {target}")
    try:
        repo = await client.fetch(owner, name)
    except MetadataFetchError as e:
        _fail(console, aggregator, target, e, f"✗ Error fetching {target}: {e.message}")
        return
    _say(console, f"✓ Successfully fetched: {target}")

    language = repo.language
    if language is None:
        _say(console, f"Skipping repository: {repo.full_name} - no primary language")
        return
    if not options.allows(language):
        _say(console, f"Skipping repository: {repo.full_name} ({language}) - not in language filter")
        return

    _say(console, f"Processing repository: {repo.full_name} ({language})")
    try:
        stats, cloc_result = _measure(repo, language, options, config, tree, cloc_runner, console)
    except (CloneError, ExternalToolExecutionError) as e:
        _fail(console, aggregator, repo.full_name, e, f"✗ {repo.full_name}: {e.message}")
        return

    aggregator.add(repo, language, stats, cloc_result)


def _measure(
    repo: Repository,
    language: str,
    options: RunOptions,
    config: CounterConfig,
    tree: WorkingTree,
    cloc_runner: Optional[ClocRunner],
    console: Console,
) -> tuple[CodeStats, Optional[ClocReport]]:
    if cloc_runner is not None:
        _say(console, "Using cloc for analysis...")

    try:
        path = clone_repository(repo, options.token, tree, config)
        if cloc_runner is None:
            return analyze_tree(path, language, detailed=options.detailed), None

        total, production_only = cloc_runner.measure(path)
        delta = compute_delta(total, production_only, language)
        _say(console, f"  Production lines detected: {language_totals(production_only, language).code}")
        _say(console, f"  Test lines calculated: {delta.code}")
        return to_code_stats(total, delta, language), total
    finally:
        tree.reset()


def _say(console: Console, text: str) -> None:
    console.print(text, markup=False, highlight=False)


def _fail(
    console: Console,
    aggregator: StatsAggregator,
    full_name: str,
    error: GhcountError,
    line: str,
) -> None:
    logger.warning(f"{full_name}: {error}")
    _say(console, line)
    aggregator.record_failure(full_name, error.message, error.code.value)

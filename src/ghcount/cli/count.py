"""The counting command."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from .. import pipeline
from ..config import load_config, load_teams_config
from ..exceptions import GhcountError
from ..formatters import ReportOptions, RichFormatter
from ..logging_config import setup_logging
from . import app
from ._common import console, parse_languages


def _print_version(value: bool) -> None:
    if value:
        from .. import __version__

        console.print(f"[bold cyan]ghcount[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.command()
def count(
    token: str = typer.Option(
        ...,
        "--token",
        "-t",
        envvar="GITHUB_TOKEN",
        help="GitHub personal access token",
        show_default=False,
    ),
    teams_config: Path = typer.Option(
        Path("teams.json"),
        "--teams-config",
        "-c",
        envvar="TEAMS_CONFIG",
        help="Team configuration file (JSON)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        envvar="DEBUG_MODE",
        help="Detailed mode: also count comment, empty and string lines",
    ),
    use_cloc: bool = typer.Option(
        False,
        "--use-cloc",
        envvar="USE_CLOC",
        help="Count with cloc instead of the built-in scanner",
    ),
    languages: Optional[str] = typer.Option(
        None,
        "--languages",
        envvar="LANGUAGES",
        help="Comma-separated primary languages to include (e.g. rust,java)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Settings file (TOML)",
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug diagnostics to stderr",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append diagnostics to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_print_version,
        is_eager=True,
    ),
):
    """
    Count production and test lines for every repository in the team configuration.

    Each repository is fetched, shallow-cloned, measured and removed in turn.
    Results are rolled up per repository, per team and for the organization.

    [bold cyan]Examples:[/bold cyan]

      ghcount --token $GITHUB_TOKEN

      ghcount -c teams.json --debug

      ghcount --use-cloc --languages java,kotlin
    """
    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file, secrets=(token,))
    console.print("GitHub Code Counter", highlight=False)

    allow_list = parse_languages(languages)

    try:
        settings = load_config(config_file=config)
        teams = load_teams_config(teams_config)

        options = pipeline.RunOptions(
            token=token,
            detailed=debug,
            use_cloc=use_cloc,
            languages=allow_list,
        )
        report = asyncio.run(pipeline.run(teams, options, settings, console=console))

        RichFormatter(console).render(
            report,
            ReportOptions(
                show_detailed_breakdown=debug,
                language_allow_list=allow_list,
                use_cloc=use_cloc,
            ),
        )

    except GhcountError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(
            f"Error [{e.code.value}] {e.stage}: {e}",
            style="red",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Run interrupted by user")
        console.print("\n[yellow]Run interrupted[/yellow]")
        raise typer.Exit(130)

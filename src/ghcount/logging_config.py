"""
Logging configuration for ghcount.

Diagnostics go through the standard ``logging`` module and are rendered on
stderr by rich, so they never interleave with the report on stdout. The
GitHub token is masked in every record before any handler formats it.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "ghcount"
REDACTED = "***"


class SecretFilter(logging.Filter):
    """Replace known secrets in a record's rendered message."""

    def __init__(self, secrets: Iterable[str]):
        super().__init__()
        self.secrets = tuple(s for s in secrets if s)

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.secrets:
            return True

        message = record.getMessage()
        masked = message
        for secret in self.secrets:
            masked = masked.replace(secret, REDACTED)

        if masked != message:
            record.msg = masked
            record.args = None
        return True


def _level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Union[str, Path]] = None,
    secrets: Iterable[str] = (),
) -> logging.Logger:
    """
    Route ghcount diagnostics to stderr, and optionally to a file.

    Args:
        verbose: Log at DEBUG with timestamps and source locations
        quiet: Only log errors (wins over ``verbose``)
        log_file: Append plain-text records here too
        secrets: Strings masked as ``***`` in every record (the API token)

    Returns:
        The ``ghcount`` package logger
    """
    level = _level(verbose, quiet)
    secret_filter = SecretFilter(secrets)

    stderr_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=False,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    handlers: list[logging.Handler] = [stderr_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        handlers.append(file_handler)

    for handler in handlers:
        handler.addFilter(secret_filter)

    # Third-party loggers (httpx) stay at WARNING unless asked for.
    logging.basicConfig(level=logging.WARNING, handlers=handlers, force=True)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger under the ``ghcount`` namespace.

    ``get_logger(__name__)`` inside the package returns the module logger
    unchanged; foreign names are nested under ``ghcount.``.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)

"""Run cloc as a subprocess and parse its JSON output."""

import json
import subprocess
from pathlib import Path
from typing import Any

from ..config import CounterConfig
from ..exceptions import ExternalToolExecutionError, ExternalToolMissingError
from ..logging_config import get_logger
from ..models import ClocReport, LanguageCount

logger = get_logger(__name__)

# Keys of cloc's JSON output that are not languages
SUMMARY_KEY = "SUM"
HEADER_KEY = "header"


class ClocRunner:
    """Two-pass cloc measurement of a working tree.

    The unfiltered pass counts everything outside ``exclude_dirs``; the
    production pass additionally drops test directories and test file names.
    Neither pass has a timeout.
    """

    def __init__(self, config: CounterConfig):
        self.binary = config.cloc_binary
        self.exclude_dirs = list(config.exclude_dirs)
        self.test_dir_pattern = config.test_dir_pattern
        self.test_file_pattern = config.test_file_pattern

    def ensure_available(self) -> str:
        """Probe ``cloc --version``.

        Returns:
            The version string cloc printed

        Raises:
            ExternalToolMissingError: If cloc cannot be executed
        """
        try:
            result = subprocess.run(
                [self.binary, "--version"],
                capture_output=True,
                text=True,
            )
        except OSError as e:
            logger.debug(f"cloc probe failed: {e}")
            raise ExternalToolMissingError(self.binary) from e
        version = result.stdout.strip()
        logger.debug(f"Found {self.binary} {version}")
        return version

    def total_args(self, directory: Path) -> list[str]:
        return [self.binary, "--json", self._exclude_dir_arg(), str(directory)]

    def production_args(self, directory: Path) -> list[str]:
        return [
            self.binary,
            "--json",
            self._exclude_dir_arg(),
            "--fullpath",
            f"--not-match-d={self.test_dir_pattern}",
            f"--not-match-f={self.test_file_pattern}",
            str(directory),
        ]

    def count_total(self, directory: Path) -> ClocReport:
        return self._run(self.total_args(directory), "total")

    def count_production(self, directory: Path) -> ClocReport:
        return self._run(self.production_args(directory), "production")

    def measure(self, directory: Path) -> tuple[ClocReport, ClocReport]:
        """Run both passes. Returns (unfiltered, production_only)."""
        return self.count_total(directory), self.count_production(directory)

    def _exclude_dir_arg(self) -> str:
        return f"--exclude-dir={','.join(self.exclude_dirs)}"

    def _run(self, args: list[str], pass_name: str) -> ClocReport:
        logger.debug(f"Running cloc {pass_name} pass: {' '.join(args)}")
        try:
            result = subprocess.run(args, capture_output=True, text=True)
        except OSError as e:
            raise ExternalToolMissingError(self.binary) from e

        if result.returncode != 0:
            raise ExternalToolExecutionError(
                self.binary, result.stderr.strip() or f"exit status {result.returncode}", pass_name
            )

        try:
            return parse_cloc_json(result.stdout)
        except ValueError as e:
            raise ExternalToolExecutionError(self.binary, str(e), pass_name) from e


def parse_cloc_json(text: str) -> ClocReport:
    """Parse ``cloc --json`` output.

    The ``SUM`` entry is ignored and ``header.cloc_version`` becomes the report
    header. cloc prints nothing at all when it finds no source files, which
    parses to an empty report.

    Raises:
        ValueError: If the text is not a JSON object
    """
    if not text.strip():
        return ClocReport()

    document = json.loads(text)
    if not isinstance(document, dict):
        raise ValueError("cloc output is not a JSON object")

    report = ClocReport()
    for key, value in document.items():
        if key == HEADER_KEY:
            if isinstance(value, dict) and "cloc_version" in value:
                report.header = f"cloc version {value['cloc_version']}"
            continue
        if key == SUMMARY_KEY or not isinstance(value, dict):
            continue

        report.languages.append(
            LanguageCount(
                language=key,
                files=_count(value, "nFiles"),
                blank=_count(value, "blank"),
                comment=_count(value, "comment"),
                code=_count(value, "code"),
            )
        )
    return report


def _count(entry: dict[str, Any], key: str) -> int:
    value = entry.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return 0
    return value


__all__ = ["ClocRunner", "parse_cloc_json"]

"""Configuration loading for ghcount.

Two documents are involved:

* Run settings (``CounterConfig``). Sources are merged in priority order:
    1. Defaults (defined in CounterConfig)
    2. Global config (~/.ghcount.toml)
    3. Project config (./ghcount.toml)
    4. Explicit config file (``--config``)
    5. Environment variables (GHCOUNT_* prefix)
    6. Direct overrides (kwargs)

* The team document (``teams.json``), which names the repositories to count
  and which team owns each of them. See ``load_teams_config``.

Example:
    >>> config = load_config(clone_depth=5)
    >>> config.clone_depth
    5
"""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union, get_type_hints

from .exceptions import ConfigParseError, ConfigReadError, InvalidConfigError
from .models import Team, TeamsConfig

ENV_PREFIX = "GHCOUNT_"


@dataclass(frozen=True)
class CounterConfig:
    """Settings for the collaborators around the counting core.

    Attributes:
        GitHub API:
            api_base_url: REST API root
            user_agent: User-Agent header sent with every request
            api_timeout_seconds: Per-request timeout for metadata lookups

        Working tree:
            work_dir: The single temporary clone location, reused and
                force-removed around every repository
            clone_depth: ``git clone --depth``
            git_binary: git executable

        cloc (delegated counting):
            cloc_binary: cloc executable
            exclude_dirs: Directories excluded from both cloc passes
            test_dir_pattern: ``--not-match-d`` regex for the production pass
            test_file_pattern: ``--not-match-f`` regex for the production pass
    """

    # GitHub API
    api_base_url: str = "https://api.github.com"
    user_agent: str = "ghcount"
    api_timeout_seconds: float = 30.0

    # Working tree
    work_dir: str = field(
        default_factory=lambda: os.path.join(tempfile.gettempdir(), "ghcount_worktree")
    )
    clone_depth: int = 1
    git_binary: str = "git"

    # cloc
    cloc_binary: str = "cloc"
    exclude_dirs: list[str] = field(
        default_factory=lambda: [".git", "node_modules", "target", "build", "dist", "vendor"]
    )
    test_dir_pattern: str = (
        "(test|tests|spec|specs|__tests__|src/test|src/test/java|test/java"
        "|src/integrationTest|src/testFixtures|cypress|e2e)"
    )
    test_file_pattern: str = r"\.(test|spec)\.(js|ts|jsx|tsx)$"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.api_base_url.startswith(("http://", "https://")):
            raise InvalidConfigError("api_base_url", self.api_base_url, "must be an http(s) URL")
        if self.api_timeout_seconds <= 0:
            raise InvalidConfigError(
                "api_timeout_seconds", self.api_timeout_seconds, "must be positive"
            )
        if self.clone_depth < 1:
            raise InvalidConfigError("clone_depth", self.clone_depth, "must be at least 1")
        if not self.work_dir:
            raise InvalidConfigError("work_dir", self.work_dir, "must not be empty")
        for name in ("git_binary", "cloc_binary", "test_dir_pattern", "test_file_pattern"):
            if not getattr(self, name):
                raise InvalidConfigError(name, getattr(self, name), "must not be empty")

    @property
    def work_path(self) -> Path:
        return Path(self.work_dir)


def load_config(config_file: Optional[Path] = None, **overrides) -> CounterConfig:
    """Load run settings with auto-discovery and merging.

    Args:
        config_file: Optional explicit TOML file
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated CounterConfig instance

    Raises:
        ConfigReadError: If an explicit config file is missing or unreadable
        ConfigParseError: If a TOML file is malformed
        InvalidConfigError: If a key is unknown or a value fails validation
    """
    merged: dict[str, Any] = {}

    for discovered in (Path.home() / ".ghcount.toml", Path.cwd() / "ghcount.toml"):
        if discovered.exists():
            merged.update(_load_toml_file(discovered))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigReadError(config_file, "file not found")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(merged) - set(CounterConfig.__dataclass_fields__))
    if unknown:
        raise InvalidConfigError(unknown[0], merged[unknown[0]], "unknown setting")

    return CounterConfig(**_check_types(merged))


def _check_types(merged: dict[str, Any]) -> dict[str, Any]:
    """Check merged values against the CounterConfig field types.

    TOML integers are accepted for float fields and widened. Booleans are
    never accepted as numbers.

    Raises:
        InvalidConfigError: If a value does not have its field's type
    """
    type_hints = get_type_hints(CounterConfig)
    checked: dict[str, Any] = {}

    for key, value in merged.items():
        type_hint = type_hints[key]
        origin = getattr(type_hint, "__origin__", None)

        if origin is list:
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise InvalidConfigError(key, value, "expected a list of strings")
        elif type_hint is float:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidConfigError(key, value, "expected a number")
            value = float(value)
        elif type_hint is int:
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigError(key, value, "expected an integer")
        elif type_hint is str:
            if not isinstance(value, str):
                raise InvalidConfigError(key, value, "expected a string")

        checked[key] = value

    return checked


def _load_env_vars() -> dict[str, Any]:
    """Load settings from GHCOUNT_* environment variables.

    Every scalar CounterConfig field maps to ``GHCOUNT_<FIELD>``, for example
    GHCOUNT_WORK_DIR, GHCOUNT_CLONE_DEPTH or GHCOUNT_CLOC_BINARY. List
    fields (exclude_dirs) are TOML-only.

    Returns:
        Dict of field_name -> parsed_value for any GHCOUNT_* vars found.
    """
    type_hints = get_type_hints(CounterConfig)
    result: dict[str, Any] = {}

    for field_name in CounterConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment string to the field's type.

    Returns None for types that cannot come from the environment.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)
    if origin is list or type_hint is list:
        return None

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if origin is Union and type(None) in args:
        type_hint = next(t for t in args if t is not type(None))

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load a TOML settings file.

    Raises:
        ConfigReadError: If the file cannot be read
        ConfigParseError: If the TOML is malformed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        # Python 3.9-3.10
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise ConfigReadError(path, str(e))
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(path, str(e))


# ── Team document ──────────────────────────────────────────────────


def load_teams_config(path: Union[str, Path]) -> TeamsConfig:
    """Load and validate the team document.

    Expected shape::

        {"teams": [{"name": "backend",
                    "organization": "myorg",
                    "repositories": ["api", "database"]}]}

    Raises:
        ConfigReadError: If the file cannot be read
        ConfigParseError: If it is not valid JSON or not shaped as above
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigReadError(path, e.strerror or str(e))

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigParseError(path, str(e))

    return _parse_teams(document, path)


def _parse_teams(document: Any, path: Path) -> TeamsConfig:
    if not isinstance(document, dict) or not isinstance(document.get("teams"), list):
        raise ConfigParseError(path, "expected an object with a 'teams' list")

    teams = []
    for index, entry in enumerate(document["teams"]):
        if not isinstance(entry, dict):
            raise ConfigParseError(path, f"teams[{index}] must be an object")

        for key in ("name", "organization"):
            if not isinstance(entry.get(key), str):
                raise ConfigParseError(path, f"teams[{index}].{key} must be a string")

        repositories = entry.get("repositories")
        if not isinstance(repositories, list) or not all(isinstance(r, str) for r in repositories):
            raise ConfigParseError(path, f"teams[{index}].repositories must be a list of strings")

        teams.append(
            Team(
                name=entry["name"],
                organization=entry["organization"],
                repositories=tuple(repositories),
            )
        )

    return TeamsConfig(teams=tuple(teams))


__all__ = [
    "CounterConfig",
    "load_config",
    "load_teams_config",
]

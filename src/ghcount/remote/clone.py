"""Shallow clones into a single reused working tree."""

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from ..config import CounterConfig
from ..exceptions import CloneAuthError, CloneError
from ..logging_config import get_logger
from ..models import Repository

logger = get_logger(__name__)

GITHUB_PREFIX = "https://github.com/"

# git stderr fragments that mean the credentials were rejected
AUTH_FAILURE_MARKERS = ("Authentication failed", "access denied")


@dataclass(frozen=True)
class WorkingTree:
    """The one temporary clone location, reused for every repository."""

    path: Path

    def reset(self) -> None:
        """Remove the tree if present. Failures are ignored."""
        shutil.rmtree(self.path, ignore_errors=True)


def authenticated_url(clone_url: str, token: str) -> str:
    """Embed ``token`` into GitHub https clone URLs; other URLs pass through."""
    if clone_url.startswith(GITHUB_PREFIX):
        return f"https://{token}@github.com/" + clone_url[len(GITHUB_PREFIX):]
    return clone_url


def clone_repository(
    repo: Repository, token: str, tree: WorkingTree, config: CounterConfig
) -> Path:
    """``git clone --depth N`` ``repo`` into ``tree``.

    The tree is reset first, so a leftover clone from an earlier repository
    never leaks into this one.

    Returns:
        The path of the fresh clone

    Raises:
        CloneAuthError: If git reports rejected credentials
        CloneError: If git is missing or the clone fails for any other reason
    """
    tree.reset()
    args = [
        config.git_binary,
        "clone",
        "--depth",
        str(config.clone_depth),
        authenticated_url(repo.clone_url, token),
        str(tree.path),
    ]
    logger.debug(f"Cloning {repo.full_name} into {tree.path}")

    try:
        result = subprocess.run(args, capture_output=True, text=True)
    except OSError as e:
        raise CloneError(repo.full_name, f"cannot run {config.git_binary}: {e}") from e

    if result.returncode != 0:
        stderr = _redact(result.stderr.strip(), token)
        if any(marker in stderr for marker in AUTH_FAILURE_MARKERS):
            raise CloneAuthError(repo.full_name, stderr)
        raise CloneError(repo.full_name, stderr or f"exit status {result.returncode}")

    return tree.path


def _redact(text: str, token: str) -> str:
    return text.replace(token, "***") if token else text

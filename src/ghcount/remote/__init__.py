"""Remote collaborators: the GitHub API and git clones."""

from .clone import WorkingTree, authenticated_url, clone_repository
from .github import GitHubClient

__all__ = [
    "GitHubClient",
    "WorkingTree",
    "authenticated_url",
    "clone_repository",
]

"""Shared test fixtures for ghcount tests."""

import json
import os

import pytest

from ghcount.models import Repository, Team, TeamsConfig


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep user config files and GHCOUNT_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("GHCOUNT_"):
            monkeypatch.delenv(key)
    for key in ("GITHUB_TOKEN", "TEAMS_CONFIG", "DEBUG_MODE", "USE_CLOC", "LANGUAGES"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def teams_config():
    """Two teams in one organization; ``shared`` belongs to both."""
    return TeamsConfig(
        teams=(
            Team(name="backend", organization="myorg", repositories=("api", "shared")),
            Team(name="frontend", organization="myorg", repositories=("web", "shared")),
        )
    )


@pytest.fixture
def make_repo():
    def _make(name, language="Rust", organization="myorg"):
        return Repository(
            name=name,
            full_name=f"{organization}/{name}",
            clone_url=f"https://github.com/{organization}/{name}.git",
            language=language,
        )

    return _make


@pytest.fixture
def cloc_json():
    """Render a cloc --json document from {language: (files, blank, comment, code)}."""

    def _render(languages, version="1.98"):
        document = {"header": {"cloc_version": version, "n_files": 0}}
        total = [0, 0, 0, 0]
        for language, (files, blank, comment, code) in languages.items():
            document[language] = {"nFiles": files, "blank": blank, "comment": comment, "code": code}
            total = [a + b for a, b in zip(total, (files, blank, comment, code))]
        document["SUM"] = dict(zip(("nFiles", "blank", "comment", "code"), total))
        return json.dumps(document)

    return _render

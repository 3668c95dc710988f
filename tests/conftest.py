"""
Shared fixtures and collaborator fakes.
"""

from pathlib import Path

import httpx
import pytest

from oss_trust_score.errors import GitCommandError
from oss_trust_score.metrics.base import Collaborators, Subject


class FakeGitHub:
    """GitHub client stub answering from a dict of endpoint -> JSON."""

    def __init__(self, responses: dict | None = None, error: Exception | None = None):
        self.responses = responses or {}
        self.error = error
        self.calls: list[str] = []

    def get(self, endpoint: str):
        self.calls.append(endpoint)
        if self.error is not None:
            raise self.error
        if endpoint not in self.responses:
            request = httpx.Request("GET", f"https://api.github.com{endpoint}")
            raise httpx.HTTPStatusError(
                "404 Not Found",
                request=request,
                response=httpx.Response(404, request=request),
            )
        return self.responses[endpoint]


class FakeGit:
    """Git client stub that writes fixture files instead of cloning."""

    def __init__(self, files: dict[str, str] | None = None, fail: bool = False):
        self.files = files or {}
        self.fail = fail
        self.initialized: list[Path] = []
        self.materialized: list[tuple[str, Path]] = []

    def initialize_empty(self, destination: Path) -> None:
        self.initialized.append(destination)

    def materialize(self, url: str, destination: Path) -> None:
        self.materialized.append((url, destination))
        if self.fail:
            raise GitCommandError(["git", "clone", url], 128, "repository not found")
        for name, content in self.files.items():
            (destination / name).write_text(content, encoding="utf-8")


@pytest.fixture
def subject() -> Subject:
    return Subject.from_url("https://github.com/owner/repo")


@pytest.fixture
def fake_github():
    """Factory for FakeGitHub stubs."""
    return FakeGitHub


@pytest.fixture
def fake_git():
    """Factory for FakeGit stubs."""
    return FakeGit


@pytest.fixture
def make_collaborators():
    """Build Collaborators from fakes."""

    def _make(github: FakeGitHub | None = None, git: FakeGit | None = None):
        return Collaborators(github=github or FakeGitHub(), git=git or FakeGit())

    return _make


@pytest.fixture(autouse=True)
def _quiet_environment(monkeypatch):
    """Keep tests independent of the developer's credentials and log settings."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("LOG_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)

"""
Shared metric types and the timed metric runner.
"""

import logging
import time
from typing import Callable, NamedTuple

from oss_trust_score.errors import InvalidRepositoryURL
from oss_trust_score.vcs.git import GitClient
from oss_trust_score.vcs.github import GitHubClient

logger = logging.getLogger(__name__)


class Subject(NamedTuple):
    """A resolved package identity."""

    owner: str
    repo_name: str
    source_url: str

    @classmethod
    def from_url(cls, url: str) -> "Subject":
        """
        Build a Subject from a canonical repository URL.

        Owner and repository are path segments 3 and 4 of the ``/``-split
        URL (``https://github.com/<owner>/<repo>``).

        Raises:
            InvalidRepositoryURL: If either segment is missing or empty.
        """
        parts = url.split("/")
        if len(parts) < 5 or not parts[3] or not parts[4]:
            raise InvalidRepositoryURL(url)
        return cls(owner=parts[3], repo_name=parts[4], source_url=url)

    @property
    def api_path(self) -> str:
        """GitHub REST path of the repository."""
        return f"/repos/{self.owner}/{self.repo_name}"


class MetricResult(NamedTuple):
    """The outcome of one metric for one Subject."""

    name: str
    score: float
    elapsed_seconds: float


class Collaborators(NamedTuple):
    """External services available to metric checks."""

    github: GitHubClient
    git: GitClient


class MetricSpec(NamedTuple):
    """Specification for a metric check.

    ``on_error`` turns a failure into a score. Metrics without it let
    exceptions propagate to the caller.
    """

    name: str
    checker: Callable[[Subject, Collaborators], float]
    on_error: Callable[[Exception], float] | None = None
    error_log: str | None = None


def compute_metric(
    spec: MetricSpec, subject: Subject, collaborators: Collaborators
) -> MetricResult:
    """
    Run a metric check and measure its wall-clock time.

    Raises:
        Exception: Whatever the checker raised, if the spec has no on_error.
    """
    start = time.perf_counter()
    try:
        score = spec.checker(subject, collaborators)
    except Exception as e:
        if spec.on_error is None:
            logger.error("%s failed for %s: %s", spec.name, subject.source_url, e)
            raise
        if spec.error_log:
            logger.error(spec.error_log.format(error=e))
        else:
            logger.error("%s check incomplete: %s", spec.name, e)
        score = spec.on_error(e)
    elapsed = time.perf_counter() - start
    logger.info("%s score for %s: %s", spec.name, subject.source_url, score)
    return MetricResult(name=spec.name, score=score, elapsed_seconds=elapsed)

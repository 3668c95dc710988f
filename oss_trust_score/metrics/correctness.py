"""Correctness (engineering hygiene) metric."""

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from oss_trust_score.metrics.base import Collaborators, MetricSpec, Subject
from oss_trust_score.vcs.git import scratch_directory
from oss_trust_score.vcs.github import GitHubClient

logger = logging.getLogger(__name__)

MANIFEST_FILE = "package.json"
README_FILE = "README.md"

# Repositories updated after this date count as maintained
ACTIVITY_REFERENCE_DATE = datetime(2024, 4, 1, tzinfo=timezone.utc)

_NPM_DOWNLOADS_BADGE = re.compile(
    r"\[!\[.*NPM Downloads.*\]\[npm-downloads\]\]\s?\[npmtrends-url\]"
)

_SCRIPT_POINTS = {
    "build": 0.025,
    "test": 0.05,
    "lint": 0.025,
    "prettier": 0.025,
}


def score_manifest(repo_path: Path) -> float:
    """
    Score package.json hygiene.

    - devDependencies: +0.025
    - dependencies: +0.025
    - build / lint / prettier scripts: +0.025 each
    - test script: +0.05
    """
    manifest_path = repo_path / MANIFEST_FILE
    if not manifest_path.is_file():
        return 0.0

    manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    score = 0.0
    if manifest.get("devDependencies") is not None:
        score += 0.025
    if manifest.get("dependencies") is not None:
        score += 0.025

    scripts = manifest.get("scripts") or {}
    for script, points in _SCRIPT_POINTS.items():
        if scripts.get(script):
            score += points
    return score


def score_readme(repo_path: Path) -> float:
    """Score README presence (+0.05) and an npm downloads badge (+0.3)."""
    readme_path = repo_path / README_FILE
    if not readme_path.is_file():
        return 0.0

    score = 0.05
    content = readme_path.read_text(encoding="utf-8", errors="replace")
    if _NPM_DOWNLOADS_BADGE.search(content):
        score += 0.3
    return score


def score_activity(repo_data: dict[str, Any]) -> float:
    """
    Score repository activity and popularity from GitHub metadata.

    - updated after 2024-04-01: +0.15
    - more than 1000 forks: +0.2
    - at most 50 open issues: +0.1
    - 10k+ stars: +0.2, and 50k+ stars: +0.4 more
    """
    score = 0.0
    updated_at = repo_data.get("updated_at")
    if updated_at:
        last_update = datetime.fromisoformat(updated_at.replace("Z", "+00:00"))
        if last_update > ACTIVITY_REFERENCE_DATE:
            score += 0.15

    stars = repo_data.get("stargazers_count", 0)
    if repo_data.get("forks_count", 0) > 1000:
        score += 0.2
    if repo_data.get("open_issues_count", 0) <= 50:
        score += 0.1
    if stars >= 10_000:
        score += 0.2
    if stars >= 50_000:
        score += 0.4
    return score


def check_correctness(
    repo_path: Path, github: GitHubClient, subject: Subject
) -> float:
    """
    Combine manifest, README and activity signals, capped at 1.0.

    A working tree with neither package.json nor README.md scores 0 and the
    remaining checks are skipped.
    """
    has_manifest = (repo_path / MANIFEST_FILE).exists()
    has_readme = (repo_path / README_FILE).exists()
    if not has_manifest and not has_readme:
        logger.info("Neither package.json nor README.md exists in the repository.")
        return 0.0

    score = score_manifest(repo_path)
    score += score_readme(repo_path)
    score += score_activity(github.get(subject.api_path))
    return min(score, 1.0)


def _check(subject: Subject, collaborators: Collaborators) -> float:
    with scratch_directory(prefix="correctness-") as repo_path:
        logger.info("Cloning repository from %s", subject.source_url)
        collaborators.git.materialize(subject.source_url, repo_path)
        return check_correctness(repo_path, collaborators.github, subject)


def _on_error(error: Exception) -> float:
    return 0.0


METRIC = MetricSpec(
    name="Correctness",
    checker=_check,
    on_error=_on_error,
    error_log="Error checking correctness: {error}",
)

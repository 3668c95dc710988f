"""Responsive maintainer metric."""

import logging
from datetime import datetime, timezone
from typing import Any, NamedTuple

from oss_trust_score.metrics.base import Collaborators, MetricSpec, Subject
from oss_trust_score.vcs.github import GitHubClient

logger = logging.getLogger(__name__)

ITEM_SAMPLE = 100
DAYS_PER_YEAR = 365
SECONDS_PER_DAY = 24 * 60 * 60

ISSUE_WEIGHT = 0.4
PR_WEIGHT = 0.4
RECENCY_WEIGHT = 0.2


class IssueOrPR(NamedTuple):
    created_at: datetime
    closed_at: datetime | None
    author_is_automated: bool


def _parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _to_item(raw: dict[str, Any]) -> IssueOrPR:
    closed_at = raw.get("closed_at")
    user = raw.get("user") or {}
    return IssueOrPR(
        created_at=_parse_timestamp(raw["created_at"]),
        closed_at=_parse_timestamp(closed_at) if closed_at else None,
        author_is_automated=user.get("type") == "Bot",
    )


def fetch_open_items(
    github: GitHubClient, subject: Subject
) -> tuple[list[IssueOrPR], list[IssueOrPR]]:
    """Fetch open issues and open pull requests not authored by bots."""
    issues = github.get(
        f"{subject.api_path}/issues?state=open&per_page={ITEM_SAMPLE}"
    )
    pulls = github.get(f"{subject.api_path}/pulls?state=open&per_page={ITEM_SAMPLE}")
    open_issues = [_to_item(raw) for raw in issues]
    open_prs = [
        item for item in (_to_item(raw) for raw in pulls) if not item.author_is_automated
    ]
    return open_issues, open_prs


def fetch_last_commit_date(github: GitHubClient, repo_data: dict[str, Any]) -> datetime:
    """Fetch the committer date of the most recent commit."""
    commits = github.get(f"/repos/{repo_data['full_name']}/commits")
    return _parse_timestamp(commits[0]["commit"]["committer"]["date"])


def _age_in_days(moment: datetime, now: datetime) -> float:
    return (now - moment).total_seconds() / SECONDS_PER_DAY


def calculate_age_score(items: list[IssueOrPR], now: datetime | None = None) -> float:
    """
    Score the mean age of open items; an empty set scores 1.

    A mean age of a year or more scores 0.
    """
    if not items:
        return 1.0
    now = now or datetime.now(timezone.utc)
    mean_age = sum(_age_in_days(item.created_at, now) for item in items) / len(items)
    return max(1 - mean_age / DAYS_PER_YEAR, 0.0)


def calculate_recency_score(
    last_commit: datetime, now: datetime | None = None
) -> float:
    """Score the time since the last commit; a year or more scores 0."""
    now = now or datetime.now(timezone.utc)
    return max(1 - _age_in_days(last_commit, now) / DAYS_PER_YEAR, 0.0)


def calculate_responsiveness(
    open_issues: list[IssueOrPR],
    open_prs: list[IssueOrPR],
    last_commit: datetime,
    now: datetime | None = None,
) -> float:
    """Combine issue age, PR age and commit recency (0.4 / 0.4 / 0.2)."""
    now = now or datetime.now(timezone.utc)
    issue_score = calculate_age_score(open_issues, now)
    pr_score = calculate_age_score(open_prs, now)
    recency_score = calculate_recency_score(last_commit, now)
    return (
        ISSUE_WEIGHT * issue_score
        + PR_WEIGHT * pr_score
        + RECENCY_WEIGHT * recency_score
    )


def _check(subject: Subject, collaborators: Collaborators) -> float:
    github = collaborators.github
    repo_data = github.get(subject.api_path)
    open_issues, open_prs = fetch_open_items(github, subject)
    last_commit = fetch_last_commit_date(github, repo_data)
    return calculate_responsiveness(open_issues, open_prs, last_commit)


def _on_error(error: Exception) -> float:
    return 0.0


METRIC = MetricSpec(
    name="ResponsiveMaintainer",
    checker=_check,
    on_error=_on_error,
    error_log="Error calculating responsiveness score: {error}",
)

"""Bus factor (contributor concentration) metric."""

import logging
from typing import NamedTuple

from oss_trust_score.metrics.base import Collaborators, MetricSpec, Subject
from oss_trust_score.vcs.github import GitHubClient

logger = logging.getLogger(__name__)

CONTRIBUTOR_SAMPLE = 30
# A contributor with this many times the commits of the next one marks the
# end of the core maintainer group.
DROP_OFF_RATIO = 3.8
# Share of the core group's contributions that must be covered.
COVERAGE_SHARE = 0.6


class Contributor(NamedTuple):
    identity: str
    contribution_count: int


def fetch_contributors(github: GitHubClient, subject: Subject) -> list[Contributor]:
    """Fetch up to 30 contributors with their contribution counts."""
    endpoint = f"{subject.api_path}/contributors?per_page={CONTRIBUTOR_SAMPLE}"
    response = github.get(endpoint) or []
    return [
        Contributor(
            identity=item.get("login") or item.get("name") or "unknown",
            contribution_count=int(item.get("contributions", 0)),
        )
        for item in response
    ]


def _is_drop_off(current: int, following: int) -> bool:
    if following == 0:
        return current > 0
    return current / following >= DROP_OFF_RATIO


def calculate_bus_factor(contributors: list[Contributor]) -> float:
    """
    Score how widely the work is spread across the core contributors.

    1. Sort contributors by contribution count, highest first.
    2. The core group runs from the top down to (and including) the first
       contributor with at least 3.8x the contributions of the next one.
    3. Count how many people from the top are needed to cover 60% of the
       core group's contributions.
    4. Score = 1 - people / core group size.

    Zero or one contributor is a single point of failure and scores 0.
    """
    if len(contributors) <= 1:
        return 0.0

    ranked = sorted(contributors, key=lambda c: c.contribution_count, reverse=True)

    total_contributions = 0
    critical_contributors = 0
    for index, current in enumerate(ranked):
        total_contributions += current.contribution_count
        critical_contributors += 1
        if index + 1 < len(ranked) and _is_drop_off(
            current.contribution_count, ranked[index + 1].contribution_count
        ):
            break

    target = total_contributions * COVERAGE_SHARE

    cumulative = 0
    bus_people = 0
    for contributor in ranked:
        cumulative += contributor.contribution_count
        bus_people += 1
        if cumulative >= target:
            break

    logger.debug(
        "Critical contributors: %d, total contributions: %d, bus people: %d",
        critical_contributors,
        total_contributions,
        bus_people,
    )
    return 1 - (bus_people / critical_contributors)


def _check(subject: Subject, collaborators: Collaborators) -> float:
    contributors = fetch_contributors(collaborators.github, subject)
    logger.info("Contributors: %d", len(contributors))
    return calculate_bus_factor(contributors)


METRIC = MetricSpec(
    name="BusFactor",
    checker=_check,
)

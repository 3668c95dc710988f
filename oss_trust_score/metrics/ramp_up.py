"""Ramp-up (onboarding friction) metric."""

import base64
import binascii
import logging
import re

import httpx

from oss_trust_score.metrics.base import Collaborators, MetricSpec, Subject
from oss_trust_score.vcs.github import GitHubClient

logger = logging.getLogger(__name__)

README_FILE = "README.md"
MIN_README_LINES = 50
_LINK_PATTERN = re.compile(r"https?://\S+")


def fetch_readme(github: GitHubClient, subject: Subject) -> str | None:
    """
    Fetch and decode the repository README.

    Returns:
        The README text, or None when it is missing or cannot be decoded.
    """
    endpoint = f"{subject.api_path}/contents/{README_FILE}"
    try:
        response = github.get(endpoint)
        return base64.b64decode(response["content"]).decode("utf-8")
    except (
        httpx.HTTPError,
        KeyError,
        TypeError,
        binascii.Error,
        UnicodeDecodeError,
    ) as e:
        logger.info("README.md not found: %s", e)
        return None


def has_documentation_link(readme: str | None) -> bool:
    """Check whether the README links to external documentation."""
    if not readme:
        return False
    return _LINK_PATTERN.search(readme) is not None


def calculate_ramp_up(readme: str | None) -> float:
    """
    Score how easy it is to get started with the project.

    Scoring:
    - README present: +0.5
    - README shorter than 50 lines: -0.4
    - README contains an http(s) link: +0.5

    The score never drops below 0.
    """
    score = 0.0
    if readme:
        score += 0.5
        if len(readme.split("\n")) < MIN_README_LINES:
            score -= 0.4
        if has_documentation_link(readme):
            score += 0.5
    return max(0.0, score)


def _check(subject: Subject, collaborators: Collaborators) -> float:
    return calculate_ramp_up(fetch_readme(collaborators.github, subject))


METRIC = MetricSpec(
    name="RampUp",
    checker=_check,
)

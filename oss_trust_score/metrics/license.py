"""License compatibility metric."""

import logging
from pathlib import Path

from oss_trust_score.config import get_compatible_licenses
from oss_trust_score.metrics.base import Collaborators, MetricSpec, Subject
from oss_trust_score.vcs.git import scratch_directory

logger = logging.getLogger(__name__)

LICENSE_FILES = [
    "LICENSE",
    "license",
    "LICENSE.txt",
    "license.txt",
    "LICENSE.md",
    "license.md",
]
README_FILES = [
    "README",
    "README.md",
    "README.txt",
]


def find_compatible_license(
    repo_path: Path, candidates: list[str], compatible_licenses: list[str]
) -> str | None:
    """
    Return the first compatible license named in one of the candidate files.

    Files are checked in order; identifiers match as literal substrings.
    """
    for filename in candidates:
        file_path = repo_path / filename
        if not file_path.is_file():
            continue
        content = file_path.read_text(encoding="utf-8", errors="replace")
        for license_name in compatible_licenses:
            if license_name in content:
                return license_name
    return None


def check_license_compatibility(
    repo_path: Path, compatible_licenses: list[str] | None = None
) -> float:
    """
    Score 1 if the working tree declares a compatible license, else 0.

    License files are searched first, then README files.
    """
    if compatible_licenses is None:
        compatible_licenses = get_compatible_licenses()

    match = find_compatible_license(repo_path, LICENSE_FILES, compatible_licenses)
    if match:
        logger.info("License is compatible: %s", match)
        return 1.0

    match = find_compatible_license(repo_path, README_FILES, compatible_licenses)
    if match:
        logger.info("License found in README: %s", match)
        return 1.0

    return 0.0


def _check(subject: Subject, collaborators: Collaborators) -> float:
    with scratch_directory(prefix="license-") as repo_path:
        logger.info("Initializing repository in %s", repo_path)
        collaborators.git.initialize_empty(repo_path)
        collaborators.git.materialize(subject.source_url, repo_path)
        logger.info("Repository cloned")
        return check_license_compatibility(repo_path)


def _on_error(error: Exception) -> float:
    return 0.0


METRIC = MetricSpec(
    name="License",
    checker=_check,
    on_error=_on_error,
    error_log="Error checking license compatibility: {error}",
)

"""
Reference resolution: turns an input line into a canonical repository URL.
"""

import logging
import re

from oss_trust_score.errors import InvalidReferenceKind
from oss_trust_score.resolvers.npm import NpmRegistryClient, clean_repository_url

logger = logging.getLogger(__name__)

GITHUB_URL_PATTERN = re.compile(r"^https://github\.com/.*")
NPM_URL_PATTERN = re.compile(r"^https://www\.npmjs\.com/package(/.+)$")

__all__ = [
    "GITHUB_URL_PATTERN",
    "NPM_URL_PATTERN",
    "NpmRegistryClient",
    "ReferenceResolver",
    "clean_repository_url",
]


class ReferenceResolver:
    """Classifies references and resolves npm packages to their repository."""

    def __init__(self, registry: NpmRegistryClient | None = None):
        self.registry = registry or NpmRegistryClient()

    def resolve(self, reference: str) -> str:
        """
        Resolve a package reference to a canonical repository URL.

        GitHub repository URLs are already canonical and returned unchanged.
        npm package pages are looked up in the registry.

        Raises:
            InvalidReferenceKind: If the reference is neither shape.
            RepositoryURLNotFound: If the npm manifest has no repository URL.
        """
        if GITHUB_URL_PATTERN.match(reference):
            logger.info("GitHub URL detected: %s", reference)
            return reference

        npm_match = NPM_URL_PATTERN.match(reference)
        if npm_match:
            logger.info("npm URL detected: %s", reference)
            package_endpoint = npm_match.group(1)
            repo_url = self.registry.get_repository_url(package_endpoint)
            logger.info("npm package resolved to repository: %s", repo_url)
            return repo_url

        raise InvalidReferenceKind(reference)

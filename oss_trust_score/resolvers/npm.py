"""
npm registry collaborator.
"""

import logging
import re

from oss_trust_score.errors import RepositoryURLNotFound
from oss_trust_score.http_client import _get_http_client

logger = logging.getLogger(__name__)

NPM_REGISTRY_API = "https://registry.npmjs.org"

_GIT_PLUS_PREFIX = re.compile(r"^git\+")
_DOT_GIT_SUFFIX = re.compile(r"\.git$")


def clean_repository_url(url: str) -> str:
    """Strip a leading ``git+`` and a trailing ``.git`` from a repository URL."""
    return _DOT_GIT_SUFFIX.sub("", _GIT_PLUS_PREFIX.sub("", url.strip()))


class NpmRegistryClient:
    """Looks up package manifests on the npm registry."""

    def __init__(self, base_url: str = NPM_REGISTRY_API):
        self.base_url = base_url.rstrip("/")

    def get_repository_url(self, package_endpoint: str) -> str:
        """
        Resolve a package to the repository URL declared in its manifest.

        Args:
            package_endpoint: Registry path of the package, e.g. ``/express``
                or ``/@babel/core``.

        Returns:
            The declared repository URL with ``git+`` and ``.git`` removed.

        Raises:
            RepositoryURLNotFound: If the manifest has no repository URL.
            httpx.HTTPStatusError: If the registry answers with an error.
        """
        url = f"{self.base_url}{package_endpoint}"
        logger.info("npm registry URL: %s", url)
        client = _get_http_client()
        response = client.get(url)
        response.raise_for_status()
        manifest = response.json()

        repository = manifest.get("repository") if isinstance(manifest, dict) else None
        if isinstance(repository, dict):
            repo_url = repository.get("url")
        else:
            # Shorthand form: "repository": "https://github.com/user/repo"
            repo_url = repository

        if not isinstance(repo_url, str) or not repo_url.strip():
            raise RepositoryURLNotFound(package_endpoint)

        return clean_repository_url(repo_url)

"""
GitHub REST collaborator for OSS Trust Score.

Metrics call ``GitHubClient.get`` with an API path such as
``/repos/{owner}/{repo}/contributors``. Transport and HTTP status errors are
not caught here; each metric decides whether they are fatal.
"""

import logging
from typing import Any

from oss_trust_score.config import get_github_token
from oss_trust_score.http_client import _get_http_client

logger = logging.getLogger(__name__)

GITHUB_REST_API = "https://api.github.com"


class GitHubClient:
    """Thin wrapper around the GitHub REST API."""

    def __init__(self, token: str | None = None, base_url: str = GITHUB_REST_API):
        """
        Initialize the client.

        Args:
            token: GitHub Personal Access Token. If not provided, reads from
                   the GITHUB_TOKEN environment variable. Anonymous access is
                   allowed but heavily rate limited.
            base_url: API root, without a trailing slash.
        """
        self.token = token if token is not None else get_github_token()
        self.base_url = base_url.rstrip("/")

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def get(self, endpoint: str) -> Any:
        """
        Perform a GET request against the API and return the decoded JSON.

        Raises:
            httpx.HTTPStatusError: If GitHub answers with an error status.
            httpx.RequestError: On transport failures.
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug("GET %s", url)
        client = _get_http_client()
        response = client.get(url, headers=self._headers())
        response.raise_for_status()
        return response.json()

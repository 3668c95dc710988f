"""
Pooled HTTP client shared by the GitHub and npm registry collaborators.

Every request identifies itself with an ``oss-trust-score/<version>``
User-Agent (GitHub rejects REST calls without one). The timeout comes from
``http_timeout_seconds`` in the project configuration.
"""

import logging

import httpx

from oss_trust_score import __version__
from oss_trust_score.config import get_http_timeout, get_verify_ssl

logger = logging.getLogger(__name__)

USER_AGENT = f"oss-trust-score/{__version__}"

_client: httpx.Client | None = None
_client_settings: tuple[bool, float] | None = None


def build_http_client(verify_ssl: bool, timeout: float) -> httpx.Client:
    """Create a client with the scorer's default headers and pool limits."""
    return httpx.Client(
        verify=verify_ssl,
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT},
        limits=httpx.Limits(max_connections=4, max_keepalive_connections=2),
    )


def _get_http_client() -> httpx.Client:
    """
    Return the shared client, rebuilding it when --insecure or the timeout
    setting no longer matches the one it was built with.
    """
    global _client, _client_settings
    settings = (get_verify_ssl(), get_http_timeout())

    if _client is not None and not _client.is_closed and _client_settings == settings:
        return _client

    close_http_client()
    logger.debug("Opening HTTP client (verify_ssl=%s, timeout=%ss)", *settings)
    _client = build_http_client(*settings)
    _client_settings = settings
    return _client


def close_http_client() -> None:
    """Release pooled connections; the next request opens a fresh client."""
    global _client, _client_settings
    if _client is not None and not _client.is_closed:
        _client.close()
    _client = None
    _client_settings = None

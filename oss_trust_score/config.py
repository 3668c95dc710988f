"""
Configuration management for OSS Trust Score.

Settings come from, in order of priority:
1. Explicit setters (used by the CLI)
2. Environment variables (a local .env file is loaded first)
3. .oss-trust-score.toml (local config)
4. pyproject.toml (project-level config)
"""

import os
import tomllib
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Configuration files are looked up relative to the working directory
PROJECT_ROOT = Path.cwd()

# Global configuration for SSL verification
# Default: True (verify SSL certificates)
# Can be set to False by CLI --insecure flag
VERIFY_SSL = True

DEFAULT_COMPATIBLE_LICENSES = ["LGPLv2.1", "MIT", "Apache-2.0"]
# Metric latencies are normalized against this ceiling (seconds)
DEFAULT_MAX_LATENCY = 5.0
DEFAULT_HTTP_TIMEOUT = 30.0

# Log verbosity levels understood by LOG_LEVEL
LOG_LEVEL_OFF = 0
LOG_LEVEL_INFO = 1
LOG_LEVEL_DEBUG = 2


def load_config_file(config_path: Path) -> dict:
    """Load a TOML configuration file."""
    if not config_path.exists():
        return {}
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except Exception as e:
        raise ValueError(f"Failed to load config from {config_path}: {e}") from e


def get_tool_config() -> dict:
    """
    Return the ``[tool.oss-trust-score]`` table.

    .oss-trust-score.toml wins over pyproject.toml; the tables are not merged.
    """
    for filename in (".oss-trust-score.toml", "pyproject.toml"):
        config_path = PROJECT_ROOT / filename
        if config_path.exists():
            section = (
                load_config_file(config_path)
                .get("tool", {})
                .get("oss-trust-score", {})
            )
            if section:
                return section
    return {}


def get_compatible_licenses() -> list[str]:
    """
    Get the license identifiers accepted by the License metric.

    Returns:
        List of license identifiers matched as literal substrings.
    """
    licenses = get_tool_config().get("compatible_licenses")
    if licenses:
        return [str(name) for name in licenses]
    return list(DEFAULT_COMPATIBLE_LICENSES)


def get_max_latency() -> float:
    """Get the latency ceiling (seconds) used for normalization."""
    value = get_tool_config().get("max_latency_seconds")
    if value is None:
        return DEFAULT_MAX_LATENCY
    max_latency = float(value)
    if max_latency <= 0:
        raise ValueError(f"max_latency_seconds must be positive, got {value}")
    return max_latency


def get_http_timeout() -> float:
    """Get the per-request timeout (seconds) for GitHub and npm calls."""
    value = get_tool_config().get("http_timeout_seconds")
    if value is None:
        return DEFAULT_HTTP_TIMEOUT
    timeout = float(value)
    if timeout <= 0:
        raise ValueError(f"http_timeout_seconds must be positive, got {value}")
    return timeout


def get_github_token() -> str | None:
    """Return the optional GitHub bearer credential."""
    token = os.getenv("GITHUB_TOKEN")
    return token or None


def get_log_file() -> Path | None:
    """Return the log destination from LOG_FILE, if set."""
    log_file = os.getenv("LOG_FILE")
    if not log_file:
        return None
    return Path(log_file).expanduser()


def get_log_level() -> int:
    """
    Get the log verbosity from LOG_LEVEL.

    Returns:
        0 (off), 1 (info) or 2 (debug). Missing or unparsable values are off.
    """
    raw_level = os.getenv("LOG_LEVEL", "0")
    try:
        level = int(raw_level)
    except ValueError:
        return LOG_LEVEL_OFF
    return max(level, LOG_LEVEL_OFF)


def set_verify_ssl(verify: bool) -> None:
    """
    Set the SSL verification setting globally.

    Args:
        verify: Whether to verify SSL certificates.
    """
    global VERIFY_SSL
    VERIFY_SSL = verify


def get_verify_ssl() -> bool:
    """
    Get the current SSL verification setting.

    Returns:
        Whether SSL verification is enabled.
    """
    return VERIFY_SSL

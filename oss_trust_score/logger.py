"""
Log sink for OSS Trust Score.

Modules log through ``logging.getLogger(__name__)``; this module attaches the
file handler described by LOG_FILE / LOG_LEVEL to the package logger.
"""

import logging
import time

from oss_trust_score.config import (
    LOG_LEVEL_DEBUG,
    LOG_LEVEL_INFO,
    get_log_file,
    get_log_level,
)

PACKAGE_LOGGER = "oss_trust_score"
# UTC ISO-8601 timestamps, e.g. 2026-10-18T23:03:00.123Z
LOG_FORMAT = "%(asctime)s.%(msecs)03dZ [%(levelname)s]: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_handler: logging.Handler | None = None


def _to_logging_level(level: int) -> int | None:
    if level >= LOG_LEVEL_DEBUG:
        return logging.DEBUG
    if level == LOG_LEVEL_INFO:
        return logging.INFO
    return None


def configure_logging() -> logging.Logger:
    """
    Configure the package logger from the environment.

    LOG_LEVEL 0 disables logging, 1 logs info and errors, 2 adds debug output.
    Records are appended to LOG_FILE; without it they are discarded.

    Returns:
        The configured package logger.
    """
    global _handler
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.propagate = False

    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()
        _handler = None

    level = _to_logging_level(get_log_level())
    log_file = get_log_file()

    if level is None or log_file is None:
        logger.disabled = True
        _handler = logging.NullHandler()
    else:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.disabled = False
        _handler = logging.FileHandler(log_file, encoding="utf-8")
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        _handler.setFormatter(formatter)

    logger.setLevel(level if level is not None else logging.CRITICAL)
    logger.addHandler(_handler)
    return logger

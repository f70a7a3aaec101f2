"""
Central configuration for toyrobot tunables and shared constants.
"""

import logging
import os

from toyrobot.utils.errors import ConfigError

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
TRACE_ENABLED = str(os.getenv("TOYROBOT_TRACE", "0")).lower() in ("1", "true", "yes", "on")

logger = logging.getLogger(__name__)

# Largest valid coordinate on each axis; 4 means a 5x5 grid (0..4 inclusive)
DEFAULT_TABLE_WIDTH: int = 4
DEFAULT_TABLE_HEIGHT: int = 4

LOG_LEVEL_DEFAULT: str = os.getenv("TOYROBOT_LOG_LEVEL", "WARNING").strip().upper()
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT: str = "%H:%M:%S"


def parse_dimension(raw: str | int, name: str = "dimension") -> int:
    """
    Parse a table dimension.

    Args:
        raw: Value from the environment or command line
        name: Label used in the error message

    Returns:
        The dimension as a non-negative integer

    Raises:
        ConfigError: If the value is not an integer or is negative
    """
    try:
        value = int(str(raw).strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{name} must be >= 0, got {value}")
    return value


def _env_dimension(env_name: str, default: int) -> int:
    raw = os.getenv(env_name)
    if raw is None or not raw.strip():
        return default
    try:
        return parse_dimension(raw, env_name)
    except ConfigError as e:
        logger.warning("Ignoring %s: %s", env_name, e)
        return default


# Table size (overridable by env and CLI)
TABLE_WIDTH: int = _env_dimension("TOYROBOT_TABLE_WIDTH", DEFAULT_TABLE_WIDTH)
TABLE_HEIGHT: int = _env_dimension("TOYROBOT_TABLE_HEIGHT", DEFAULT_TABLE_HEIGHT)

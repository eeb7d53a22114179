"""Environment-backed settings for the Lambda functions.

Settings are read on every call rather than at import time, so a
missing value fails only the invocation that needed it.
"""

from __future__ import annotations

import os
from typing import Optional

from hello_world.exceptions import ConfigurationError
from hello_world.utils.logging import get_logger

logger = get_logger(__name__)

COUNTRIES_API_URL = "COUNTRIES_API_URL"
COUNTRIES_SECRET_NAME = "COUNTRIES_SECRET_NAME"
STATES_DB_SECRET = "STATES_DB_SECRET"
PARTNER_API_TIMEOUT = "PARTNER_API_TIMEOUT"


def require_setting(name: str) -> str:
    """Return a required setting or raise ConfigurationError.

    Args:
        name: Environment variable name.

    Returns:
        The stripped, non-empty value.

    Raises:
        ConfigurationError: If the variable is unset or blank.
    """
    value = (os.getenv(name) or "").strip()
    if not value:
        raise ConfigurationError(name)
    return value


def optional_setting(name: str) -> Optional[str]:
    """Return a setting value, or None when it is unset or blank."""
    value = (os.getenv(name) or "").strip()
    return value or None


def get_partner_api_timeout() -> Optional[float]:
    """Return the partner API timeout in seconds, or None for no deadline."""
    raw = optional_setting(PARTNER_API_TIMEOUT)
    if raw is None:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {PARTNER_API_TIMEOUT}: {raw!r}")
        return None
    if timeout <= 0:
        logger.warning(f"Ignoring non-positive {PARTNER_API_TIMEOUT}: {raw!r}")
        return None
    return timeout

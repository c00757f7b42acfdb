"""Library configuration helpers."""

from __future__ import annotations

from .logging import LIBRARY_LOGGER, LOG_FORMAT, configure_logging
from .settings import (
    DEFAULT_OVERFLOW_POLICY,
    OVERFLOW_POLICY_ENV,
    ConfigurationError,
    LocalDateSettings,
    OverflowPolicy,
    get_settings,
    parse_overflow_policy,
)

__all__ = [
    "DEFAULT_OVERFLOW_POLICY",
    "LIBRARY_LOGGER",
    "LOG_FORMAT",
    "OVERFLOW_POLICY_ENV",
    "ConfigurationError",
    "LocalDateSettings",
    "OverflowPolicy",
    "configure_logging",
    "get_settings",
    "parse_overflow_policy",
]

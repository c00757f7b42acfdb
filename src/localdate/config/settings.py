"""Environment-driven settings for LocalDate arithmetic."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import StrEnum
from functools import cache
from typing import Final

OVERFLOW_POLICY_ENV: Final[str] = "LOCALDATE_OVERFLOW_POLICY"


class OverflowPolicy(StrEnum):
    """What to do when arithmetic leaves the finite day range."""

    SATURATE = "saturate"
    RAISE = "raise"


DEFAULT_OVERFLOW_POLICY: Final[OverflowPolicy] = OverflowPolicy.SATURATE


class ConfigurationError(RuntimeError):
    """Raised when environment configuration values are invalid."""


@dataclass(frozen=True, slots=True)
class LocalDateSettings:
    overflow_policy: OverflowPolicy = DEFAULT_OVERFLOW_POLICY

    @classmethod
    def from_environment(cls) -> LocalDateSettings:
        raw = os.getenv(OVERFLOW_POLICY_ENV)
        if raw is None or not raw.strip():
            return cls()
        return cls(overflow_policy=parse_overflow_policy(raw))


def parse_overflow_policy(raw: str) -> OverflowPolicy:
    normalized = raw.strip().lower()
    try:
        return OverflowPolicy(normalized)
    except ValueError as exc:
        choices = ", ".join(policy.value for policy in OverflowPolicy)
        raise ConfigurationError(
            f"Invalid {OVERFLOW_POLICY_ENV}={raw!r}; expected one of: {choices}"
        ) from exc


@cache
def get_settings() -> LocalDateSettings:
    """Return the process-wide settings, read once from the environment."""

    return LocalDateSettings.from_environment()

"""Conversion to the typed date structure handed to PostgreSQL drivers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from localdate.domain.local_date import LocalDate


class InfinityModifier(IntEnum):
    NEGATIVE_INFINITY = -1
    FINITE = 0
    INFINITY = 1


@dataclass(frozen=True, slots=True)
class PgDate:
    """A driver-side date: a validity flag, an instant and an infinity modifier.

    ``time`` is only meaningful when ``valid`` is True and the modifier is
    ``FINITE``.
    """

    valid: bool = False
    time: datetime | None = None
    infinity_modifier: InfinityModifier = InfinityModifier.FINITE


def to_pg_date(value: LocalDate) -> PgDate:
    if not value.valid:
        return PgDate()
    sign = value.infinity_sign()
    if sign != 0:
        return PgDate(valid=True, infinity_modifier=InfinityModifier(sign))
    return PgDate(
        valid=True,
        time=value.to_utc_midnight(),
        infinity_modifier=InfinityModifier.FINITE,
    )


__all__ = ["InfinityModifier", "PgDate", "to_pg_date"]

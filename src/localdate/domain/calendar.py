"""Proleptic Gregorian calendar arithmetic on epoch days.

Epoch days count whole days since 1970-01-01. The conversions below work for any
integer year (not just the 1..9999 range of ``datetime.date``) and normalise
out-of-range months and days by carrying them into neighbouring years/months.
"""

from __future__ import annotations

from typing import Final

DAYS_PER_ERA: Final[int] = 146_097
# Days from 0000-03-01 to 1970-01-01.
EPOCH_SHIFT: Final[int] = 719_468

_DAYS_IN_MONTH: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Return True when the triple names a real calendar day (no carrying)."""

    return 1 <= month <= 12 and 1 <= day <= days_in_month(year, month)


def normalize_month(year: int, month: int) -> tuple[int, int]:
    """Fold an arbitrary month number into ``1..12``, carrying into the year."""

    carry, index = divmod(month - 1, 12)
    return year + carry, index + 1


def days_from_civil(year: int, month: int, day: int) -> int:
    """Return the epoch day for a calendar triple, carrying overflowing components.

    The month is folded into the year first, then ``day - 1`` days are added to the
    first of that month, so ``(2023, 2, 31)`` lands on 2023-03-03 and ``(2024, 3, 0)``
    on 2024-02-29.
    """

    year, month = normalize_month(year, month)
    return _first_of_month(year, month) + (day - 1)


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of :func:`days_from_civil` for proper calendar dates."""

    shifted = days + EPOCH_SHIFT
    era, day_of_era = divmod(shifted, DAYS_PER_ERA)
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36_524 - day_of_era // 146_096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def _first_of_month(year: int, month: int) -> int:
    # Years start in March so that the leap day is the last day of the year.
    if month <= 2:
        year -= 1
    era, year_of_era = divmod(year, 400)
    shifted_month = month - 3 if month > 2 else month + 9
    day_of_year = (153 * shifted_month + 2) // 5
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * DAYS_PER_ERA + day_of_era - EPOCH_SHIFT


__all__ = [
    "civil_from_days",
    "days_from_civil",
    "days_in_month",
    "is_leap_year",
    "is_valid_date",
    "normalize_month",
]

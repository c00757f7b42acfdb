"""Public domain surface."""

from __future__ import annotations

from localdate.domain.calendar import (
    civil_from_days,
    days_from_civil,
    days_in_month,
    is_leap_year,
    is_valid_date,
)
from localdate.domain.clock import Clock, utcnow
from localdate.domain.errors import DateOverflowError, LocalDateError, ParseError, ScanTypeError
from localdate.domain.local_date import (
    INFINITY_DAYS,
    INFINITY_TOKEN,
    MAX_FINITE_DAYS,
    MIN_FINITE_DAYS,
    NEG_INFINITY_DAYS,
    NEG_INFINITY_TOKEN,
    ZERO_INSTANT,
    LocalDate,
    add_days,
    is_after,
    is_before,
    is_between,
    is_equal,
    new_local_date,
    parse,
    to_local_date,
    today,
)

__all__ = [
    "INFINITY_DAYS",
    "INFINITY_TOKEN",
    "MAX_FINITE_DAYS",
    "MIN_FINITE_DAYS",
    "NEG_INFINITY_DAYS",
    "NEG_INFINITY_TOKEN",
    "ZERO_INSTANT",
    "Clock",
    "DateOverflowError",
    "LocalDate",
    "LocalDateError",
    "ParseError",
    "ScanTypeError",
    "add_days",
    "civil_from_days",
    "days_from_civil",
    "days_in_month",
    "is_after",
    "is_before",
    "is_between",
    "is_equal",
    "is_leap_year",
    "is_valid_date",
    "new_local_date",
    "parse",
    "to_local_date",
    "today",
    "utcnow",
]

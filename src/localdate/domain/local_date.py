"""The ``LocalDate`` value type.

A ``LocalDate`` stores a calendar date as a signed 32-bit count of days since
1970-01-01 plus a validity flag. The two extremes of the 32-bit range are reserved
as positive and negative infinity, so plain integer ordering already places them
after/before every finite date.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Final

from localdate.config.settings import OverflowPolicy, get_settings

from .calendar import civil_from_days, days_from_civil, is_valid_date
from .clock import Clock, utcnow
from .errors import DateOverflowError, ParseError

log = logging.getLogger(__name__)

INFINITY_DAYS: Final[int] = 2**31 - 1
NEG_INFINITY_DAYS: Final[int] = -(2**31)
MAX_FINITE_DAYS: Final[int] = INFINITY_DAYS - 1
MIN_FINITE_DAYS: Final[int] = NEG_INFINITY_DAYS + 1

INFINITY_TOKEN: Final[str] = "infinity"
NEG_INFINITY_TOKEN: Final[str] = "-infinity"

# Returned by ``to_utc_midnight`` for the sentinels, which have no instant.
ZERO_INSTANT: Final[datetime] = datetime(1, 1, 1, tzinfo=UTC)

_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_DAY: Final[timedelta] = timedelta(days=1)
_NO_OFFSET: Final[timedelta] = timedelta(0)
_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def _bounded(days: int, overflow: OverflowPolicy | None) -> int:
    if MIN_FINITE_DAYS <= days <= MAX_FINITE_DAYS:
        return days
    policy = overflow or get_settings().overflow_policy
    if policy is OverflowPolicy.RAISE:
        raise DateOverflowError(
            f"Day count {days} is outside the finite range [{MIN_FINITE_DAYS}, {MAX_FINITE_DAYS}]"
        )
    if days > 0:
        log.warning("Day count %s overflows the finite range; saturating to infinity", days)
        return INFINITY_DAYS
    log.warning("Day count %s underflows the finite range; saturating to -infinity", days)
    return NEG_INFINITY_DAYS


@dataclass(frozen=True, slots=True)
class LocalDate:
    """An immutable calendar date without time of day or timezone.

    ``LocalDate()`` is the null value (``valid`` is False); use the ``from_*``
    constructors to obtain real dates.
    """

    days: int = 0
    valid: bool = False

    # Construction ------------------------------------------------------------

    @classmethod
    def from_calendar(
        cls,
        year: int,
        month: int,
        day: int,
        *,
        overflow: OverflowPolicy | None = None,
    ) -> LocalDate:
        """Build a date from a calendar triple at UTC midnight.

        Out-of-range months and days carry into neighbouring years and months
        instead of being rejected: ``(2023, 2, 29)`` is 2023-03-01.
        """

        return cls(days=_bounded(days_from_civil(year, month, day), overflow), valid=True)

    @classmethod
    def infinity(cls) -> LocalDate:
        return cls(days=INFINITY_DAYS, valid=True)

    @classmethod
    def negative_infinity(cls) -> LocalDate:
        return cls(days=NEG_INFINITY_DAYS, valid=True)

    @classmethod
    def today(cls, *, clock: Clock = utcnow) -> LocalDate:
        """Return the current UTC calendar date."""

        return cls.from_datetime(clock())

    @classmethod
    def from_datetime(cls, instant: datetime) -> LocalDate:
        """Return the UTC calendar date of ``instant``.

        Aware instants are converted to UTC first, so an evening in New York may
        already be the next day. Naive datetimes are taken to be UTC.
        """

        offset = instant.utcoffset() or _NO_OFFSET
        time_of_day = timedelta(
            hours=instant.hour,
            minutes=instant.minute,
            seconds=instant.second,
            microseconds=instant.microsecond,
        )
        # The offset is applied by hand; UTC can land in year 0 or 10000, outside datetime.
        shift = (time_of_day - offset) // _ONE_DAY
        days = days_from_civil(instant.year, instant.month, instant.day) + shift
        return cls(days=_bounded(days, None), valid=True)

    @classmethod
    def from_date(cls, value: date) -> LocalDate:
        if isinstance(value, datetime):
            return cls.from_datetime(value)
        return cls.from_calendar(value.year, value.month, value.day)

    @classmethod
    def parse(cls, text: str) -> LocalDate:
        """Strictly parse ``YYYY-MM-DD``.

        Unlike :meth:`from_calendar` nothing is carried: ``2023-02-29`` is an error.
        """

        match = _DATE_PATTERN.fullmatch(text)
        if match is None:
            raise ParseError(f"Invalid date {text!r}: expected YYYY-MM-DD")
        year, month, day = (int(group) for group in match.groups())
        if not is_valid_date(year, month, day):
            raise ParseError(f"Invalid date {text!r}: no such calendar day")
        return cls.from_calendar(year, month, day)

    @classmethod
    def from_text(cls, text: str) -> LocalDate:
        """Decode the text form produced by :meth:`to_text`."""

        if text == INFINITY_TOKEN:
            return cls.infinity()
        if text == NEG_INFINITY_TOKEN:
            return cls.negative_infinity()
        return cls.parse(text)

    # Views -------------------------------------------------------------------

    def is_infinity(self) -> bool:
        return self.days == INFINITY_DAYS

    def is_negative_infinity(self) -> bool:
        return self.days == NEG_INFINITY_DAYS

    def is_finite(self) -> bool:
        return not (self.is_infinity() or self.is_negative_infinity())

    def infinity_sign(self) -> int:
        if self.days == INFINITY_DAYS:
            return 1
        if self.days == NEG_INFINITY_DAYS:
            return -1
        return 0

    def to_utc_midnight(self) -> datetime:
        """Return midnight UTC of this day, or :data:`ZERO_INSTANT` for infinities."""

        if not self.is_finite():
            return ZERO_INSTANT
        try:
            return _EPOCH + timedelta(days=self.days)
        except OverflowError as exc:
            raise DateOverflowError(
                f"Day count {self.days} cannot be represented as a datetime"
            ) from exc

    def to_calendar(self) -> tuple[int, int, int]:
        if not self.is_finite():
            raise ValueError("Infinite dates have no calendar components")
        return civil_from_days(self.days)

    def to_text(self) -> str:
        if not self.valid:
            return ""
        if self.is_infinity():
            return INFINITY_TOKEN
        if self.is_negative_infinity():
            return NEG_INFINITY_TOKEN
        year, month, day = civil_from_days(self.days)
        return f"{year:04d}-{month:02d}-{day:02d}"

    def __str__(self) -> str:
        return self.to_text()

    # Arithmetic --------------------------------------------------------------

    def add_days(self, days: int, *, overflow: OverflowPolicy | None = None) -> LocalDate:
        """Shift by ``days``. Infinities and the null date are returned unchanged."""

        if not self.valid or not self.is_finite():
            return self
        return LocalDate(days=_bounded(self.days + days, overflow), valid=True)

    def add_date(
        self,
        years: int = 0,
        months: int = 0,
        days: int = 0,
        *,
        overflow: OverflowPolicy | None = None,
    ) -> LocalDate:
        """Shift by calendar units with carrying, like ``from_calendar``.

        Years and months are applied first and may produce an overflowing day of
        month (2023-01-31 + 1 month is 2023-03-03); ``days`` is added after.
        Infinities and the null date are returned unchanged.
        """

        if not self.valid or not self.is_finite():
            return self
        year, month, day = civil_from_days(self.days)
        return LocalDate.from_calendar(
            year + years, month + months, day + days, overflow=overflow
        )

    # Ordering ----------------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self.days < other.days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self.days <= other.days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self.days > other.days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self.days >= other.days


def new_local_date(year: int, month: int, day: int) -> LocalDate:
    return LocalDate.from_calendar(year, month, day)


def today(*, clock: Clock = utcnow) -> LocalDate:
    return LocalDate.today(clock=clock)


def parse(text: str) -> LocalDate:
    return LocalDate.parse(text)


def to_local_date(instant: datetime) -> LocalDate:
    return LocalDate.from_datetime(instant)


def is_equal(a: LocalDate, b: LocalDate) -> bool:
    return a == b


def is_after(a: LocalDate, b: LocalDate) -> bool:
    return a.days > b.days


def is_before(a: LocalDate, b: LocalDate) -> bool:
    return a.days < b.days


def is_between(needle: LocalDate, from_: LocalDate, to: LocalDate) -> bool:
    """Inclusive range check on the raw day counts.

    Inverted ranges are not rejected, they simply contain nothing except when all
    three values are the same.
    """

    return from_.days <= needle.days <= to.days


def add_days(value: LocalDate, days: int) -> LocalDate:
    return value.add_days(days)


__all__ = [
    "INFINITY_DAYS",
    "INFINITY_TOKEN",
    "MAX_FINITE_DAYS",
    "MIN_FINITE_DAYS",
    "NEG_INFINITY_DAYS",
    "NEG_INFINITY_TOKEN",
    "ZERO_INSTANT",
    "LocalDate",
    "add_days",
    "is_after",
    "is_before",
    "is_between",
    "is_equal",
    "new_local_date",
    "parse",
    "to_local_date",
    "today",
]

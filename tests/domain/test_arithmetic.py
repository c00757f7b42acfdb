from __future__ import annotations

import logging

import pytest

from localdate.config import OverflowPolicy
from localdate.domain import (
    INFINITY_DAYS,
    MAX_FINITE_DAYS,
    MIN_FINITE_DAYS,
    NEG_INFINITY_DAYS,
    DateOverflowError,
    LocalDate,
    add_days,
    new_local_date,
)

INF = LocalDate.infinity()
NEG_INF = LocalDate.negative_infinity()


@pytest.mark.parametrize(
    ("start", "days", "expected"),
    [
        ((2023, 5, 15), 5, (2023, 5, 20)),
        ((2023, 5, 15), -5, (2023, 5, 10)),
        ((2023, 5, 15), 0, (2023, 5, 15)),
        ((2023, 5, 30), 5, (2023, 6, 4)),
        ((2023, 12, 31), 1, (2024, 1, 1)),
        ((2024, 2, 28), 1, (2024, 2, 29)),
        ((2023, 2, 28), 1, (2023, 3, 1)),
    ],
)
def test_add_days_shifts_finite_dates(
    start: tuple[int, int, int], days: int, expected: tuple[int, int, int]
) -> None:
    assert add_days(new_local_date(*start), days) == new_local_date(*expected)


@pytest.mark.parametrize("days", [-1_000_000, -1, 0, 1, 1_000_000])
def test_add_days_is_absorbed_by_infinities(days: int) -> None:
    assert INF.add_days(days) == INF
    assert NEG_INF.add_days(days) == NEG_INF


def test_add_days_leaves_null_date_alone() -> None:
    assert LocalDate().add_days(3) == LocalDate()


@pytest.mark.parametrize(
    ("start", "delta", "expected"),
    [
        ((2023, 5, 15), (1, 2, 10), (2024, 7, 25)),
        ((2023, 5, 15), (-1, -2, -10), (2022, 3, 5)),
        ((2023, 5, 15), (0, 0, 0), (2023, 5, 15)),
        ((2020, 2, 29), (1, 0, 0), (2021, 3, 1)),
        ((2023, 11, 15), (0, 3, 0), (2024, 2, 15)),
        ((2023, 1, 25), (0, 0, 10), (2023, 2, 4)),
        ((2000, 1, 1), (100, 12, 365), (2102, 1, 1)),
        ((2023, 12, 31), (-10, -24, -100), (2011, 9, 22)),
        ((2023, 1, 31), (0, 1, 0), (2023, 3, 3)),
        ((2024, 1, 31), (0, 1, 0), (2024, 3, 2)),
        ((2024, 3, 31), (0, -1, 0), (2024, 3, 2)),
    ],
)
def test_add_date_carries_like_calendar_normalisation(
    start: tuple[int, int, int],
    delta: tuple[int, int, int],
    expected: tuple[int, int, int],
) -> None:
    years, months, days = delta

    result = new_local_date(*start).add_date(years, months, days)

    assert result == new_local_date(*expected)


def test_add_date_is_absorbed_by_infinities() -> None:
    assert INF.add_date(1, 1, 1) == INF
    assert NEG_INF.add_date(-1, -1, -1) == NEG_INF


def test_add_date_leaves_null_date_alone() -> None:
    assert LocalDate().add_date(years=1) == LocalDate()


def test_add_days_saturates_to_infinity_by_default(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    near_max = LocalDate(days=MAX_FINITE_DAYS, valid=True)

    assert near_max.add_days(1) == INF
    assert near_max.add_days(0).days == MAX_FINITE_DAYS
    assert "saturating to infinity" in caplog.text


def test_add_days_saturates_to_negative_infinity() -> None:
    near_min = LocalDate(days=MIN_FINITE_DAYS, valid=True)

    assert near_min.add_days(-1) == NEG_INF
    assert near_min.add_days(-(2**40)).days == NEG_INFINITY_DAYS


def test_add_days_raise_policy() -> None:
    near_max = LocalDate(days=MAX_FINITE_DAYS, valid=True)

    with pytest.raises(DateOverflowError, match="outside the finite range"):
        near_max.add_days(1, overflow=OverflowPolicy.RAISE)


def test_from_calendar_overflow_follows_policy() -> None:
    huge_year = 10_000_000

    assert new_local_date(huge_year, 1, 1).days == INFINITY_DAYS
    assert new_local_date(-huge_year, 1, 1).days == NEG_INFINITY_DAYS
    with pytest.raises(OverflowError):
        LocalDate.from_calendar(huge_year, 1, 1, overflow=OverflowPolicy.RAISE)


def test_add_date_overflow_follows_policy() -> None:
    start = new_local_date(2023, 5, 15)

    assert start.add_date(years=10_000_000) == INF
    with pytest.raises(DateOverflowError):
        start.add_date(years=10_000_000, overflow=OverflowPolicy.RAISE)


def test_environment_policy_is_used_when_not_overridden(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("LOCALDATE_OVERFLOW_POLICY", "raise")
    near_max = LocalDate(days=MAX_FINITE_DAYS, valid=True)

    with pytest.raises(DateOverflowError):
        near_max.add_days(1)
    assert near_max.add_days(1, overflow=OverflowPolicy.SATURATE) == INF

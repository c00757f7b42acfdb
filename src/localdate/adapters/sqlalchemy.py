"""Persistence scan/value interface and the SQLAlchemy column type built on it."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, TypeAlias

from sqlalchemy import Date, Dialect, String, Text, TypeDecorator, cast, type_coerce

from localdate.domain.errors import ScanTypeError
from localdate.domain.local_date import INFINITY_TOKEN, NEG_INFINITY_TOKEN, LocalDate

if TYPE_CHECKING:
    from sqlalchemy.sql.elements import ColumnElement
    from sqlalchemy.types import TypeEngine

log = logging.getLogger(__name__)

DbValue: TypeAlias = datetime | str | None

_NULL = LocalDate()


def scan_value(raw: object, into: LocalDate = _NULL) -> LocalDate:
    """Convert a value read from storage into a ``LocalDate``.

    Datetimes contribute their UTC calendar date, plain dates their own calendar
    date and strings go through the text rules (``infinity``, ``-infinity`` or
    ``YYYY-MM-DD``). ``None`` leaves ``into`` untouched. Anything else raises
    :class:`ScanTypeError`.
    """

    if raw is None:
        return into
    if isinstance(raw, datetime):
        return LocalDate.from_datetime(raw)
    if isinstance(raw, date):
        return LocalDate.from_date(raw)
    if isinstance(raw, str):
        return LocalDate.from_text(raw)
    log.debug("Rejecting %s value for LocalDate scan", type(raw).__name__)
    raise ScanTypeError(f"unsupported scan, storing {type(raw).__name__} into LocalDate")


def db_value(value: LocalDate) -> DbValue:
    """Convert a ``LocalDate`` into the value handed to storage.

    Infinities become their text tokens, finite dates their UTC midnight
    ``datetime``. Reading accepts strings for finite dates too, writing never
    produces them. The null date becomes ``None``.
    """

    if not value.valid:
        return None
    if value.is_infinity():
        return INFINITY_TOKEN
    if value.is_negative_infinity():
        return NEG_INFINITY_TOKEN
    return value.to_utc_midnight()


class LocalDateType(TypeDecorator[LocalDate]):
    """Column type storing ``LocalDate`` values.

    PostgreSQL gets a native ``DATE`` column, which understands the infinity
    tokens. Other dialects store the text form in ``VARCHAR(10)``. Selected
    columns are cast to text so that drivers hand back ``"infinity"`` instead of
    clamping it to a far date or refusing it.
    """

    impl = String(10)
    cache_ok = True

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        if dialect.name == "postgresql":
            return dialect.type_descriptor(Date())
        return dialect.type_descriptor(String(10))

    def column_expression(self, colexpr: ColumnElement[Any]) -> ColumnElement[LocalDate]:
        return type_coerce(cast(colexpr, Text), self)

    def process_bind_param(self, value: LocalDate | None, dialect: Dialect) -> date | str | None:
        if value is None or not value.valid:
            return None
        if dialect.name != "postgresql":
            return value.to_text()
        bound = db_value(value)
        if isinstance(bound, datetime):
            return bound.date()
        return bound

    def process_result_value(self, value: Any, dialect: Dialect) -> LocalDate | None:
        _ = dialect
        if value is None:
            return None
        return scan_value(value)


__all__ = ["DbValue", "LocalDateType", "db_value", "scan_value"]

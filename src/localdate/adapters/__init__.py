"""Adapters mapping ``LocalDate`` onto JSON and database representations."""

from __future__ import annotations

from .postgres import InfinityModifier, PgDate, to_pg_date
from .pydantic import LocalDateField, dump_json, load_json
from .sqlalchemy import LocalDateType, db_value, scan_value

__all__ = [
    "InfinityModifier",
    "LocalDateField",
    "LocalDateType",
    "PgDate",
    "db_value",
    "dump_json",
    "load_json",
    "scan_value",
    "to_pg_date",
]

from __future__ import annotations

from importlib import metadata

from localdate.domain import (
    INFINITY_TOKEN,
    NEG_INFINITY_TOKEN,
    DateOverflowError,
    LocalDate,
    LocalDateError,
    ParseError,
    ScanTypeError,
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

try:
    __version__ = metadata.version("localdate")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "INFINITY_TOKEN",
    "NEG_INFINITY_TOKEN",
    "DateOverflowError",
    "LocalDate",
    "LocalDateError",
    "ParseError",
    "ScanTypeError",
    "__version__",
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

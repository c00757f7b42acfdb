"""Errors raised by the LocalDate domain."""

from __future__ import annotations


class LocalDateError(Exception):
    """Base class for LocalDate failures."""


class ParseError(LocalDateError, ValueError):
    """Raised when text is not a strict ``YYYY-MM-DD`` date or a known token."""


class ScanTypeError(LocalDateError, TypeError):
    """Raised when a persistence layer hands over a value of an unsupported type."""


class DateOverflowError(LocalDateError, OverflowError):
    """Raised when a date falls outside the representable day range."""

"""JSON support for ``LocalDate`` through Pydantic.

``LocalDateField`` can be used as a field annotation on any ``BaseModel``; it
accepts ``LocalDate`` instances or their text form and serialises to the text form
(``"infinity"``, ``"-infinity"`` or ``"YYYY-MM-DD"``). The null date serialises to
``null``.
"""

from __future__ import annotations

from typing import Annotated, Final

from pydantic import PlainSerializer, PlainValidator, TypeAdapter, ValidationError, WithJsonSchema

from localdate.domain.errors import ParseError
from localdate.domain.local_date import LocalDate


def _validate(raw: object) -> LocalDate:
    if isinstance(raw, LocalDate):
        return raw
    if isinstance(raw, str):
        return LocalDate.from_text(raw)
    raise ParseError(f"Expected a date string, got {type(raw).__name__}")


def _serialize(value: LocalDate) -> str | None:
    if not value.valid:
        return None
    return value.to_text()


LocalDateField = Annotated[
    LocalDate,
    PlainValidator(_validate),
    PlainSerializer(_serialize, return_type=str | None),
    WithJsonSchema(
        {
            "anyOf": [
                {"type": "string", "format": "date"},
                {"type": "string", "enum": ["infinity", "-infinity"]},
            ]
        }
    ),
]

_FIELD_ADAPTER: Final[TypeAdapter[LocalDate]] = TypeAdapter(LocalDateField)
_STRING_ADAPTER: Final[TypeAdapter[str]] = TypeAdapter(str)


def dump_json(value: LocalDate) -> bytes:
    return _FIELD_ADAPTER.dump_json(value)


def load_json(data: str | bytes) -> LocalDate:
    """Decode a quoted JSON date; anything but a JSON string is a :class:`ParseError`."""

    try:
        text = _STRING_ADAPTER.validate_json(data, strict=True)
    except ValidationError as exc:
        raise ParseError(f"Invalid JSON date {data!r}") from exc
    return LocalDate.from_text(text)


__all__ = ["LocalDateField", "dump_json", "load_json"]

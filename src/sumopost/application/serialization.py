from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import BaseModel

from sumopost.domain.errors import ParsingLogsError

RecordT = TypeVar("RecordT", bound=BaseModel)

MISSING_METADATA = "object is missing json metadata"


def has_serialization_metadata(value: Any) -> bool:
    """Return True if ``value`` is a model instance whose every field has a serialized name.

    A name counts when it was declared with ``alias``, ``serialization_alias`` or
    produced by the model's ``alias_generator``. Only the model type is inspected,
    never the field values.
    """
    if not isinstance(value, BaseModel):
        return False
    for field in type(value).model_fields.values():
        if field.alias is None and field.serialization_alias is None:
            return False
    return True


def serialize_records(records: Iterable[RecordT]) -> str:
    lines: list[str] = []
    for record in records:
        if not has_serialization_metadata(record):
            raise ParsingLogsError(f"error parsing logs: {MISSING_METADATA}")
        try:
            lines.append(record.model_dump_json(by_alias=True))
        except ValueError as exc:
            raise ParsingLogsError(f"error parsing logs: {exc}") from exc
    return "\n".join(lines)

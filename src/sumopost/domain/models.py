from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator


class LogEvent(BaseModel):
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        validation_alias=AliasChoices("timestamp", "@timestamp", "time"),
        serialization_alias="timestamp",
    )
    level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("level", "severity"),
        serialization_alias="level",
    )
    message: str = Field(
        default="",
        validation_alias=AliasChoices("message", "msg"),
        serialization_alias="message",
    )
    host: str | None = Field(
        default=None,
        validation_alias=AliasChoices("host", "hostname"),
        serialization_alias="host",
    )
    service: str | None = Field(default=None, alias="service")
    category: str | None = Field(
        default=None,
        validation_alias=AliasChoices("category", "_sourceCategory"),
        serialization_alias="category",
    )
    attributes: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("attributes", "fields"),
        serialization_alias="attributes",
    )

    @field_validator("level")
    @classmethod
    def upper_level(cls, value: str) -> str:
        return value.upper()

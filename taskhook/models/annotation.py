"""Annotation model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from taskhook.date import coerce_date


class Annotation(BaseModel):
    """A timestamped note attached to a task (`entry` + `description` on the wire)."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    entry: datetime
    description: str

    @field_validator("entry", mode="before")
    @classmethod
    def validate_entry(cls, v: object) -> datetime:
        return coerce_date(v)

"""Core task model for taskhook."""

from __future__ import annotations

import logging
import math
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskhook.date import coerce_date, now
from taskhook.enums import Priority, TaskStatus
from taskhook.errors import InvariantViolationError
from taskhook.models.annotation import Annotation
from taskhook.models.uda import UdaRegistry, UdaValue

logger = logging.getLogger(__name__)

DATE_FIELDS = ("entry", "modified", "due", "scheduled", "start", "end", "until", "wait")


class Task(BaseModel):
    """
    A Taskwarrior task.

    `status`, `uuid`, `entry` and `description` are required; everything else
    is optional and left as None (or empty) when the task does not carry it.
    Attribute assignment is validated, and `uuid` cannot be reassigned.
    Fields outside the fixed schema live in `uda`.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True, arbitrary_types_allowed=True)

    status: TaskStatus
    uuid: UUID = Field(frozen=True)
    entry: datetime
    description: str = Field(min_length=1)

    id: int | None = Field(default=None, ge=0, strict=True)
    modified: datetime | None = None
    due: datetime | None = None
    scheduled: datetime | None = None
    start: datetime | None = None
    end: datetime | None = None
    until: datetime | None = None
    wait: datetime | None = None
    tags: list[str] | None = None
    depends: list[UUID] | None = None
    priority: Priority | None = None
    project: str | None = None
    recur: str | None = None
    mask: str | None = None
    imask: float | None = None
    parent: UUID | None = None
    urgency: float | None = None
    annotations: list[Annotation] = Field(default_factory=list)

    uda: UdaRegistry = Field(default_factory=UdaRegistry)

    @field_validator(*DATE_FIELDS, mode="before")
    @classmethod
    def validate_dates(cls, v: object) -> datetime | None:
        if v is None:
            return None
        return coerce_date(v)

    @field_validator("imask", "urgency", mode="before")
    @classmethod
    def validate_number(cls, v: object) -> float | None:
        # Taskwarrior may write whole numbers without a decimal point
        if v is None:
            return None
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("expected a number")
        try:
            value = float(v)
        except OverflowError as e:
            raise ValueError("number out of range") from e
        if not math.isfinite(value):
            raise ValueError("number must be finite")
        return value

    @field_validator("tags", "depends", mode="after")
    @classmethod
    def collapse_duplicates(cls, v: list | None) -> list | None:
        if v is None:
            return None
        return list(dict.fromkeys(v))

    # ------------------------------------------------------------------
    # Set-valued fields
    # ------------------------------------------------------------------

    def has_tag(self, tag: str) -> bool:
        return tag in (self.tags or ())

    def add_tag(self, tag: str) -> None:
        """Add `tag`; a tag that is already present is left alone."""
        if not self.has_tag(tag):
            self.tags = [*(self.tags or ()), tag]

    def remove_tag(self, tag: str) -> None:
        """Remove `tag`; removing an absent tag does nothing."""
        if self.has_tag(tag):
            self.tags = [t for t in self.tags if t != tag]

    def add_dependency(self, uuid: UUID | str) -> None:
        uuid = UUID(str(uuid))
        if uuid not in (self.depends or ()):
            self.depends = [*(self.depends or ()), uuid]

    def remove_dependency(self, uuid: UUID | str) -> None:
        uuid = UUID(str(uuid))
        if uuid in (self.depends or ()):
            self.depends = [d for d in self.depends if d != uuid]

    # ------------------------------------------------------------------
    # Annotations
    # ------------------------------------------------------------------

    def add_annotation(self, description: str, entry: datetime | str | None = None) -> Annotation:
        """Append a new annotation, stamped with the current time unless `entry` is given."""
        annotation = Annotation(entry=entry if entry is not None else now(), description=description)
        self.append_annotation(annotation)
        return annotation

    def append_annotation(self, annotation: Annotation) -> None:
        self.annotations = [*self.annotations, annotation.model_copy()]

    def remove_annotation(self, index: int) -> Annotation:
        """
        Remove the annotation at `index` and return it.

        Raises:
            IndexError: If there is no annotation at that position
        """
        if not 0 <= index < len(self.annotations):
            raise IndexError(f"annotation index {index} out of range ({len(self.annotations)} annotations)")
        remaining = list(self.annotations)
        removed = remaining.pop(index)
        self.annotations = remaining
        return removed

    # ------------------------------------------------------------------
    # User-defined attributes
    # ------------------------------------------------------------------

    def get_uda(self, name: str, default: UdaValue = None) -> UdaValue:
        return self.uda.get(name, default)

    def set_uda(self, name: str, value: UdaValue) -> None:
        """Set a UDA, refusing names that belong to the fixed schema."""
        if name in FIXED_FIELDS:
            raise InvariantViolationError(name, "name is a fixed-schema field, not a UDA")
        self.uda.set(name, value)
        logger.debug("Set UDA %s on task %s", name, self.uuid)

    def remove_uda(self, name: str) -> bool:
        return self.uda.remove(name)


# Wire names of the fixed schema, in the order they are written out
FIXED_FIELDS: tuple[str, ...] = tuple(name for name in Task.model_fields if name != "uda")

REQUIRED_FIELDS: tuple[str, ...] = ("status", "uuid", "entry", "description")

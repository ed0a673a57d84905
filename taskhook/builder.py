"""Staged construction of Task values."""

from __future__ import annotations

import logging
import uuid as uuid_lib
from collections.abc import Iterable
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import ValidationError

from taskhook.date import now
from taskhook.enums import Priority, TaskStatus
from taskhook.errors import InvariantViolationError, MissingRequiredError
from taskhook.models.annotation import Annotation
from taskhook.models.task import FIXED_FIELDS, Task
from taskhook.models.uda import UdaRegistry, UdaValue

logger = logging.getLogger(__name__)


class TaskBuilder:
    """
    Collects task fields and validates them all at once in `build()`.

    Setters return the builder so calls can be chained::

        task = (
            TaskBuilder()
            .status(TaskStatus.PENDING)
            .description("buy milk")
            .tags(["home"])
            .build()
        )

    `uuid` defaults to a fresh random UUID and `entry` to the current time.
    The builder is the only place a task may be incomplete; `build()` either
    returns a valid Task or raises a BuilderError.
    """

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}
        self._annotations: list[Annotation | dict[str, Any]] = []
        self._uda = UdaRegistry()

    def _stage(self, name: str, value: Any) -> TaskBuilder:
        self._fields[name] = value
        return self

    # Required fields

    def status(self, status: TaskStatus | str) -> TaskBuilder:
        return self._stage("status", status)

    def uuid(self, uuid: UUID | str) -> TaskBuilder:
        return self._stage("uuid", uuid)

    def entry(self, entry: datetime | str) -> TaskBuilder:
        return self._stage("entry", entry)

    def description(self, description: str) -> TaskBuilder:
        return self._stage("description", description)

    # Optional fields

    def id(self, task_id: int | None) -> TaskBuilder:
        return self._stage("id", task_id)

    def modified(self, value: datetime | str | None) -> TaskBuilder:
        return self._stage("modified", value)

    def due(self, value: datetime | str | None) -> TaskBuilder:
        return self._stage("due", value)

    def scheduled(self, value: datetime | str | None) -> TaskBuilder:
        return self._stage("scheduled", value)

    def start(self, value: datetime | str | None) -> TaskBuilder:
        return self._stage("start", value)

    def end(self, value: datetime | str | None) -> TaskBuilder:
        return self._stage("end", value)

    def until(self, value: datetime | str | None) -> TaskBuilder:
        return self._stage("until", value)

    def wait(self, value: datetime | str | None) -> TaskBuilder:
        return self._stage("wait", value)

    def tags(self, tags: Iterable[str]) -> TaskBuilder:
        """Replace the staged tags; repeated tags collapse to one."""
        return self._stage("tags", list(dict.fromkeys(tags)))

    def tag(self, tag: str) -> TaskBuilder:
        tags = self._fields.get("tags") or []
        if tag not in tags:
            tags = [*tags, tag]
        return self._stage("tags", tags)

    def depends(self, uuids: Iterable[UUID | str]) -> TaskBuilder:
        """Replace the staged dependencies; repeated UUIDs collapse to one."""
        return self._stage("depends", list(dict.fromkeys(str(u).lower() for u in uuids)))

    def priority(self, priority: Priority | str | None) -> TaskBuilder:
        return self._stage("priority", priority)

    def project(self, project: str | None) -> TaskBuilder:
        return self._stage("project", project)

    def recur(self, recur: str | None) -> TaskBuilder:
        return self._stage("recur", recur)

    def mask(self, mask: str | None) -> TaskBuilder:
        return self._stage("mask", mask)

    def imask(self, imask: float | None) -> TaskBuilder:
        return self._stage("imask", imask)

    def parent(self, parent: UUID | str | None) -> TaskBuilder:
        return self._stage("parent", parent)

    def urgency(self, urgency: float | None) -> TaskBuilder:
        return self._stage("urgency", urgency)

    def annotation(self, description: str, entry: datetime | str | None = None) -> TaskBuilder:
        """Append an annotation, stamped with the current time unless `entry` is given."""
        if entry is None:
            self._annotations.append(Annotation(entry=now(), description=description))
        else:
            self._annotations.append({"entry": entry, "description": description})
        return self

    def uda(self, name: str, value: UdaValue) -> TaskBuilder:
        """Stage a user-defined attribute; new names are appended in call order."""
        self._uda.set(name, value)
        return self

    def build(self) -> Task:
        """
        Validate the staged fields and produce a Task.

        Returns:
            A Task satisfying every model invariant

        Raises:
            MissingRequiredError: If `status` or `description` was never set
            InvariantViolationError: If a UDA name is a fixed-schema name or
                a staged value fails validation
        """
        for name in ("status", "description"):
            if self._fields.get(name) is None:
                raise MissingRequiredError(name)

        for name in self._uda:
            if name in FIXED_FIELDS:
                raise InvariantViolationError(name, "UDA name collides with a fixed-schema field")

        fields = {name: value for name, value in self._fields.items() if value is not None}
        fields.setdefault("uuid", uuid_lib.uuid4())
        fields.setdefault("entry", now())

        # Each Task gets its own annotation objects
        annotations = [a.model_copy() if isinstance(a, Annotation) else dict(a) for a in self._annotations]

        try:
            task = Task.model_validate({**fields, "annotations": annotations, "uda": self._uda.copy()})
        except ValidationError as e:
            error = e.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else "task"
            raise InvariantViolationError(field, error["msg"]) from e

        logger.debug("Built task %s", task.uuid)
        return task

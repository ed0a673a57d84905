"""JSON codec between Taskwarrior's wire format and Task models."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from taskhook.date import encode_date
from taskhook.enums import DependsFormat
from taskhook.errors import (
    FieldCollisionError,
    InvalidFieldError,
    MalformedJsonError,
    MissingFieldError,
)
from taskhook.models.annotation import Annotation
from taskhook.models.options import DEFAULT_OPTIONS, CodecOptions
from taskhook.models.task import DATE_FIELDS, FIXED_FIELDS, REQUIRED_FIELDS, Task
from taskhook.models.uda import UdaRegistry

logger = logging.getLogger(__name__)

_FIXED = frozenset(FIXED_FIELDS)

# ============================================================================
# Decoding
# ============================================================================


def _reject_constant(name: str) -> Any:
    raise MalformedJsonError(f"Failed to parse task JSON - {name} is not valid JSON")


def _load_json(json_text: str | bytes) -> Any:
    try:
        return json.loads(json_text, parse_constant=_reject_constant)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as e:
        raise MalformedJsonError(f"Failed to parse task JSON - {str(e)}") from e


def _split_depends(value: Any) -> Any:
    """Expand the legacy comma-separated `depends` string into a list."""
    if not isinstance(value, str):
        raise InvalidFieldError("depends", "expected a comma-separated string of UUIDs")
    return [part.strip() for part in value.split(",") if part.strip()]


def task_from_dict(task_dict: Any, options: CodecOptions | None = None) -> Task:
    """
    Build a Task from one decoded JSON object.

    Fixed-schema keys are validated into typed fields; every other key is
    copied into the UDA registry unchanged.

    Args:
        task_dict: Dictionary from Taskwarrior JSON export
        options: Codec options (defaults to DEFAULT_OPTIONS)

    Returns:
        Task instance with validated data

    Raises:
        MalformedJsonError: If `task_dict` is not a JSON object
        MissingFieldError: If a required field is absent
        InvalidFieldError: If a fixed-schema field has the wrong shape
    """
    options = options or DEFAULT_OPTIONS
    if not isinstance(task_dict, dict):
        raise MalformedJsonError(f"Expected a task object, got {type(task_dict).__name__}")

    fields: dict[str, Any] = {}
    uda = UdaRegistry()
    for key, value in task_dict.items():
        if key not in _FIXED:
            uda.set(key, value)
            continue
        if value is None:
            raise InvalidFieldError(key, "null is not allowed")
        fields[key] = value

    for name in REQUIRED_FIELDS:
        if name not in fields:
            raise MissingFieldError(name)

    if "annotations" in fields and not isinstance(fields["annotations"], list):
        raise InvalidFieldError("annotations", "expected an array of annotation objects")
    if "depends" in fields:
        if options.depends_format == DependsFormat.STRING:
            fields["depends"] = _split_depends(fields["depends"])
        elif not isinstance(fields["depends"], list):
            raise InvalidFieldError("depends", "expected an array of UUIDs")

    try:
        task = Task.model_validate({**fields, "uda": uda})
    except ValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else "task"
        raise InvalidFieldError(field, error["msg"]) from e

    if len(uda):
        logger.debug("Task %s carries UDAs: %s", task.uuid, ", ".join(uda.names()))
    return task


def decode(json_text: str | bytes, options: CodecOptions | None = None) -> Task | list[Task]:
    """
    Decode Taskwarrior JSON.

    A single object yields one Task; an array (bulk import / export) yields a
    list of Tasks in element order.

    Raises:
        MalformedJsonError: If the text is not JSON or is a top-level scalar
        MissingFieldError, InvalidFieldError: For an invalid task object
    """
    data = _load_json(json_text)
    if isinstance(data, dict):
        return task_from_dict(data, options)
    if isinstance(data, list):
        tasks = [task_from_dict(item, options) for item in data]
        logger.debug("Decoded %d task(s)", len(tasks))
        return tasks
    raise MalformedJsonError(f"Expected a task object or an array of task objects, got {type(data).__name__}")


def decode_task(json_text: str | bytes, options: CodecOptions | None = None) -> Task:
    """Decode text that must hold exactly one task object."""
    data = _load_json(json_text)
    if not isinstance(data, dict):
        raise MalformedJsonError(f"Expected a single task object, got {type(data).__name__}")
    return task_from_dict(data, options)


def decode_tasks(json_text: str | bytes, options: CodecOptions | None = None) -> list[Task]:
    """Decode an object or array, always returning a list."""
    result = decode(json_text, options)
    if isinstance(result, Task):
        return [result]
    return result


def decode_lines(lines: Iterable[str | bytes], options: CodecOptions | None = None) -> list[Task]:
    """
    Decode line-delimited task objects, as Taskwarrior feeds hooks.

    `on-add` hooks get one line, `on-modify` hooks get the original and the
    modified task on two lines. Blank lines are skipped.

    Args:
        lines: Any iterable of lines, e.g. ``sys.stdin``
        options: Codec options

    Returns:
        List of Tasks, one per non-blank line
    """
    tasks = []
    for line in lines:
        if not line.strip():
            continue
        tasks.append(decode_task(line, options))
    return tasks


# ============================================================================
# Encoding
# ============================================================================


def _annotation_to_dict(annotation: Annotation) -> dict[str, str]:
    return {"entry": encode_date(annotation.entry), "description": annotation.description}


def task_to_dict(task: Task, options: CodecOptions | None = None) -> dict[str, Any]:
    """
    Convert a Task into a JSON-ready dictionary.

    Present fixed fields come first in schema order, then UDAs in registry
    order, then `annotations` (omitted when empty).

    Raises:
        FieldCollisionError: If a UDA name is also a fixed-schema name
    """
    options = options or DEFAULT_OPTIONS
    data: dict[str, Any] = {}

    for name in FIXED_FIELDS:
        if name == "annotations":
            continue
        value = getattr(task, name)
        if value is None:
            continue
        if name in DATE_FIELDS:
            data[name] = encode_date(value)
        elif name == "depends":
            uuids = [str(u) for u in value]
            data[name] = ",".join(uuids) if options.depends_format == DependsFormat.STRING else uuids
        elif name in ("uuid", "parent"):
            data[name] = str(value)
        elif name in ("status", "priority"):
            data[name] = value.value
        elif name == "tags":
            data[name] = list(value)
        else:
            data[name] = value

    for name, value in task.uda.items():
        if name in _FIXED:
            raise FieldCollisionError(name)
        data[name] = value

    if task.annotations:
        data["annotations"] = [_annotation_to_dict(a) for a in task.annotations]
    return data


def encode(task: Task | Iterable[Task], options: CodecOptions | None = None) -> str:
    """
    Encode one Task as a JSON object, or several as a JSON array.

    Raises:
        FieldCollisionError: If a UDA name is also a fixed-schema name
    """
    options = options or DEFAULT_OPTIONS
    if isinstance(task, Task):
        data: Any = task_to_dict(task, options)
    else:
        data = [task_to_dict(t, options) for t in task]
        logger.debug("Encoded %d task(s)", len(data))
    return json.dumps(data, indent=options.indent, ensure_ascii=options.ensure_ascii, allow_nan=False)

"""
Taskwarrior hook data layer.

Typed models for Taskwarrior tasks, a lossless JSON codec for the task
export format (including user-defined attributes), and a validating builder
for new tasks. Hook programs decode stdin, work on Task values, and encode
the result to stdout.
"""

# Re-export codec, builder and dates
from taskhook.builder import TaskBuilder
from taskhook.codec import (
    decode,
    decode_lines,
    decode_task,
    decode_tasks,
    encode,
    task_from_dict,
    task_to_dict,
)
from taskhook.date import DATE_FORMAT, decode_date, encode_date, normalize_date, now

# Re-export enums
from taskhook.enums import DependsFormat, Priority, ResponseFormat, TaskStatus, UdaKind

# Re-export errors
from taskhook.errors import (
    BuilderError,
    DecodeError,
    EncodeError,
    FieldCollisionError,
    FormatError,
    InvalidFieldError,
    InvariantViolationError,
    MalformedJsonError,
    MissingFieldError,
    MissingRequiredError,
    TaskHookError,
)

# Re-export models
from taskhook.models import (
    DEFAULT_OPTIONS,
    FIXED_FIELDS,
    REQUIRED_FIELDS,
    Annotation,
    BuildTaskInput,
    CodecOptions,
    NormalizeTasksInput,
    Task,
    UdaRegistry,
    UdaValue,
    ValidateTasksInput,
    uda_kind,
)

# Re-export utilities (including private functions used by tests)
from taskhook.utils import (
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
)

__all__ = [
    # Enums
    "TaskStatus",
    "Priority",
    "DependsFormat",
    "UdaKind",
    "ResponseFormat",
    # Errors
    "TaskHookError",
    "FormatError",
    "DecodeError",
    "MissingFieldError",
    "InvalidFieldError",
    "MalformedJsonError",
    "BuilderError",
    "MissingRequiredError",
    "InvariantViolationError",
    "EncodeError",
    "FieldCollisionError",
    # Dates
    "DATE_FORMAT",
    "decode_date",
    "encode_date",
    "normalize_date",
    "now",
    # Models
    "Annotation",
    "Task",
    "FIXED_FIELDS",
    "REQUIRED_FIELDS",
    "UdaRegistry",
    "UdaValue",
    "uda_kind",
    "CodecOptions",
    "DEFAULT_OPTIONS",
    # Codec
    "decode",
    "decode_task",
    "decode_tasks",
    "decode_lines",
    "encode",
    "task_from_dict",
    "task_to_dict",
    # Builder
    "TaskBuilder",
    # Tool input models
    "ValidateTasksInput",
    "NormalizeTasksInput",
    "BuildTaskInput",
    # Utility functions
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
]

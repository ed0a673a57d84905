"""Pydantic models for taskhook."""

from taskhook.models.annotation import Annotation
from taskhook.models.inputs import BuildTaskInput, NormalizeTasksInput, ValidateTasksInput
from taskhook.models.options import DEFAULT_OPTIONS, CodecOptions
from taskhook.models.task import FIXED_FIELDS, REQUIRED_FIELDS, Task
from taskhook.models.uda import UdaRegistry, UdaValue, uda_kind

__all__ = [
    # Task models
    "Annotation",
    "Task",
    "FIXED_FIELDS",
    "REQUIRED_FIELDS",
    # UDAs
    "UdaRegistry",
    "UdaValue",
    "uda_kind",
    # Options
    "CodecOptions",
    "DEFAULT_OPTIONS",
    # Tool input models
    "ValidateTasksInput",
    "NormalizeTasksInput",
    "BuildTaskInput",
]

"""Enums for taskhook."""

from enum import Enum


class TaskStatus(str, Enum):
    """Task status values as they appear on the wire."""

    PENDING = "pending"
    COMPLETED = "completed"
    DELETED = "deleted"
    WAITING = "waiting"
    RECURRING = "recurring"


class Priority(str, Enum):
    """Task priority levels."""

    HIGH = "H"
    MEDIUM = "M"
    LOW = "L"


class DependsFormat(str, Enum):
    """Wire representation of the `depends` field."""

    ARRAY = "array"  # Taskwarrior 2.6+: JSON array of UUID strings
    STRING = "string"  # Taskwarrior 2.5 and older: one comma-separated string


class UdaKind(str, Enum):
    """Shape of a user-defined attribute value."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    STRUCTURED = "structured"  # JSON array or object


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per task
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Normalized task JSON

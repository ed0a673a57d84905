"""Exception types raised by taskhook."""

from __future__ import annotations


class TaskHookError(Exception):
    """Base class for every error raised by this package."""


class FormatError(TaskHookError, ValueError):
    """Date text does not match the compact ``YYYYMMDDTHHMMSSZ`` form."""

    def __init__(self, text: object):
        self.text = text
        super().__init__(f"Invalid date {text!r}: expected YYYYMMDDTHHMMSSZ")


class DecodeError(TaskHookError):
    """JSON text could not be turned into a Task."""


class MissingFieldError(DecodeError):
    """A required field is absent from a task object."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field '{field}'")


class InvalidFieldError(DecodeError):
    """A fixed-schema field holds a value of the wrong shape."""

    def __init__(self, field: str, reason: str | None = None):
        self.field = field
        self.reason = reason
        message = f"Invalid value for field '{field}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedJsonError(DecodeError):
    """Input is not JSON, or not a task object / array of task objects."""


class BuilderError(TaskHookError):
    """A TaskBuilder could not produce a valid Task."""


class MissingRequiredError(BuilderError):
    """A required field was never supplied to the builder."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Required field '{field}' was not set")


class InvariantViolationError(BuilderError):
    """Staged values would break a Task invariant."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Field '{field}': {reason}")


class EncodeError(TaskHookError):
    """A Task could not be turned into JSON text."""


class FieldCollisionError(EncodeError):
    """A UDA name shadows a fixed-schema field name."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"UDA '{field}' collides with a fixed-schema field")

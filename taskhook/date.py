"""Codec for Taskwarrior's compact timestamp form.

Taskwarrior exports every date as ``YYYYMMDDTHHMMSSZ`` in UTC. In memory a
date is a naive :class:`datetime.datetime` read as UTC, with whole seconds.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from taskhook.errors import FormatError

DATE_FORMAT = "%Y%m%dT%H%M%SZ"

_DATE_RE = re.compile(r"(\d{4})(\d{2})(\d{2})T(\d{2})(\d{2})(\d{2})Z", re.ASCII)


def decode_date(text: str) -> datetime:
    """
    Parse a compact timestamp.

    Args:
        text: Date text such as "20230101T000000Z"

    Returns:
        Naive datetime in UTC

    Raises:
        FormatError: If the text is not exactly the compact form or names an
            impossible calendar date or time of day
    """
    if not isinstance(text, str):
        raise FormatError(text)
    match = _DATE_RE.fullmatch(text)
    if match is None:
        raise FormatError(text)
    try:
        return datetime(*(int(part) for part in match.groups()))
    except ValueError as e:
        raise FormatError(text) from e


def encode_date(value: datetime) -> str:
    """Format a datetime in the compact form, converting aware values to UTC."""
    value = normalize_date(value)
    # strftime does not zero-pad years below 1000 on every platform
    return (
        f"{value.year:04d}{value.month:02d}{value.day:02d}"
        f"T{value.hour:02d}{value.minute:02d}{value.second:02d}Z"
    )


def normalize_date(value: datetime) -> datetime:
    """Return `value` as a naive UTC datetime with whole seconds."""
    if value.tzinfo is not None and value.utcoffset() is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    elif value.tzinfo is not None:
        value = value.replace(tzinfo=None)
    return value.replace(microsecond=0)


def now() -> datetime:
    """Current instant as a naive UTC datetime."""
    return normalize_date(datetime.now(timezone.utc))


def coerce_date(value: object) -> datetime:
    """Accept wire text or a datetime; used by model validators."""
    if isinstance(value, datetime):
        return normalize_date(value)
    if isinstance(value, str):
        return decode_date(value)
    raise FormatError(value)

"""User-defined attribute storage."""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Any, Union

from taskhook.enums import UdaKind

# Any JSON value: str, int, float, bool, None, list or dict of JSON values
UdaValue = Union[str, int, float, bool, None, list[Any], dict[str, Any]]


def uda_kind(value: UdaValue) -> UdaKind:
    """Classify a UDA value by its JSON shape."""
    if value is None:
        return UdaKind.NULL
    if isinstance(value, bool):
        return UdaKind.BOOLEAN
    if isinstance(value, (int, float)):
        return UdaKind.NUMBER
    if isinstance(value, str):
        return UdaKind.TEXT
    if isinstance(value, (list, dict)):
        return UdaKind.STRUCTURED
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def _copy_json(value: Any) -> UdaValue:
    """Deep-copy a JSON value, rejecting anything json.dumps could not emit."""
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"JSON cannot represent {value!r}")
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, (list, tuple)):
        return [_copy_json(item) for item in value]
    if isinstance(value, dict):
        copied = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be strings, got {type(key).__name__}")
            copied[key] = _copy_json(item)
        return copied
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


class UdaRegistry:
    """
    Ordered mapping of UDA name to JSON value.

    Entries keep the order they were first set in; overwriting a name keeps
    its position. The registry knows nothing about the fixed task schema,
    the codec keeps the two name spaces apart.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: dict[str, UdaValue] | None = None):
        self._entries: dict[str, UdaValue] = {}
        if entries:
            for name, value in entries.items():
                self.set(name, value)

    def get(self, name: str, default: UdaValue = None) -> UdaValue:
        if name not in self._entries:
            return default
        return _copy_json(self._entries[name])

    def set(self, name: str, value: UdaValue) -> None:
        if not isinstance(name, str):
            raise TypeError(f"UDA name must be a string, got {type(name).__name__}")
        self._entries[name] = _copy_json(value)

    def remove(self, name: str) -> bool:
        """Drop `name`; returns False if it was not present."""
        return self._entries.pop(name, _MISSING) is not _MISSING

    def names(self) -> list[str]:
        return list(self._entries)

    def items(self) -> Iterator[tuple[str, UdaValue]]:
        """Yield (name, value) pairs in registry order; call again to restart."""
        for name in list(self._entries):
            yield name, _copy_json(self._entries[name])

    def copy(self) -> UdaRegistry:
        return UdaRegistry(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UdaRegistry):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"UdaRegistry({self._entries!r})"

    def __deepcopy__(self, memo: dict[int, Any]) -> UdaRegistry:
        return self.copy()


_MISSING = object()

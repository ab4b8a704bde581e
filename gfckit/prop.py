"""Typed property values with indexed sub-properties."""

from __future__ import annotations

import copy as _copy
from enum import Enum
from typing import Any


class PropertyKind(Enum):
    INT = "int"
    FLOAT = "float"
    STR = "str"
    IMG = "img"
    NONE = "none"


class Property:
    """A value that is an int, a float, a string, an image, or nothing.

    Images are copied when stored. ``indexed`` holds the indexed
    sub-properties stored under the same name.
    """

    __slots__ = ("_kind", "_value", "indexed")

    def __init__(self, value: Any = None) -> None:
        self.indexed: list[Property] = []
        if value is None:
            self._kind, self._value = PropertyKind.NONE, None
        elif isinstance(value, int):
            self._kind, self._value = PropertyKind.INT, int(value)
        elif isinstance(value, float):
            self._kind, self._value = PropertyKind.FLOAT, value
        elif isinstance(value, str):
            self._kind, self._value = PropertyKind.STR, value
        else:
            self._kind, self._value = PropertyKind.IMG, _copy.copy(value)

    @property
    def kind(self) -> PropertyKind:
        return self._kind

    @property
    def value(self) -> Any:
        return self._value

    @property
    def image(self) -> Any:
        """The stored image, or None if the property holds something else."""
        return self._value if self._kind is PropertyKind.IMG else None

    def copy(self) -> Property:
        """Return an independent copy, indexed sub-properties included."""
        result = Property()
        result._kind = self._kind
        result._value = (
            _copy.copy(self._value) if self._kind is PropertyKind.IMG else self._value
        )
        result.indexed = [p.copy() for p in self.indexed]
        return result

    def __int__(self) -> int:
        if self._kind is PropertyKind.INT:
            return self._value
        if self._kind is PropertyKind.FLOAT:
            return int(self._value)
        return 0

    def __float__(self) -> float:
        if self._kind is PropertyKind.FLOAT:
            return self._value
        if self._kind is PropertyKind.INT:
            return float(self._value)
        return 0.0

    def __str__(self) -> str:
        return self._value if self._kind is PropertyKind.STR else ""

    def __repr__(self) -> str:
        return f"Property({self._value!r})"
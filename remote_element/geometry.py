# remote_element/geometry.py
"""
@file geometry.py
@brief Position and size value types decoded from remote mappings.
"""

from __future__ import annotations
from dataclasses import dataclass
import math
from collections.abc import Mapping
from numbers import Real
from typing import Any

from .exceptions import ConversionError


def _mapping(raw: Any, expected: str) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        raise ConversionError(expected, raw)
    return raw


def _int_field(raw: Mapping[str, Any], key: str, expected: str) -> int:
    value = raw.get(key)
    # bool is a Real subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise ConversionError(expected, dict(raw), f"'{key}' must be a finite number")
    return int(value)


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    @classmethod
    def from_dict(cls, raw: Any) -> Point:
        data = _mapping(raw, "Point")
        return cls(_int_field(data, "x", "Point"), _int_field(data, "y", "Point"))


@dataclass(frozen=True)
class Dimension:
    width: int
    height: int

    @classmethod
    def from_dict(cls, raw: Any) -> Dimension:
        data = _mapping(raw, "Dimension")
        return cls(
            _int_field(data, "width", "Dimension"),
            _int_field(data, "height", "Dimension"),
        )


@dataclass(frozen=True)
class Rectangle:
    """
    Element bounding box.

    Fields are always passed by name: width and height keep the meaning of
    the remote mapping's "width" and "height" keys.
    """
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_dict(cls, raw: Any) -> Rectangle:
        data = _mapping(raw, "Rectangle")
        return cls(
            x=_int_field(data, "x", "Rectangle"),
            y=_int_field(data, "y", "Rectangle"),
            width=_int_field(data, "width", "Rectangle"),
            height=_int_field(data, "height", "Rectangle"),
        )

    def get_point(self) -> Point:
        return Point(self.x, self.y)

    def get_dimension(self) -> Dimension:
        return Dimension(self.width, self.height)

"""Position, size and time-range models."""

from __future__ import annotations

import struct
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .schema import EnumError

_MIN_DIMENSION = 2
_MAX_DIMENSION = 4096


def _to_float32(value: Any) -> float:
    """Round a JSON number to single precision."""
    return struct.unpack("f", struct.pack("f", float(value)))[0]


def _to_int32(value: Any) -> int:
    number = int(float(value))
    if not -(2**31) <= number < 2**31:
        raise OverflowError(f"{value!r} does not fit in 32 bits")
    return number


@dataclass
class Offset:
    """Relative horizontal and vertical displacement of an asset."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Offset":
        offset = cls()
        if data.get("x") is not None:
            offset.x = _to_float32(data["x"])
        if data.get("y") is not None:
            offset.y = _to_float32(data["y"])
        return offset

    def validate(self) -> None:
        if not -1 <= self.x <= 1:
            raise EnumError("Offset", "X", self.x)
        if not -1 <= self.y <= 1:
            raise EnumError("Offset", "Y", self.y)

    def to_dict(self) -> dict[str, Any]:
        return {key: value for key, value in (("x", self.x), ("y", self.y)) if value}


@dataclass
class Size:
    """A custom output width and height, each even and within bounds."""

    width: int | None = None
    height: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Size":
        size = cls()
        if data.get("width") is not None:
            size.width = _to_int32(data["width"])
        if data.get("height") is not None:
            size.height = _to_int32(data["height"])
        return size

    def validate(self) -> None:
        for name, value in (("Width", self.width), ("Height", self.height)):
            if value is None:
                continue
            if not _MIN_DIMENSION <= value <= _MAX_DIMENSION or value % 2:
                raise EnumError("Size", name, value)

    def to_dict(self) -> dict[str, Any]:
        return {
            key: value
            for key, value in (("width", self.width), ("height", self.height))
            if value is not None
        }


@dataclass
class Range:
    """A portion of the timeline to render, in seconds."""

    start: float | None = None
    length: float | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Range":
        rng = cls()
        if data.get("start") is not None:
            rng.start = _to_float32(data["start"])
        if data.get("length") is not None:
            rng.length = _to_float32(data["length"])
        return rng

    def validate(self) -> None:
        if self.start is not None and self.start < 0:
            raise EnumError("Range", "Start", self.start)
        if self.length is not None and self.length < 0:
            raise EnumError("Range", "Length", self.length)

    def to_dict(self) -> dict[str, Any]:
        return {
            key: value
            for key, value in (("start", self.start), ("length", self.length))
            if value is not None
        }
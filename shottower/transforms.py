"""Clip transformations and transitions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .geometry import _to_float32, _to_int32
from .schema import EnumError

_MAX_ANGLE = 360
_MAX_SKEW = 3

TRANSITIONS = frozenset(
    {
        "fade",
        "reveal",
        "wipeLeft",
        "wipeRight",
        "slideLeft",
        "slideRight",
        "slideUp",
        "slideDown",
        "carouselLeft",
        "carouselRight",
        "carouselUp",
        "carouselDown",
        "shuffleTopRight",
        "shuffleRightTop",
        "shuffleRightBottom",
        "shuffleBottomRight",
        "shuffleBottomLeft",
        "shuffleLeftBottom",
        "shuffleLeftTop",
        "zoom",
    }
)


@dataclass
class RotateTransformation:
    """Rotate a clip by an angle in degrees, clockwise when positive."""

    angle: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RotateTransformation":
        transform = cls()
        if data.get("angle") is not None:
            transform.angle = _to_int32(data["angle"])
        return transform

    def validate(self) -> None:
        if not -_MAX_ANGLE <= self.angle <= _MAX_ANGLE:
            raise EnumError("Soundtrack", "Angle", self.angle)

    def to_dict(self) -> dict[str, Any]:
        return {"angle": self.angle} if self.angle else {}


@dataclass
class SkewTransformation:
    """Shear a clip along its x and y axes."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SkewTransformation":
        transform = cls()
        if data.get("x") is not None:
            transform.x = _to_float32(data["x"])
        if data.get("y") is not None:
            transform.y = _to_float32(data["y"])
        return transform

    def validate(self) -> None:
        if not 0 <= self.x <= _MAX_SKEW:
            raise EnumError("Soundtrack", "X", self.x)
        if not 0 <= self.y <= _MAX_SKEW:
            raise EnumError("Soundtrack", "Y", self.y)

    def to_dict(self) -> dict[str, Any]:
        return {key: value for key, value in (("x", self.x), ("y", self.y)) if value}


@dataclass
class Transition:
    """The in and out transitions of a clip."""

    in_: str = ""
    out: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Transition":
        transition = cls()
        if data.get("in") is not None:
            transition.in_ = str(data["in"])
        if data.get("out") is not None:
            transition.out = str(data["out"])
        return transition

    def validate(self) -> None:
        if self.in_ and self.in_ not in TRANSITIONS:
            raise EnumError("Transition", "In", self.in_)
        if self.out and self.out not in TRANSITIONS:
            raise EnumError("Transition", "Out", self.out)

    def to_dict(self) -> dict[str, Any]:
        return {
            key: value
            for key, value in (("in", self.in_), ("out", self.out))
            if value
        }
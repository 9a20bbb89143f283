"""Output settings: format, resolution, frame rate and extra renders."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .destinations import Destination, parse_destination
from .geometry import Range, Size, _to_float32
from .schema import EnumError, check_required

FORMATS = ("mp4", "gif", "jpg", "png", "bmp", "mp3")
RESOLUTIONS = ("preview", "mobile", "sd", "hd", "1080", "360", "480", "540", "720")
ASPECT_RATIOS = ("16:9", "9:16", "1:1", "4:5", "4:3")
FRAME_RATES = (12, 15, 24, 23.976, 25, 29.97, 30)
SCALE_TO = ("preview", "mobile", "sd", "hd", "1080")
QUALITIES = ("lowest", "low", "medium", "high", "highest")

DEFAULT_ASPECT_RATIO = "16:9"
DEFAULT_FPS = 25.0
DEFAULT_QUALITY = "medium"

_FRAME_RATES32 = frozenset(_to_float32(rate) for rate in FRAME_RATES)


def _string(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, not {type(value).__name__}")
    return value


@dataclass
class Poster:
    """A poster image captured from the timeline at a point in seconds."""

    capture: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Poster":
        poster = cls()
        if data.get("capture") is not None:
            poster.capture = _to_float32(data["capture"])
        return poster

    def validate(self) -> None:
        check_required("Poster", {"capture": self.capture})
        if self.capture < 0:
            raise EnumError("Poster", "Capture", self.capture)

    def to_dict(self) -> dict[str, Any]:
        return {"capture": self.capture}


@dataclass
class Thumbnail:
    """A thumbnail captured from the timeline and scaled to the viewport."""

    capture: float = 0.0
    scale: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Thumbnail":
        thumbnail = cls()
        if data.get("capture") is not None:
            thumbnail.capture = _to_float32(data["capture"])
        if data.get("scale") is not None:
            thumbnail.scale = _to_float32(data["scale"])
        return thumbnail

    def validate(self) -> None:
        check_required(
            "Thumbnail", (("capture", self.capture), ("scale", self.scale))
        )
        if self.capture < 0:
            raise EnumError("Thumbnail", "Capture", self.capture)
        if self.scale < 0:
            raise EnumError("Thumbnail", "Scale", self.scale)

    def to_dict(self) -> dict[str, Any]:
        return {"capture": self.capture, "scale": self.scale}


@dataclass
class Output:
    """The output format, render range and type of media to generate."""

    format: str = ""
    resolution: str = ""
    aspect_ratio: str = DEFAULT_ASPECT_RATIO
    size: Size | None = None
    fps: float | None = DEFAULT_FPS
    scale_to: str = ""
    quality: str = DEFAULT_QUALITY
    repeat: bool = False
    range: Range | None = None
    poster: Poster | None = None
    thumbnail: Thumbnail | None = None
    destinations: list[Destination] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Output":
        output = cls(format=_string(data, "format"))
        if data.get("resolution") is not None:
            output.resolution = _string(data, "resolution")
        if data.get("aspectRatio") is not None:
            output.aspect_ratio = _string(data, "aspectRatio")
        if data.get("size") is not None:
            output.size = Size.from_dict(data["size"])
        if data.get("fps") is not None:
            output.fps = _to_float32(data["fps"])
        if data.get("scaleTo") is not None:
            output.scale_to = _string(data, "scaleTo")
        if data.get("quality") is not None:
            output.quality = _string(data, "quality")
        if data.get("repeat") is not None:
            output.repeat = bool(data["repeat"])
        if data.get("range") is not None:
            output.range = Range.from_dict(data["range"])
        if data.get("poster") is not None:
            output.poster = Poster.from_dict(data["poster"])
        if data.get("thumbnail") is not None:
            output.thumbnail = Thumbnail.from_dict(data["thumbnail"])
        if data.get("destinations") is not None:
            output.destinations = [
                parse_destination(item) for item in data["destinations"]
            ]
        return output

    @classmethod
    def from_json(cls, text: str | bytes) -> "Output":
        data = json.loads(text)
        if not isinstance(data, dict):
            raise TypeError("output JSON must be an object")
        return cls.from_dict(data)

    def _apply_defaults(self) -> None:
        if not self.aspect_ratio:
            self.aspect_ratio = DEFAULT_ASPECT_RATIO
        if self.fps is None:
            self.fps = DEFAULT_FPS
        if not self.quality:
            self.quality = DEFAULT_QUALITY

    def _check_enums(self) -> None:
        if self.format not in FORMATS:
            raise EnumError("Output", "Format", self.format)
        if self.resolution and self.resolution not in RESOLUTIONS:
            raise EnumError("Output", "Resolution", self.resolution)
        if self.aspect_ratio and self.aspect_ratio not in ASPECT_RATIOS:
            raise EnumError("Output", "AspectRatio", self.aspect_ratio)
        if self.fps is None or _to_float32(self.fps) not in _FRAME_RATES32:
            raise EnumError("Output", "Fps", self.fps)
        if self.scale_to and self.scale_to not in SCALE_TO:
            raise EnumError("Output", "ScaleTo", self.scale_to)
        if self.quality and self.quality not in QUALITIES:
            raise EnumError("Output", "Quality", self.quality)

    def validate(self) -> None:
        """Check required fields, fill defaults and check allowed values."""
        check_required("Output", {"format": self.format})
        self._apply_defaults()
        self._check_enums()
        for part in (self.size, self.range, self.poster, self.thumbnail):
            if part is not None:
                part.validate()

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"format": self.format}
        for key, value in (
            ("resolution", self.resolution),
            ("aspectRatio", self.aspect_ratio),
            ("scaleTo", self.scale_to),
            ("quality", self.quality),
        ):
            if value:
                result[key] = value
        if self.fps is not None:
            result["fps"] = self.fps
        if self.repeat:
            result["repeat"] = True
        for key, part in (
            ("size", self.size),
            ("range", self.range),
            ("poster", self.poster),
            ("thumbnail", self.thumbnail),
        ):
            if part is not None:
                result[key] = part.to_dict()
        if self.destinations:
            result["destinations"] = [d.to_dict() for d in self.destinations]
        return result
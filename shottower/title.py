"""Title assets and the timeline soundtrack."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .geometry import Offset, _to_float32
from .schema import EnumError, check_required

SOUNDTRACK_EFFECTS = frozenset({"fadeIn", "fadeOut", "fadeInFadeOut"})

_TITLE_TEXT_FIELDS = ("text", "style", "color", "size", "background", "position")


@dataclass
class TitleAsset:
    """A styled, positioned text title."""

    type: str = ""
    text: str = ""
    style: str = ""
    color: str = ""
    size: str = ""
    background: str = ""
    position: str = ""
    offset: Offset | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TitleAsset":
        kind = data["type"]
        if not isinstance(kind, str):
            raise TypeError(f"type must be a string, not {type(kind).__name__}")
        asset = cls(type=kind)
        for name in _TITLE_TEXT_FIELDS:
            if data.get(name) is not None:
                setattr(asset, name, str(data[name]))
        if data.get("offset") is not None:
            asset.offset = Offset.from_dict(data["offset"])
        return asset

    def validate(self) -> None:
        check_required("Title Asset", {"type": self.type, "text": self.text})
        if self.offset is not None:
            self.offset.validate()

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": self.type, "text": self.text}
        for name in _TITLE_TEXT_FIELDS[1:]:
            value = getattr(self, name)
            if value:
                result[name] = value
        if self.offset is not None:
            result["offset"] = self.offset.to_dict()
        return result


@dataclass
class Soundtrack:
    """An audio file played for the duration of the render."""

    src: str = ""
    effect: str = ""
    volume: float = 1.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Soundtrack":
        track = cls()
        if data.get("src") is not None:
            track.src = str(data["src"])
        if data.get("effect") is not None:
            track.effect = str(data["effect"])
        if data.get("volume") is not None:
            track.volume = _to_float32(data["volume"])
        return track

    def validate(self) -> None:
        if self.effect and self.effect not in SOUNDTRACK_EFFECTS:
            raise EnumError("Soundtrack", "Effect", self.effect)
        if not 0 <= self.volume <= 1:
            raise EnumError("Soundtrack", "Volume", self.volume)
        check_required("Soundtrack", {"src": self.src})

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"src": self.src, "volume": self.volume}
        if self.effect:
            result["effect"] = self.effect
        return result
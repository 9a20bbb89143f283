"""Subtitle streams burnt into a video."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .schema import EnumError


@dataclass
class Subtitle:
    """Select the subtitle stream, by index, to burn into the video."""

    index: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Subtitle":
        subtitle = cls()
        if data.get("index") is not None:
            subtitle.index = int(float(data["index"]))
        return subtitle

    def validate(self) -> None:
        if self.index < 0:
            raise EnumError("Subtitle", "Index", self.index)

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index}
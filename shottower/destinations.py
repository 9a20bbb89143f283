"""Destinations that rendered assets can be sent to."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from .schema import check_required


@dataclass
class MuxDestinationOptions:
    """Extra options controlling how Mux processes a video."""

    playback_policy: list[str] = field(default_factory=list)

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> "MuxDestinationOptions":
        policy = data.get("playbackPolicy")
        return cls(playback_policy=list(policy) if policy is not None else [])

    def validate(self) -> None:
        """Check that every playback policy entry is a string.

        The options have no required fields.
        """
        for policy in self.playback_policy:
            if not isinstance(policy, str):
                raise TypeError(
                    f"playback policy entries must be strings, not {type(policy).__name__}"
                )

    def to_dict(self) -> dict[str, Any]:
        return {"playbackPolicy": list(self.playback_policy)} if self.playback_policy else {}


def _provider(data: Mapping[str, Any]) -> str:
    provider = data["provider"]
    if not isinstance(provider, str):
        raise TypeError(f"provider must be a string, not {type(provider).__name__}")
    return provider


@dataclass
class MuxDestination:
    """Send rendered videos to the Mux hosting and streaming service."""

    provider: str = ""
    options: MuxDestinationOptions = field(default_factory=MuxDestinationOptions)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MuxDestination":
        destination = cls(provider=_provider(data))
        options = data.get("options")
        if options is not None:
            destination.options = (
                options
                if isinstance(options, MuxDestinationOptions)
                else MuxDestinationOptions._from_dict(options)
            )
        return destination

    def validate(self) -> None:
        check_required("Mux Destination", {"provider": self.provider})
        self.options.validate()

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"provider": self.provider}
        options = self.options.to_dict()
        if options:
            result["options"] = options
        return result


@dataclass
class ShotstackDestination:
    """Send rendered assets to the default hosting service."""

    provider: str = ""
    exclude: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ShotstackDestination":
        exclude = data.get("exclude")
        return cls(provider=_provider(data), exclude=bool(exclude) if exclude is not None else False)

    def validate(self) -> None:
        check_required("Shotstack Destination", {"provider": self.provider})

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"provider": self.provider}
        if self.exclude:
            result["exclude"] = True
        return result


Destination = Union[MuxDestination, ShotstackDestination]

_PROVIDERS = {
    "mux": MuxDestination,
    "shotstack": ShotstackDestination,
}


def parse_destination(data: Mapping[str, Any]) -> Destination:
    """Build the destination matching the ``provider`` key of *data*."""
    provider = _provider(data)
    try:
        kind = _PROVIDERS[provider]
    except KeyError:
        raise ValueError(f"unknown destination provider {provider!r}") from None
    return kind.from_dict(data)
"""Render status values and the responses returned when work is queued."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from .schema import check_required


class RenderStatus(IntEnum):
    """Lifecycle of a render task, public states first, internal ones after."""

    QUEUED = 0
    FETCHING = 1
    RENDERING = 2
    SAVING = 3
    DONE = 4
    FAILED = 5

    FETCHED = 6
    RENDERED = 7
    GENERATING = 8
    GENERATED = 9

    @property
    def label(self) -> str:
        """The lower-case name reported by the API."""
        return _LABELS[self]

    @property
    def is_internal(self) -> bool:
        """True for states used only while processing the queue."""
        return self >= RenderStatus.FETCHED

    def __str__(self) -> str:
        return self.label


_LABELS = {
    RenderStatus.QUEUED: "queue",
    RenderStatus.FETCHING: "fetching",
    RenderStatus.RENDERING: "rendering",
    RenderStatus.SAVING: "saving",
    RenderStatus.DONE: "done",
    RenderStatus.FAILED: "failed",
    RenderStatus.FETCHED: "fetched",
    RenderStatus.RENDERED: "rendered",
    RenderStatus.GENERATING: "generating",
    RenderStatus.GENERATED: "generated",
}


@dataclass
class QueuedResponseData:
    """The message and render id returned when a render is queued."""

    message: str = ""
    id: str = ""

    def validate(self) -> None:
        check_required(
            "Queued Response Data", {"message": self.message, "id": self.id}
        )

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "id": self.id}


@dataclass
class QueuedResponse:
    """The response sent after a render request has been queued."""

    success: bool = False
    message: str = ""
    response: QueuedResponseData = field(default_factory=QueuedResponseData)

    def validate(self) -> None:
        check_required(
            "Queued Response",
            {
                "success": self.success,
                "message": self.message,
                "response": self.response,
            },
        )
        self.response.validate()

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "response": self.response.to_dict(),
        }


@dataclass
class TemplateResponseData:
    """The message and template id returned when a template is saved."""

    message: str = ""
    id: str = ""

    def validate(self) -> None:
        check_required(
            "Template Response Data", {"message": self.message, "id": self.id}
        )

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "id": self.id}


@dataclass
class TemplateResponse:
    """The response sent after a template has been saved."""

    success: bool = False
    message: str = ""
    response: TemplateResponseData = field(default_factory=TemplateResponseData)

    def validate(self) -> None:
        check_required(
            "Template Response",
            {
                "success": self.success,
                "message": self.message,
                "response": self.response,
            },
        )
        self.response.validate()

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "response": self.response.to_dict(),
        }
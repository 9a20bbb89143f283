"""Responses describing saved templates and lists of templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .schema import check_required


@dataclass
class TemplateDataResponseData:
    """A saved template: its id, name, owner and the edit it holds."""

    id: str = ""
    name: str = ""
    owner: str = ""
    template: str = ""

    def validate(self) -> None:
        check_required(
            "Template Data Response Data",
            {
                "id": self.id,
                "name": self.name,
                "owner": self.owner,
                "template": self.template,
            },
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "owner": self.owner,
            "template": self.template,
        }


@dataclass
class TemplateDataResponse:
    """The response carrying the data of a single template."""

    success: bool = False
    message: str = ""
    response: TemplateDataResponseData = field(
        default_factory=TemplateDataResponseData
    )

    def validate(self) -> None:
        check_required(
            "Template Data Response",
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
class TemplateListResponseItem:
    """One entry of a template list."""

    id: str = ""
    name: str = ""
    created: str = ""
    updated: str = ""

    def validate(self) -> None:
        check_required(
            "Template List Response Item",
            {
                "id": self.id,
                "name": self.name,
                "created": self.created,
                "updated": self.updated,
            },
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "created": self.created,
            "updated": self.updated,
        }


@dataclass
class TemplateListResponseData:
    """The owner of a set of templates and the templates themselves."""

    owner: str = ""
    templates: list[TemplateListResponseItem] = field(default_factory=list)

    def validate(self) -> None:
        check_required(
            "Template List Response Data",
            {"owner": self.owner, "templates": self.templates},
        )
        for item in self.templates:
            item.validate()

    def to_dict(self) -> dict[str, Any]:
        return {
            "owner": self.owner,
            "templates": [item.to_dict() for item in self.templates],
        }


@dataclass
class TemplateListResponse:
    """The response listing previously saved templates."""

    success: bool = False
    message: str = ""
    response: TemplateListResponseData = field(
        default_factory=TemplateListResponseData
    )

    def validate(self) -> None:
        check_required(
            "Template List Response",
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
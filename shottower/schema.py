"""Validation errors and helpers shared by the API models."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


class RequiredError(ValueError):
    """A required field of a schema holds its zero value."""

    def __init__(self, schema: str, field: str) -> None:
        self.schema = schema
        self.field = field
        super().__init__(f"{schema}: required field '{field}' is missing or empty")


class EnumError(ValueError):
    """A field of a schema holds a value outside its allowed set or range."""

    def __init__(self, schema: str, field: str, value: Any) -> None:
        self.schema = schema
        self.field = field
        self.value = value
        super().__init__(f"{schema}: field '{field}' has an invalid value {value!r}")


def is_zero_value(value: Any) -> bool:
    """Return True when *value* is the empty or zero value of its kind."""
    if value is None:
        return True
    if isinstance(value, (bool, int, float, complex)):
        return not value
    if isinstance(value, (str, bytes, bytearray, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return all(
            is_zero_value(getattr(value, f.name)) for f in dataclasses.fields(value)
        )
    return False


def check_required(
    schema: str, fields: Mapping[str, Any] | Iterable[tuple[str, Any]]
) -> None:
    """Raise RequiredError for the first field that holds a zero value."""
    items = fields.items() if isinstance(fields, Mapping) else fields
    for name, value in items:
        if is_zero_value(value):
            raise RequiredError(schema, name)


@dataclass
class ProbeResponse:
    """The answer to a probe request: media information read by ffprobe."""

    success: bool = False
    message: str = ""
    response: dict[str, Any] = field(default_factory=dict)

    def validate(self) -> None:
        """Check that every required field is set."""
        check_required(
            "Probe Response",
            {
                "success": self.success,
                "message": self.message,
                "response": self.response,
            },
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "response": self.response,
        }
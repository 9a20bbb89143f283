"""Route table and small HTTP helpers for the API endpoints."""

from __future__ import annotations

import json
import re
import tempfile
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

JSON_CONTENT_TYPE = "application/json; charset=UTF-8"

_VARIABLE = re.compile(r"\{([^}:]+)(?::([^}]+))?\}")
_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def _compile(pattern: str) -> re.Pattern[str]:
    parts: list[str] = []
    position = 0
    for found in _VARIABLE.finditer(pattern):
        parts.append(re.escape(pattern[position : found.start()]))
        name, expression = found.group(1), found.group(2) or "[^/]+"
        parts.append(f"(?P<{name}>{expression})")
        position = found.end()
    parts.append(re.escape(pattern[position:]))
    return re.compile("".join(parts))


@dataclass
class Route:
    """An endpoint: its name, HTTP method, path pattern and handler."""

    name: str
    method: str
    pattern: str
    handler: Callable[..., Any]
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.method = self.method.upper()
        self._regex = _compile(self.pattern)

    def match(self, method: str, path: str) -> dict[str, str] | None:
        """Return the path variables when *method* and *path* match."""
        if method.upper() != self.method:
            return None
        candidates = [path]
        # Trailing slashes are treated as equivalent, as with a strict-slash router.
        if path.endswith("/") and len(path) > 1:
            candidates.append(path.rstrip("/"))
        else:
            candidates.append(path + "/")
        for candidate in candidates:
            found = self._regex.fullmatch(candidate)
            if found:
                return found.groupdict()
        return None


class RouteProvider(Protocol):
    def routes(self) -> Iterable[Route]: ...


class RouteTable:
    """An ordered collection of routes; the first matching route wins."""

    def __init__(self, routes: Iterable[Route] = ()) -> None:
        self._routes: list[Route] = []
        for route in routes:
            self.add(route)

    def add(self, route: Route) -> None:
        self._routes.append(route)

    def match(self, method: str, path: str) -> tuple[Route, dict[str, str]] | None:
        """Find the route for a request, with its path variables."""
        for route in self._routes:
            variables = route.match(method, path)
            if variables is not None:
                return route, variables
        return None

    def __getitem__(self, name: str) -> Route:
        for route in self._routes:
            if route.name == name:
                return route
        raise KeyError(name)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)


def new_router(*args: RouteProvider) -> RouteTable:
    """Collect the routes of every given API controller into one table."""
    table = RouteTable()
    for api in args:
        for route in api.routes():
            table.add(route)
    return table


def _jsonable(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"{type(value).__name__} is not JSON serialisable")


def encode_json_response(
    payload: Any, status: int | None = None
) -> tuple[int, dict[str, str], bytes]:
    """Encode *payload* as a JSON response: status, headers and body."""
    body = json.dumps(payload, default=_jsonable, separators=(",", ":")) + "\n"
    return (
        status if status is not None else 200,
        {"Content-Type": JSON_CONTENT_TYPE},
        body.encode("utf-8"),
    )


def parse_bool_parameter(param: str) -> bool:
    """Parse a boolean query parameter such as ``true``, ``F`` or ``1``."""
    if param in _TRUE:
        return True
    if param in _FALSE:
        return False
    raise ValueError(f"invalid boolean value {param!r}")


def write_temp_file(filename: str, data: bytes) -> Path:
    """Write uploaded *data* to a new temporary file named after *filename*."""
    with tempfile.NamedTemporaryFile(prefix=filename, delete=False) as handle:
        handle.write(data)
    return Path(handle.name)
import json

import pytest

from shottower.routing import (
    Route,
    RouteTable,
    encode_json_response,
    new_router,
    parse_bool_parameter,
    write_temp_file,
)
from shottower.responses import QueuedResponse, QueuedResponseData


def _handler(*args):
    return args


class _Api:
    def __init__(self, *routes):
        self._routes = routes

    def routes(self):
        return list(self._routes)


@pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
def test_parse_bool_true(text):
    assert parse_bool_parameter(text) is True


@pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
def test_parse_bool_false(text):
    assert parse_bool_parameter(text) is False


@pytest.mark.parametrize("text", ["", "yes", "tRuE", "2"])
def test_parse_bool_invalid(text):
    with pytest.raises(ValueError):
        parse_bool_parameter(text)


def test_encode_json_default_status_and_header():
    status, headers, body = encode_json_response({"a": 1})
    assert status == 200
    assert headers["Content-Type"] == "application/json; charset=UTF-8"
    assert body.endswith(b"\n")
    assert json.loads(body) == {"a": 1}


def test_encode_json_explicit_status():
    status, _, body = encode_json_response(["x"], 400)
    assert status == 400
    assert json.loads(body) == ["x"]


def test_encode_json_uses_to_dict():
    response = QueuedResponse(True, "Created", QueuedResponseData("m", "abc"))
    _, _, body = encode_json_response(response, 201)
    assert json.loads(body) == response.to_dict()


def test_encode_json_rejects_unknown_objects():
    with pytest.raises(TypeError):
        encode_json_response(object())


def test_new_router_collects_routes_in_order():
    first = Route("GetRender", "GET", "/stage/render/{id}", _handler)
    second = Route("PostRender", "post", "/stage/render", _handler)
    third = Route("Probe", "GET", "/stage/probe/{url}", _handler)
    table = new_router(_Api(first, second), _Api(third))
    assert [r.name for r in table] == ["GetRender", "PostRender", "Probe"]
    assert len(table) == 3
    assert table["PostRender"].method == "POST"


def test_match_extracts_variables():
    table = RouteTable([Route("GetRender", "GET", "/stage/render/{id}", _handler)])
    route, variables = table.match("get", "/stage/render/abc-123")
    assert route.name == "GetRender"
    assert variables == {"id": "abc-123"}


def test_match_ignores_trailing_slash():
    table = RouteTable([Route("PostRender", "POST", "/stage/render", _handler)])
    found = table.match("POST", "/stage/render/")
    assert found is not None
    assert found[0].name == "PostRender"


def test_match_wrong_method_or_path():
    table = RouteTable([Route("PostRender", "POST", "/stage/render", _handler)])
    assert table.match("GET", "/stage/render") is None
    assert table.match("POST", "/stage/templates") is None


def test_match_with_variable_regex():
    table = RouteTable([Route("Asset", "GET", "/serve/assets/{id:[0-9]+}", _handler)])
    assert table.match("GET", "/serve/assets/42")[1] == {"id": "42"}
    assert table.match("GET", "/serve/assets/abc") is None


def test_unknown_route_name():
    with pytest.raises(KeyError):
        RouteTable()["missing"]


def test_write_temp_file(tmp_path):
    path = write_temp_file("upload.mp4", b"\x00\x01data")
    try:
        assert path.read_bytes() == b"\x00\x01data"
        assert path.name.startswith("upload.mp4")
    finally:
        path.unlink()
import json
from dataclasses import dataclass

import pytest
import responses

from courierclient.api import (
    APIConfiguration,
    HTTPError,
    PagingResponse,
    get_field,
    to_json_map,
)

BASE = "http://courier.test"


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


@pytest.fixture
def api():
    return APIConfiguration(auth_token="token", base_url=BASE, sdk_version="1.0")


def test_execute_request_returns_body(rsps):
    rsps.add(responses.GET, BASE + "/", body=b"Ok", status=200)
    assert APIConfiguration(auth_token="").execute_request("GET", BASE + "/") == b"Ok"


def test_execute_request_sets_headers(rsps, api):
    rsps.add(responses.GET, BASE + "/x", body=b"{}", status=200)
    api.execute_request("GET", BASE + "/x", headers={"Idempotency-Key": "k1"})
    sent = rsps.calls[0].request.headers
    assert sent["Authorization"] == "Bearer token"
    assert sent["Content-Type"] == "application/json"
    assert sent["User-Agent"] == "courierclient/1.0"
    assert sent["Idempotency-Key"] == "k1"


def test_execute_request_accepts_no_content(rsps, api):
    rsps.add(responses.DELETE, BASE + "/x", status=204)
    assert api.execute_request("DELETE", BASE + "/x") == b""


def test_execute_request_raises_on_error_status(rsps, api):
    rsps.add(responses.POST, BASE + "/send", body="bad", status=400)
    with pytest.raises(HTTPError) as info:
        api.execute_request("POST", BASE + "/send", b"{}")
    assert info.value.status_code == 400
    assert info.value.error_message == "bad"


@pytest.mark.parametrize(
    "error, text",
    [
        (HTTPError(400, "bad"), "HTTP Error 400: bad"),
        (HTTPError(500), "HTTP Error 500: <no HTTP body>"),
    ],
)
def test_http_error_message(error, text):
    assert str(error) == text


@pytest.mark.parametrize(
    "method, expected_body",
    [(responses.GET, None), (responses.POST, b'{"x": 1}')],
)
def test_send_request_with_bytes_body_by_method(rsps, api, method, expected_body):
    rsps.add(method, BASE + "/profiles/a", body=b"done", status=200)
    result = api.send_request_with_bytes(method, "/profiles/a", b'{"x": 1}')
    assert rsps.calls[0].request.body == expected_body
    assert result == b"done"


@pytest.mark.parametrize(
    "reply, expected",
    [(b'{"messageId": "m1"}', {"messageId": "m1"}), (b"null", {})],
)
def test_send_request_with_maps(rsps, api, reply, expected):
    rsps.add(responses.POST, BASE + "/send", body=reply, status=200)
    assert api.send_request_with_maps("POST", "/send", {"event": "e"}) == expected
    assert json.loads(rsps.calls[0].request.body) == {"event": "e"}


def test_send_request_with_maps_rejects_non_object(rsps, api):
    rsps.add(responses.POST, BASE + "/x", body=b"[1, 2]", status=200)
    with pytest.raises(ValueError):
        api.send_request_with_maps("POST", "/x", {})


def test_send_request_with_json_encodes_dataclass(rsps, api):
    @dataclass
    class Body:
        name: str
        count: int

    rsps.add(responses.PUT, BASE + "/lists/a", json={"ok": True}, status=200)
    result = api.send_request_with_json("PUT", "/lists/a", Body(name="n", count=2))
    assert json.loads(rsps.calls[0].request.body) == {"name": "n", "count": 2}
    assert result == {"ok": True}


@dataclass
class _Inner:
    value: str


@dataclass
class _Outer:
    inner: _Inner
    items: list


@pytest.mark.parametrize(
    "value, expected",
    [
        (_Outer(_Inner("v"), [1, 2]), {"inner": {"value": "v"}, "items": [1, 2]}),
        ({"a": (1, 2)}, {"a": [1, 2]}),
        (None, {}),
    ],
)
def test_to_json_map(value, expected):
    assert to_json_map(value) == expected


def test_to_json_map_rejects_non_object():
    with pytest.raises(TypeError):
        to_json_map([1, 2, 3])


@pytest.mark.parametrize(
    "data, name, expected",
    [
        ({"id": "lower", "ID": "upper"}, "ID", "upper"),
        ({"id": "lower", "ID": "upper"}, "Id", "lower"),
        ({"a": 1}, "b", None),
        (None, "a", None),
    ],
)
def test_get_field(data, name, expected):
    assert get_field(data, name) == expected


@pytest.mark.parametrize(
    "data, expected",
    [
        ({"cursor": None, "more": False}, PagingResponse(None, False)),
        ({"Cursor": "abc", "More": True}, PagingResponse("abc", True)),
    ],
)
def test_paging_response_from_dict(data, expected):
    assert PagingResponse.from_dict(data) == expected
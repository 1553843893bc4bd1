import json

import pytest
import responses

from courierclient.api import HTTPError
from courierclient.client import create_client

BASE = "http://courier.test"


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


@pytest.fixture
def client():
    return create_client("token", BASE)


def test_get_profile(rsps, client):
    rsps.add(responses.GET, BASE + "/profiles/example", json={"profile": {"foo": "bar"}})
    response = client.get_profile("example")
    request = rsps.calls[0].request
    assert request.path_url == "/profiles/example"
    assert request.body is None
    assert response["profile"]["foo"] == "bar"


@pytest.mark.parametrize(
    "call, method",
    [("merge_profile_bytes", "POST"), ("update_profile_bytes", "PUT")],
)
def test_profile_write_sends_body(rsps, client, call, method):
    payload = json.dumps({"profile": {"email": "someone@example.com"}}).encode()
    rsps.add(method, BASE + "/profiles/123456789", json={"status": "SUCCESS"})
    result = getattr(client, call)("123456789", payload)
    request = rsps.calls[0].request
    assert result is None
    assert request.method == method
    assert request.path_url == "/profiles/123456789"
    assert json.loads(request.body) == {"profile": {"email": "someone@example.com"}}


def test_profile_write_accepts_no_content(rsps, client):
    rsps.add(responses.PUT, BASE + "/profiles/abc", status=204)
    assert client.update_profile_bytes("abc", b"{}") is None


def test_profile_error_is_raised(rsps, client):
    rsps.add(responses.POST, BASE + "/profiles/abc", body="invalid", status=400)
    with pytest.raises(HTTPError) as info:
        client.merge_profile_bytes("abc", b"{}")
    assert info.value.status_code == 400
    assert str(info.value) == "HTTP Error 400: invalid"
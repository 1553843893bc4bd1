import json
from datetime import datetime, timezone

import pytest
import responses

from courierclient.api import HTTPError
from courierclient.client import create_client
from courierclient.send import (
    SendBody,
    SendMessageRequestBody,
    with_idempotency_key,
    with_idempotency_key_expiration,
)

BASE = "https://api.example.com"
SEND_URL = BASE + "/send"
MESSAGE_ID = "123456789"
REQUEST_ID = "123456789"
EVENT_ID = "event-id"
RECIPIENT_ID = "recipient-id"


@pytest.fixture
def client():
    return create_client("token", BASE)


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def _sent_body(mocked, index=0):
    return json.loads(mocked.calls[index].request.body)


def test_send_map(mocked, client):
    mocked.add(responses.POST, SEND_URL, json={"messageId": MESSAGE_ID})
    body = {"profile": {"email": "[email]"}, "data": {"foo": "bar"}}
    result = client.send_map(EVENT_ID, RECIPIENT_ID, body)
    assert result == MESSAGE_ID
    sent = _sent_body(mocked)
    assert sent["event"] == EVENT_ID
    assert sent["recipient"] == RECIPIENT_ID
    assert sent["profile"]["email"] == "[email]"
    assert sent["data"]["foo"] == "bar"
    assert "event" not in body


def test_send(mocked, client):
    mocked.add(responses.POST, SEND_URL, json={"messageId": MESSAGE_ID})
    result = client.send(
        EVENT_ID, RECIPIENT_ID, SendBody(profile={"email": "[email]"}, data={"foo": "bar"})
    )
    assert result == MESSAGE_ID
    sent = _sent_body(mocked)
    assert sent["event"] == EVENT_ID
    assert sent["recipient"] == RECIPIENT_ID
    assert sent["profile"]["email"] == "[email]"
    assert sent["data"]["foo"] == "bar"
    assert "override" not in sent
    assert "brand" not in sent


def test_send_with_override(mocked, client):
    mocked.add(responses.POST, SEND_URL, json={"messageId": MESSAGE_ID})
    result = client.send(
        EVENT_ID,
        RECIPIENT_ID,
        SendBody(
            profile={"email": "[email]"},
            data={"foo": "bar"},
            override={"slack": {"body": {"reply_broadcast": True}}},
        ),
    )
    assert result == MESSAGE_ID
    sent = _sent_body(mocked)
    assert sent["data"]["foo"] == "bar"
    assert sent["override"]["slack"]["body"]["reply_broadcast"] is True


def test_send_with_brand(mocked, client):
    mocked.add(responses.POST, SEND_URL, json={"messageId": MESSAGE_ID})
    result = client.send(
        EVENT_ID,
        RECIPIENT_ID,
        SendBody(profile={"email": "[email]"}, data={"foo": "bar"}, brand="dispatcher"),
    )
    assert result == MESSAGE_ID
    sent = _sent_body(mocked)
    assert sent["brand"] == "dispatcher"
    assert sent["profile"]["email"] == "[email]"


def test_send_400_error(mocked, client):
    mocked.add(responses.POST, SEND_URL, json={"messageId": MESSAGE_ID}, status=400)
    with pytest.raises(HTTPError) as info:
        client.send(EVENT_ID, RECIPIENT_ID, SendBody(profile={"email": "[email]"}))
    assert info.value.status_code == 400


def test_send_message(mocked, client):
    mocked.add(responses.POST, SEND_URL, json={"requestId": REQUEST_ID})
    message = {"template": "my-template", "to": {"email": "[email]"}}
    result = client.send_message(SendMessageRequestBody(message=message))
    assert result == REQUEST_ID
    assert _sent_body(mocked) == {"message": message}


def test_send_message_timeout(mocked, client):
    mocked.add(responses.POST, SEND_URL, json={"requestId": REQUEST_ID})
    result = client.send_message(
        SendMessageRequestBody(
            message={"template": "my-template", "to": {"email": "[email]"}, "timeout": 3600000}
        )
    )
    assert result == REQUEST_ID
    assert _sent_body(mocked)["message"]["timeout"] == 3600000


def test_send_message_with_metadata(mocked, client):
    mocked.add(responses.POST, SEND_URL, json={"requestId": REQUEST_ID})
    result = client.send_message(
        SendMessageRequestBody(
            message={
                "template": "my-template",
                "to": {"email": "[email]"},
                "metadata": {"trace_id": "pikachu&eevee"},
            }
        )
    )
    assert result == REQUEST_ID
    assert _sent_body(mocked)["message"]["metadata"]["trace_id"] == "pikachu&eevee"


def test_send_message_with_granular_metadata(mocked, client):
    mocked.add(responses.POST, SEND_URL, json={"requestId": REQUEST_ID})
    message = {
        "template": "my-template",
        "to": {"email": "[email]"},
        "metadata": {"utm": {"source": "go"}},
        "channels": {"email": {"metadata": {"utm": {"medium": "email"}}}},
        "providers": {"sendgrid": {"metadata": {"utm": {"campaign": "sendgrid"}}}},
    }
    result = client.send_message(SendMessageRequestBody(message=message))
    assert result == REQUEST_ID
    assert _sent_body(mocked)["message"] == message


def test_send_message_map_without_request_id(mocked, client):
    mocked.add(responses.POST, SEND_URL, json={"other": "x"})
    with pytest.raises(ValueError):
        client.send_message_map({"message": {}})


def test_send_message_with_idempotency_key(mocked, client):
    mocked.add(responses.POST, SEND_URL, json={"requestId": REQUEST_ID})
    body = {"template": "my-template", "to": {"email": "[email]"}}
    result = client.send_message_with_options(body, "POST", with_idempotency_key("fake-key"))
    assert result == REQUEST_ID
    request = mocked.calls[0].request
    assert request.headers["Idempotency-Key"] == "fake-key"
    assert request.headers["Authorization"] == "Bearer token"
    assert json.loads(request.body) == body


def test_send_message_with_idempotency_key_and_expiration(mocked, client):
    mocked.add(responses.POST, SEND_URL, json={"requestId": REQUEST_ID})
    expiration = datetime(2021, 1, 1, tzinfo=timezone.utc)
    result = client.send_message_with_options(
        {"template": "my-template", "to": {"email": "[email]"}},
        "POST",
        with_idempotency_key("fake-key"),
        with_idempotency_key_expiration(expiration),
    )
    assert result == REQUEST_ID
    headers = mocked.calls[0].request.headers
    assert headers["Idempotency-Key"] == "fake-key"
    assert headers["x-idempotency-expiration"] == "1609459200000"


def test_empty_idempotency_key_sets_no_header():
    headers = {}
    with_idempotency_key("")(headers)
    assert headers == {}


def test_send_message_with_options_get_drops_body(mocked, client):
    mocked.add(responses.GET, SEND_URL, json={"requestId": REQUEST_ID})
    result = client.send_message_with_options({"template": "my-template"}, "GET")
    assert result == REQUEST_ID
    assert mocked.calls[0].request.body == b"null"
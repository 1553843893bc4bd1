"""Send endpoints: event-based sends and message-object sends."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from .api import APIConfiguration, _dumps, _json_field, to_json_map

Option = Callable[[dict[str, str]], None]
"""Adjusts the headers of an outgoing send request."""

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass
class SendBody:
    """The body of an event-based send."""

    profile: Any = None
    data: Any = None
    override: Any = _json_field(omitempty=True, default=None)
    brand: str = _json_field(omitempty=True, default="")


@dataclass
class SendMessageRequestBody:
    """The body of a send that carries a message object."""

    message: Any = None


def _string_member(response: Mapping[str, Any], key: str) -> str:
    if key not in response:
        raise ValueError(f"response has no {key}")
    value = response[key]
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"response {key} is not a string")
    return value


def _with_header(header: str, value: str) -> Option:
    def apply(headers: dict[str, str]) -> None:
        if header and value:
            headers[header] = value

    return apply


def with_idempotency_key(value: str) -> Option:
    """Set the Idempotency-Key header; an empty key sets nothing."""
    return _with_header("Idempotency-Key", value)


def with_idempotency_key_expiration(expiration: datetime) -> Option:
    """Set when the idempotency key expires, as milliseconds since the epoch."""
    if expiration.tzinfo is None:
        expiration = expiration.astimezone()
    millis = (expiration - _EPOCH) // timedelta(milliseconds=1)
    return _with_header("x-idempotency-expiration", str(millis))


class SendMixin:
    """Send endpoints; expects an ``api`` attribute holding an APIConfiguration."""

    api: APIConfiguration

    def send(self, event_id: str, recipient_id: str, body: Any) -> str:
        """Send an event to a recipient and return the message id."""
        return self.send_map(event_id, recipient_id, to_json_map(body))

    def send_map(self, event_id: str, recipient_id: str, body: Mapping[str, Any] | None) -> str:
        """Send an event given as a mapping and return the message id."""
        payload = dict(body or {})
        payload["event"] = event_id
        payload["recipient"] = recipient_id
        response = self.api.send_request_with_maps("POST", "/send", payload)
        return _string_member(response, "messageId")

    def send_message(self, body: Any) -> str:
        """Send a message object and return the request id."""
        return self.send_message_map(to_json_map(body))

    def send_message_map(self, body: Mapping[str, Any] | None) -> str:
        """Send a message given as a mapping and return the request id."""
        response = self.api.send_request_with_maps("POST", "/send", body)
        return _string_member(response, "requestId")

    def send_message_with_options(
        self, body: Mapping[str, Any] | None, method: str = "POST", *args: Option
    ) -> str:
        """Send a message with extra header options and return the request id."""
        if method == "GET":
            body = None
        headers: dict[str, str] = {}
        for option in args:
            option(headers)
        raw = self.api.execute_request(
            method, f"{self.api.base_url}/send", _dumps(body), headers
        )
        payload = json.loads(raw)
        if payload is None:
            return ""
        if not isinstance(payload, dict) or not all(
            value is None or isinstance(value, str) for value in payload.values()
        ):
            raise ValueError("response body is not a JSON object of strings")
        return payload.get("requestId") or ""
"""Low-level access to the Courier HTTP API: configuration, requests and JSON helpers."""

from __future__ import annotations

import base64
import dataclasses
import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

import requests

DEFAULT_BASE_URL = "https://api.courier.com"

_USER_AGENT_PREFIX = "courierclient/"


class HTTPError(Exception):
    """Raised when the API answers with a status outside the 2xx range."""

    def __init__(self, status_code: int, error_message: str | None = None) -> None:
        super().__init__(status_code, error_message)
        self.status_code = status_code
        self.error_message = error_message

    def __str__(self) -> str:
        message = "<no HTTP body>" if self.error_message is None else self.error_message
        return f"HTTP Error {self.status_code}: {message}"


def get_field(data: Any, name: str) -> Any:
    """Look up a JSON object member, preferring an exact key and falling back to any case."""
    if not isinstance(data, Mapping):
        return None
    if name in data:
        return data[name]
    lowered = name.lower()
    for key, value in data.items():
        if isinstance(key, str) and key.lower() == lowered:
            return value
    return None


@dataclass
class PagingResponse:
    """Paging information attached to list responses."""

    cursor: str | None = None
    more: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> PagingResponse:
        return cls(cursor=get_field(data, "cursor"), more=bool(get_field(data, "more")))


def _json_field(name: str | None = None, *, omitempty: bool = False, **kwargs: Any) -> Any:
    """Declare a dataclass field with its JSON member name and omit-when-empty rule."""
    metadata: dict[str, Any] = {"omitempty": omitempty}
    if name is not None:
        metadata["json"] = name
    return dataclasses.field(metadata=metadata, **kwargs)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, bytearray, list, tuple, Mapping)):
        return len(value) == 0
    if isinstance(value, (bool, int, float)):
        return not value
    return False


def _to_jsonable(value: Any) -> Any:
    """Turn dataclasses, enums and containers into plain JSON-ready values."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        encoded: dict[str, Any] = {}
        for field in dataclasses.fields(value):
            item = getattr(value, field.name)
            if field.metadata.get("omitempty") and _is_empty(item):
                continue
            encoded[field.metadata.get("json", field.name)] = _to_jsonable(item)
        return encoded
    if isinstance(value, Enum):
        return _to_jsonable(value.value)
    if isinstance(value, Mapping):
        return {str(key): _to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    return value


def _dumps(value: Any) -> bytes:
    return json.dumps(_to_jsonable(value)).encode("utf-8")


def to_json_map(value: Any) -> dict[str, Any]:
    """Encode a value to JSON and decode it back as a JSON object."""
    decoded = json.loads(_dumps(value))
    if decoded is None:
        return {}
    if not isinstance(decoded, dict):
        raise TypeError(f"cannot convert {type(value).__name__} to a JSON object")
    return decoded


@dataclass
class APIConfiguration:
    """What is needed to talk to the Courier API."""

    auth_token: str = ""
    base_url: str = DEFAULT_BASE_URL
    sdk_version: str = ""

    def send_request_with_json(self, method: str, relative_path: str, body: Any = None) -> Any:
        """Send a JSON-encoded body and return the decoded JSON response."""
        raw = self.send_request_with_bytes(method, relative_path, _dumps(body))
        return json.loads(raw)

    def send_request_with_maps(
        self, method: str, relative_path: str, body: Mapping[str, Any] | None
    ) -> dict[str, Any]:
        """Send a mapping as JSON and return the response as a dictionary."""
        raw = self.send_request_with_bytes(method, relative_path, _dumps(body))
        decoded = json.loads(raw)
        if decoded is None:
            return {}
        if not isinstance(decoded, dict):
            raise ValueError("response body is not a JSON object")
        return decoded

    def send_request_with_bytes(
        self, method: str, relative_path: str, body: bytes | str | None
    ) -> bytes:
        """Send raw bytes to a path below the base URL; GET requests carry no body."""
        if method == "GET":
            body = None
        return self.execute_request(method, self.base_url + relative_path, body)

    def execute_request(
        self,
        method: str,
        url: str,
        body: bytes | str | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> bytes:
        """Issue a request with the headers the API expects and return the response body."""
        request_headers = dict(headers or {})
        request_headers["Authorization"] = "Bearer " + self.auth_token
        request_headers["Content-Type"] = "application/json"
        request_headers["User-Agent"] = _USER_AGENT_PREFIX + self.sdk_version
        response = requests.request(method, url, data=body, headers=request_headers)
        if not 200 <= response.status_code < 300:
            raise HTTPError(response.status_code, response.text)
        return response.content
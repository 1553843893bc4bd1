"""List endpoints: named recipient lists and their subscriptions."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlencode

from .api import APIConfiguration, PagingResponse, _dumps, _json_field, get_field, to_json_map

_LIST_ID_REQUIRED = "List ID is required"
_RECIPIENT_ID_REQUIRED = "Recipient ID is required"


@dataclass
class ListResponse:
    """A list as stored by the API."""

    id: str = ""
    name: str = ""
    created: str = ""
    updated: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> ListResponse:
        return cls(
            id=get_field(data, "id") or "",
            name=get_field(data, "name") or "",
            created=get_field(data, "created") or "",
            updated=get_field(data, "updated") or "",
        )


def _paging(data: Any) -> PagingResponse | None:
    raw = get_field(data, "paging")
    return PagingResponse.from_dict(raw) if raw is not None else None


@dataclass
class ListsResponse:
    """One page of lists."""

    paging: PagingResponse | None = None
    items: list[ListResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> ListsResponse:
        return cls(
            paging=_paging(data),
            items=[
                ListResponse.from_dict(item)
                for item in get_field(data, "items") or []
                if item is not None
            ],
        )


@dataclass
class PutListBody:
    """The body for creating or replacing a list."""

    name: str = ""
    preferences: Any = _json_field(omitempty=True, default=None)


@dataclass
class ListSubscriptionItem:
    """A recipient subscribed to a list."""

    recipient_id: str = ""
    created: str = ""
    preferences: Any = None

    @classmethod
    def from_dict(cls, data: Any) -> ListSubscriptionItem:
        return cls(
            recipient_id=get_field(data, "recipientId") or "",
            created=get_field(data, "created") or "",
            preferences=get_field(data, "preferences"),
        )


@dataclass
class ListSubscriptionsResponse:
    """One page of the subscriptions of a list."""

    paging: PagingResponse | None = None
    items: list[ListSubscriptionItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> ListSubscriptionsResponse:
        return cls(
            paging=_paging(data),
            items=[
                ListSubscriptionItem.from_dict(item)
                for item in get_field(data, "items") or []
                if item is not None
            ],
        )


@dataclass
class ListRecipient:
    """A recipient to subscribe, with optional preferences."""

    recipient_id: str = _json_field("recipientId", omitempty=True, default="")
    preferences: Any = _json_field(omitempty=True, default=None)


@dataclass
class ListSubscriptionBody:
    """The body for subscribing several recipients to a list."""

    recipients: list[ListRecipient] = field(default_factory=list)


@dataclass
class ListSubscriptionRecipientBody:
    """The body for subscribing one recipient to a list."""

    preferences: Any = _json_field(omitempty=True, default=None)


def _require(value: str, message: str) -> None:
    if not value:
        raise ValueError(message)


class ListsMixin:
    """List endpoints; expects an ``api`` attribute holding an APIConfiguration."""

    api: APIConfiguration

    def get_lists(self, cursor: str = "", pattern: str = "") -> ListsResponse:
        """Fetch one page of lists, optionally filtered by a pattern."""
        params = {key: value for key, value in (("cursor", cursor), ("pattern", pattern)) if value}
        url = f"{self.api.base_url}/lists"
        if params:
            url += "?" + urlencode(params)
        return ListsResponse.from_dict(json.loads(self.api.execute_request("GET", url)))

    def get_list(self, list_id: str) -> ListResponse:
        """Fetch one list by id."""
        _require(list_id, _LIST_ID_REQUIRED)
        raw = self.api.execute_request("GET", f"{self.api.base_url}/lists/{list_id}")
        return ListResponse.from_dict(json.loads(raw))

    def put_list(self, list_id: str, body: Any) -> None:
        """Create or replace a list."""
        self.api.send_request_with_maps("PUT", "/lists/" + list_id, to_json_map(body))

    def delete_list(self, list_id: str) -> None:
        """Delete a list."""
        _require(list_id, _LIST_ID_REQUIRED)
        self.api.execute_request("DELETE", f"{self.api.base_url}/lists/{list_id}")

    def restore_list(self, list_id: str) -> None:
        """Restore a deleted list."""
        _require(list_id, _LIST_ID_REQUIRED)
        self.api.execute_request("PUT", f"{self.api.base_url}/lists/{list_id}/restore")

    def get_list_subscriptions(self, list_id: str, cursor: str = "") -> ListSubscriptionsResponse:
        """Fetch one page of the subscriptions of a list."""
        _require(list_id, _LIST_ID_REQUIRED)
        url = f"{self.api.base_url}/lists/{list_id}/subscriptions"
        if cursor:
            url += "?cursor=" + cursor
        return ListSubscriptionsResponse.from_dict(json.loads(self.api.execute_request("GET", url)))

    def put_list_subscriptions(self, list_id: str, body: Any) -> None:
        """Replace the subscribers of a list."""
        _require(list_id, _LIST_ID_REQUIRED)
        self.api.send_request_with_maps(
            "PUT", "/lists/" + list_id + "/subscriptions", to_json_map(body)
        )

    def post_list_subscriptions(self, list_id: str, body: Any) -> None:
        """Add subscribers to a list."""
        _require(list_id, _LIST_ID_REQUIRED)
        self.api.send_request_with_maps(
            "POST", "/lists/" + list_id + "/subscriptions", to_json_map(body)
        )

    def list_subscribe(self, list_id: str, recipient_id: str, body: Any = None) -> None:
        """Subscribe one recipient to a list."""
        _require(list_id, _LIST_ID_REQUIRED)
        _require(recipient_id, _RECIPIENT_ID_REQUIRED)
        to_json_map(body)
        self.api.send_request_with_bytes(
            "PUT", "/lists/" + list_id + "/subscriptions/" + recipient_id, _dumps(body)
        )

    def list_unsubscribe(self, list_id: str, recipient_id: str) -> None:
        """Remove one recipient from a list."""
        _require(list_id, _LIST_ID_REQUIRED)
        _require(recipient_id, _RECIPIENT_ID_REQUIRED)
        self.api.execute_request(
            "DELETE", f"{self.api.base_url}/lists/{list_id}/subscriptions/{recipient_id}"
        )
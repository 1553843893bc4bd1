"""Message status lookups and webhook payloads."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from functools import partial
from typing import Any, Callable, TypeVar

from .api import APIConfiguration, get_field

_T = TypeVar("_T")


def _build(cls: type[_T], data: Any, **converters: Callable[[Any], Any]) -> _T:
    """Build dataclass ``cls`` from decoded JSON, keeping defaults for absent or null fields."""
    values = {}
    for spec in fields(cls):
        raw = get_field(data, spec.name)
        if raw is None:
            continue
        convert = converters.get(spec.name)
        values[spec.name] = convert(raw) if convert else raw
    return cls(**values)


@dataclass
class ProvidersChannelResponse:
    """The channel section of a provider entry."""

    key: str = ""
    name: str = ""
    template: str = ""


@dataclass
class ProvidersResponse:
    """One provider's delivery record for a message."""

    channel: ProvidersChannelResponse | None = None
    error: str = ""
    status: str = ""
    delivered: int = 0
    sent: int = 0
    clicked: int = 0
    provider: str = ""
    reference: Any = None


def _message_from_dict(cls: type[_T], provider_cls: type, data: Any) -> _T:
    channel = partial(_build, ProvidersChannelResponse)

    def providers(items: Any) -> list:
        return [_build(provider_cls, item, channel=channel) for item in items if item is not None]

    return _build(cls, data, providers=providers)


@dataclass
class MessageResponse:
    """The state of a message as reported by the messages endpoints."""

    id: str = ""
    event: str = ""
    notification: str = ""
    status: str = ""
    error: str = ""
    reason: str = ""
    recipient: str = ""
    enqueued: int = 0
    delivered: int = 0
    sent: int = 0
    clicked: int = 0
    providers: list[ProvidersResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> MessageResponse:
        return _message_from_dict(cls, ProvidersResponse, data)


@dataclass
class WebhookResponse:
    """The payload delivered by an outbound webhook."""

    data: MessageResponse = field(default_factory=MessageResponse)
    type: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> WebhookResponse:
        return _build(cls, data, data=MessageResponse.from_dict)


class MessagesMixin:
    """Message endpoints; expects an ``api`` attribute holding an APIConfiguration."""

    api: APIConfiguration

    def get_message(self, message_id: str) -> MessageResponse:
        """Fetch one message by id."""
        data = self.api.send_request_with_json("GET", "/messages/" + message_id)
        return MessageResponse.from_dict(data)
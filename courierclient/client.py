"""The Courier client that combines every endpoint group."""

from __future__ import annotations

from dataclasses import dataclass

from .api import DEFAULT_BASE_URL, APIConfiguration
from .audiences import AudiencesMixin
from .audit_events import AuditEventsMixin
from .automations import AutomationsMixin
from .brands import BrandsMixin
from .bulk import BulkMixin
from .lists import ListsMixin
from .messages import MessagesMixin
from .notifications import NotificationsMixin
from .profiles import ProfilesMixin
from .send import SendMixin

VERSION = "2.7.0"


@dataclass
class Client(
    MessagesMixin,
    ProfilesMixin,
    AudiencesMixin,
    AuditEventsMixin,
    AutomationsMixin,
    BulkMixin,
    BrandsMixin,
    ListsMixin,
    NotificationsMixin,
    SendMixin,
):
    """Talks to the Courier API through one shared configuration."""

    api: APIConfiguration


def create_client(auth_token: str, base_url: str | None = None) -> Client:
    """Create a client; without a base URL the public Courier API is used."""
    return Client(
        api=APIConfiguration(
            auth_token=auth_token,
            base_url=DEFAULT_BASE_URL if base_url is None else base_url,
            sdk_version=VERSION,
        )
    )
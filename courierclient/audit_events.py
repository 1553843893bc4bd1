"""Audit event endpoints."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlencode

from .api import APIConfiguration, PagingResponse, get_field


@dataclass
class AuditEventActor:
    """Who performed an audited action."""

    email: str = ""
    id: str = ""


@dataclass
class AuditEventTarget:
    """What an audited action was performed on."""

    email: str = ""
    id: str = ""


@dataclass
class AuditEvent:
    """One recorded audit event."""

    audit_event_id: str = ""
    source: str = ""
    timestamp: str = ""
    type: str = ""
    actor: AuditEventActor | None = None
    target: AuditEventTarget | None = None

    @classmethod
    def from_dict(cls, data: Any) -> AuditEvent:
        actor = get_field(data, "actor")
        target = get_field(data, "target")
        return cls(
            audit_event_id=get_field(data, "auditEventId") or "",
            source=get_field(data, "source") or "",
            timestamp=get_field(data, "timestamp") or "",
            type=get_field(data, "type") or "",
            actor=(
                AuditEventActor(
                    email=get_field(actor, "email") or "", id=get_field(actor, "id") or ""
                )
                if actor is not None
                else None
            ),
            target=(
                AuditEventTarget(
                    email=get_field(target, "email") or "", id=get_field(target, "id") or ""
                )
                if target is not None
                else None
            ),
        )


@dataclass
class ListAuditEventsResponse:
    """One page of audit events."""

    results: list[AuditEvent] = field(default_factory=list)
    paging: PagingResponse | None = None

    @classmethod
    def from_dict(cls, data: Any) -> ListAuditEventsResponse:
        paging = get_field(data, "paging")
        return cls(
            results=[
                AuditEvent.from_dict(item)
                for item in get_field(data, "results") or []
                if item is not None
            ],
            paging=PagingResponse.from_dict(paging) if paging is not None else None,
        )


class AuditEventsMixin:
    """Audit event endpoints; expects an ``api`` attribute holding an APIConfiguration."""

    api: APIConfiguration

    def get_audit_event(self, audit_event_id: str) -> AuditEvent:
        """Fetch one audit event by id."""
        if not audit_event_id:
            raise ValueError("audit Event ID is required")
        raw = self.api.execute_request("GET", f"{self.api.base_url}/audit-events/{audit_event_id}")
        return AuditEvent.from_dict(json.loads(raw))

    def list_audit_events(self, cursor: str = "") -> ListAuditEventsResponse:
        """Fetch one page of audit events."""
        url = f"{self.api.base_url}/audit-events"
        if cursor:
            url += "?" + urlencode({"cursor": cursor})
        return ListAuditEventsResponse.from_dict(json.loads(self.api.execute_request("GET", url)))
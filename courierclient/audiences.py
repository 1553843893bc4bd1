"""Audience endpoints: filter-defined groups of recipients."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlencode

import requests

from .api import (
    APIConfiguration,
    HTTPError,
    PagingResponse,
    _json_field,
    get_field,
    to_json_map,
)

_ID_REQUIRED = "Audience ID is required"


@dataclass
class SingleFilter:
    """A single comparison rule on a profile path."""

    operator: str = ""
    path: str = ""
    value: str = ""


@dataclass
class NestedFilter:
    """A combination of single rules joined by an operator."""

    operator: str = ""
    rules: list[SingleFilter] = field(default_factory=list)


@dataclass
class Audience:
    """The body used to create or replace an audience."""

    description: str = _json_field(omitempty=True, default="")
    filter: SingleFilter | NestedFilter | None = None
    name: str = _json_field(omitempty=True, default="")


@dataclass
class AudienceResponseBody:
    """An audience as stored by the API."""

    id: str = ""
    description: str = ""
    created_at: str = ""
    filter: Any = None
    name: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> AudienceResponseBody:
        return cls(
            id=get_field(data, "id") or "",
            description=get_field(data, "description") or "",
            created_at=get_field(data, "created_at") or "",
            filter=get_field(data, "filter"),
            name=get_field(data, "name") or "",
            updated_at=get_field(data, "updated_at") or "",
        )


@dataclass
class AudienceResponse:
    """The response to creating or replacing an audience."""

    audience: AudienceResponseBody = field(default_factory=AudienceResponseBody)

    @classmethod
    def from_dict(cls, data: Any) -> AudienceResponse:
        return cls(audience=AudienceResponseBody.from_dict(get_field(data, "audience") or {}))


@dataclass
class AudienceMember:
    """A recipient that currently matches an audience."""

    audience_id: str = ""
    added_at: str = ""
    audience_version: int = 0
    member_id: str = ""
    reason: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> AudienceMember:
        return cls(
            audience_id=get_field(data, "audience_id") or "",
            added_at=get_field(data, "added_at") or "",
            audience_version=get_field(data, "audience_version") or 0,
            member_id=get_field(data, "member_id") or "",
            reason=get_field(data, "reason") or "",
        )


def _paging(data: Any) -> PagingResponse | None:
    raw = get_field(data, "paging")
    return PagingResponse.from_dict(raw) if raw is not None else None


@dataclass
class GetAudienceMembersResponse:
    """One page of audience members."""

    items: list[AudienceMember] = field(default_factory=list)
    paging: PagingResponse | None = None

    @classmethod
    def from_dict(cls, data: Any) -> GetAudienceMembersResponse:
        return cls(
            items=[
                AudienceMember.from_dict(item)
                for item in get_field(data, "items") or []
                if item is not None
            ],
            paging=_paging(data),
        )


@dataclass
class GetAudiencesResponse:
    """One page of audiences."""

    items: list[AudienceResponseBody] = field(default_factory=list)
    paging: PagingResponse | None = None

    @classmethod
    def from_dict(cls, data: Any) -> GetAudiencesResponse:
        return cls(
            items=[
                AudienceResponseBody.from_dict(item)
                for item in get_field(data, "items") or []
                if item is not None
            ],
            paging=_paging(data),
        )


def _with_cursor(url: str, cursor: str) -> str:
    return f"{url}?{urlencode({'cursor': cursor})}" if cursor else url


class AudiencesMixin:
    """Audience endpoints; expects an ``api`` attribute holding an APIConfiguration."""

    api: APIConfiguration

    def put_audience(self, audience_id: str, audience: Audience) -> AudienceResponse:
        """Create or replace the audience with the given id."""
        if not audience_id:
            raise ValueError(_ID_REQUIRED)
        if not isinstance(audience.filter, (SingleFilter, NestedFilter)):
            raise TypeError("Audience filter must be of type SingleFilter or NestFilter")
        data = self.api.send_request_with_maps(
            "PUT", f"/audiences/{audience_id}", to_json_map(audience)
        )
        return AudienceResponse.from_dict(data)

    def get_audience(self, audience_id: str) -> AudienceResponseBody:
        """Fetch one audience; raises LookupError when the request fails."""
        if not audience_id:
            raise ValueError(_ID_REQUIRED)
        try:
            raw = self.api.execute_request("GET", f"{self.api.base_url}/audiences/{audience_id}")
        except (HTTPError, requests.RequestException) as exc:
            raise LookupError(f"AudienceId {audience_id}, not found") from exc
        return AudienceResponseBody.from_dict(json.loads(raw))

    def get_audience_members(self, audience_id: str, cursor: str = "") -> GetAudienceMembersResponse:
        """Fetch one page of the members of an audience."""
        if not audience_id:
            raise ValueError(_ID_REQUIRED)
        url = _with_cursor(f"{self.api.base_url}/audiences/{audience_id}/members", cursor)
        return GetAudienceMembersResponse.from_dict(json.loads(self.api.execute_request("GET", url)))

    def get_audiences(self, cursor: str = "") -> GetAudiencesResponse:
        """Fetch one page of all audiences."""
        url = _with_cursor(f"{self.api.base_url}/audiences", cursor)
        return GetAudiencesResponse.from_dict(json.loads(self.api.execute_request("GET", url)))

    def delete_audience(self, audience_id: str) -> None:
        """Delete an audience; raises LookupError when the request fails."""
        if not audience_id:
            raise ValueError(_ID_REQUIRED)
        try:
            self.api.execute_request("DELETE", f"{self.api.base_url}/audiences/{audience_id}")
        except (HTTPError, requests.RequestException) as exc:
            raise LookupError(f"AudienceId {audience_id}, not found") from exc
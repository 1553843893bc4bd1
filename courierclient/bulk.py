"""Bulk job endpoints: create, fill, run and inspect bulk sends."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlencode

from .api import APIConfiguration, PagingResponse, get_field, to_json_map

_ID_REQUIRED = "Job ID is required"


@dataclass
class Job:
    """The state of a bulk job."""

    definition: Any = None
    enqueued: int = 0
    failures: int = 0
    received: int = 0
    status: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Job:
        return cls(
            definition=get_field(data, "definition"),
            enqueued=get_field(data, "enqueued") or 0,
            failures=get_field(data, "failures") or 0,
            received=get_field(data, "received") or 0,
            status=get_field(data, "status") or "",
        )


@dataclass
class CreateJobBody:
    """The body for creating a bulk job."""

    message: Any = None


@dataclass
class IngestJobBody:
    """The body for adding users to a bulk job."""

    users: list[Any] = field(default_factory=list)


@dataclass
class GetBulkJobResponse:
    """The response of a bulk job lookup; ``job`` is the raw job document."""

    job: Any = None


@dataclass
class GetBulkJobUsersResponse:
    """One page of the users of a bulk job."""

    items: list[Any] = field(default_factory=list)
    paging: PagingResponse | None = None


@dataclass
class IngestBulkJobResponse:
    """The outcome of adding users to a bulk job."""

    errors: list[Any] = field(default_factory=list)
    total: int = 0


def _string_member(response: dict[str, Any], key: str) -> str:
    if key not in response:
        raise ValueError(f"response has no {key}")
    value = response[key]
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"response {key} is not a string")
    return value


class BulkMixin:
    """Bulk endpoints; expects an ``api`` attribute holding an APIConfiguration."""

    api: APIConfiguration

    def create_job(self, body: Any) -> str:
        """Create a bulk job and return its id."""
        response = self.api.send_request_with_maps("POST", "/bulk", to_json_map(body))
        return _string_member(response, "jobId")

    def ingest_job(self, job_id: str, body: Any) -> IngestBulkJobResponse:
        """Add users to a bulk job."""
        data = self.api.send_request_with_json("POST", "/bulk/" + job_id, body)
        return IngestBulkJobResponse(
            errors=list(get_field(data, "errors") or []),
            total=get_field(data, "total") or 0,
        )

    def run_job(self, job_id: str) -> None:
        """Start sending a bulk job."""
        self.api.send_request_with_bytes("POST", "/bulk/" + job_id + "/run", None)

    def get_job(self, job_id: str) -> GetBulkJobResponse:
        """Fetch a bulk job."""
        if not job_id:
            raise ValueError(_ID_REQUIRED)
        raw = self.api.execute_request("GET", f"{self.api.base_url}/bulk/{job_id}")
        return GetBulkJobResponse(job=get_field(json.loads(raw), "job"))

    def get_job_users(self, job_id: str, cursor: str = "") -> GetBulkJobUsersResponse:
        """Fetch one page of the users of a bulk job."""
        if not job_id:
            raise ValueError(_ID_REQUIRED)
        url = f"{self.api.base_url}/bulk/{job_id}/users"
        if cursor:
            url += "?" + urlencode({"cursor": cursor})
        data = json.loads(self.api.execute_request("GET", url))
        paging = get_field(data, "paging")
        return GetBulkJobUsersResponse(
            items=list(get_field(data, "items") or []),
            paging=PagingResponse.from_dict(paging) if paging is not None else None,
        )
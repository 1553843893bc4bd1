"""Notification template endpoints: content, variations and submission checks."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlencode

from .api import APIConfiguration, PagingResponse, _json_field, get_field, to_json_map

_NOTIFICATION_ID_REQUIRED = "Notification ID is required"
_SUBMISSION_ID_REQUIRED = "Submission ID is required"


def _require(value: str, message: str) -> None:
    if not value:
        raise ValueError(message)


def _paging(data: Any) -> PagingResponse | None:
    raw = get_field(data, "paging")
    return PagingResponse.from_dict(raw) if raw is not None else None


@dataclass
class NotificationResponse:
    """A notification template as listed by the API."""

    id: str = ""
    title: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NotificationResponse:
        return cls(id=get_field(data, "id") or "", title=get_field(data, "title") or "")


@dataclass
class NotificationsResponse:
    """One page of notification templates."""

    paging: PagingResponse | None = None
    results: list[NotificationResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> NotificationsResponse:
        return cls(
            paging=_paging(data),
            results=[
                NotificationResponse.from_dict(item)
                for item in get_field(data, "results") or []
                if item is not None
            ],
        )


@dataclass
class NotificationContentResponse:
    """The blocks and channels that make up a notification's content."""

    blocks: list[Any] = field(default_factory=list)
    channels: list[Any] = _json_field(omitempty=True, default_factory=list)
    checksum: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NotificationContentResponse:
        return cls(
            blocks=list(get_field(data, "blocks") or []),
            channels=list(get_field(data, "channels") or []),
            checksum=get_field(data, "checksum") or "",
        )


@dataclass
class NotificationVariationsRequestBody:
    """The body for posting locale variations of blocks and channels."""

    blocks: list[Any] = _json_field(omitempty=True, default_factory=list)
    channels: list[Any] = _json_field(omitempty=True, default_factory=list)


@dataclass
class SubmissionCheck:
    """One check attached to a notification submission."""

    id: str = ""
    status: str = ""
    type: str = ""
    updated: int = _json_field(omitempty=True, default=0)

    @classmethod
    def from_dict(cls, data: Any) -> SubmissionCheck:
        return cls(
            id=get_field(data, "id") or "",
            status=get_field(data, "status") or "",
            type=get_field(data, "type") or "",
            updated=get_field(data, "updated") or 0,
        )


@dataclass
class NotificationSubmissionChecksResponse:
    """The checks of a notification submission."""

    checks: list[SubmissionCheck] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> NotificationSubmissionChecksResponse:
        return cls(
            checks=[
                SubmissionCheck.from_dict(item)
                for item in get_field(data, "checks") or []
                if item is not None
            ]
        )


@dataclass
class NotificationSubmissionChecksRequest:
    """The body for replacing the checks of a notification submission."""

    checks: list[SubmissionCheck] = field(default_factory=list)


class NotificationsMixin:
    """Notification endpoints; expects an ``api`` attribute holding an APIConfiguration."""

    api: APIConfiguration

    def get_notifications(self, cursor: str = "") -> NotificationsResponse:
        """Fetch one page of notification templates."""
        url = f"{self.api.base_url}/notifications"
        if cursor:
            url += "?" + urlencode({"cursor": cursor})
        return NotificationsResponse.from_dict(json.loads(self.api.execute_request("GET", url)))

    def _get_content(self, notification_id: str, suffix: str) -> NotificationContentResponse:
        _require(notification_id, _NOTIFICATION_ID_REQUIRED)
        url = f"{self.api.base_url}/notifications/{notification_id}/{suffix}"
        return NotificationContentResponse.from_dict(
            json.loads(self.api.execute_request("GET", url))
        )

    def get_notification_content(self, notification_id: str) -> NotificationContentResponse:
        """Fetch the published content of a notification."""
        return self._get_content(notification_id, "content")

    def get_notification_draft_content(self, notification_id: str) -> NotificationContentResponse:
        """Fetch the draft content of a notification."""
        return self._get_content(notification_id, "draft/content")

    def post_notification_variations(self, notification_id: str, body: Any) -> None:
        """Post locale variations for the published content."""
        self.api.send_request_with_maps(
            "POST", "/notifications/" + notification_id + "/variations", to_json_map(body)
        )

    def post_notification_draft_variations(self, notification_id: str, body: Any) -> None:
        """Post locale variations for the draft content."""
        self.api.send_request_with_maps(
            "POST", "/notifications/" + notification_id + "/draft/variations", to_json_map(body)
        )

    def get_notification_submission_checks(
        self, notification_id: str, submission_id: str
    ) -> NotificationSubmissionChecksResponse:
        """Fetch the checks of a submission."""
        _require(notification_id, _NOTIFICATION_ID_REQUIRED)
        _require(submission_id, _SUBMISSION_ID_REQUIRED)
        url = f"{self.api.base_url}/notifications/{notification_id}/{submission_id}/checks"
        return NotificationSubmissionChecksResponse.from_dict(
            json.loads(self.api.execute_request("GET", url))
        )

    def put_notification_submission_checks(
        self, notification_id: str, submission_id: str, body: Any
    ) -> None:
        """Replace the checks of a submission."""
        self.api.send_request_with_maps(
            "PUT",
            "/notifications/" + notification_id + "/" + submission_id + "/checks",
            to_json_map(body),
        )

    def cancel_notification_submission(self, notification_id: str, submission_id: str) -> None:
        """Cancel a submission by deleting its checks."""
        _require(notification_id, _NOTIFICATION_ID_REQUIRED)
        _require(submission_id, _SUBMISSION_ID_REQUIRED)
        self.api.execute_request(
            "DELETE",
            f"{self.api.base_url}/notifications/{notification_id}/{submission_id}/checks",
        )
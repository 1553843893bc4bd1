"""Recipient profile endpoints."""

from __future__ import annotations

from typing import Any

from .api import APIConfiguration


class ProfilesMixin:
    """Profile endpoints; expects an ``api`` attribute holding an APIConfiguration."""

    api: APIConfiguration

    def get_profile(self, profile_id: str) -> dict[str, Any]:
        """Fetch a recipient's profile document."""
        return self.api.send_request_with_maps("GET", "/profiles/" + profile_id, None)

    def merge_profile_bytes(self, profile_id: str, profile: bytes | str) -> None:
        """Merge a JSON-encoded profile into the stored one."""
        self.api.send_request_with_bytes("POST", "/profiles/" + profile_id, profile)

    def update_profile_bytes(self, profile_id: str, profile: bytes | str) -> None:
        """Replace the stored profile with a JSON-encoded one."""
        self.api.send_request_with_bytes("PUT", "/profiles/" + profile_id, profile)
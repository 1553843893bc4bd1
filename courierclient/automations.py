"""Automation endpoints: ad-hoc and template-based automation runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .api import APIConfiguration, _json_field, to_json_map


@dataclass
class AutomationStep:
    """One step of an ad-hoc automation."""

    action: str = ""
    brand: str = _json_field(omitempty=True, default="")
    cancelation_token: str = _json_field(omitempty=True, default="")
    data: Any = _json_field(omitempty=True, default=None)
    duration: str = _json_field(omitempty=True, default="")
    if_: str = _json_field("if", omitempty=True, default="")
    list: str = _json_field(omitempty=True, default="")
    override: Any = _json_field(omitempty=True, default=None)
    profile: Any = _json_field(omitempty=True, default=None)
    recipient: str = _json_field(omitempty=True, default="")
    ref: str = _json_field(omitempty=True, default="")
    template: str = _json_field(omitempty=True, default="")
    until: str = _json_field(omitempty=True, default="")


@dataclass
class Automation:
    """An ad-hoc automation definition."""

    cancelation_token: str = _json_field(omitempty=True, default="")
    steps: list[AutomationStep] = field(default_factory=list)


@dataclass
class AutomationInvokeBody:
    """The body for invoking an ad-hoc automation."""

    automation: Automation = field(default_factory=Automation)
    brand: str = _json_field(omitempty=True, default="")
    data: Any = _json_field(omitempty=True, default=None)
    profile: Any = _json_field(omitempty=True, default=None)
    recipient: str = _json_field(omitempty=True, default="")
    template: str = _json_field(omitempty=True, default="")


@dataclass
class AutomationTemplateInvokeBody:
    """The body for invoking a stored automation template."""

    brand: str = _json_field(omitempty=True, default="")
    data: Any = _json_field(omitempty=True, default=None)
    profile: Any = _json_field(omitempty=True, default=None)
    recipient: str = _json_field(omitempty=True, default="")
    template: str = _json_field(omitempty=True, default="")


def _string_member(response: dict[str, Any], key: str) -> str:
    if key not in response:
        raise ValueError(f"response has no {key}")
    value = response[key]
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"response {key} is not a string")
    return value


class AutomationsMixin:
    """Automation endpoints; expects an ``api`` attribute holding an APIConfiguration."""

    api: APIConfiguration

    def invoke_automation(self, body: Any) -> str:
        """Run an ad-hoc automation and return its run id."""
        response = self.api.send_request_with_maps("POST", "/automations/invoke", to_json_map(body))
        return _string_member(response, "runId")

    def invoke_automation_template(self, template_id: str, body: Any) -> str:
        """Run a stored automation template and return its run id."""
        response = self.api.send_request_with_maps(
            "POST", "/automations/" + template_id + "/invoke", to_json_map(body)
        )
        return _string_member(response, "runId")
"""Brand endpoints: the look and snippets applied to notifications."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlencode

from .api import APIConfiguration, PagingResponse, _dumps, _json_field, get_field

_ID_REQUIRED = "Brand ID is required"


@dataclass
class BrandColors:
    """The colour palette of a brand."""

    primary: str = _json_field(omitempty=True, default="")
    secondary: str = _json_field(omitempty=True, default="")
    tertiary: str = _json_field(omitempty=True, default="")

    @classmethod
    def from_dict(cls, data: Any) -> BrandColors:
        return cls(
            primary=get_field(data, "primary") or "",
            secondary=get_field(data, "secondary") or "",
            tertiary=get_field(data, "tertiary") or "",
        )


@dataclass
class BrandEmail:
    """The e-mail header and footer of a brand."""

    header: Any = _json_field(omitempty=True, default=None)
    footer: Any = _json_field(omitempty=True, default=None)

    @classmethod
    def from_dict(cls, data: Any) -> BrandEmail:
        return cls(header=get_field(data, "header"), footer=get_field(data, "footer"))


@dataclass
class BrandSettings:
    """The settings section of a brand."""

    colors: BrandColors = field(default_factory=BrandColors)
    email: BrandEmail = field(default_factory=BrandEmail)

    @classmethod
    def from_dict(cls, data: Any) -> BrandSettings:
        return cls(
            colors=BrandColors.from_dict(get_field(data, "colors") or {}),
            email=BrandEmail.from_dict(get_field(data, "email") or {}),
        )


@dataclass
class BrandSnippetItem:
    """A reusable snippet defined on a brand."""

    format: str = _json_field(omitempty=True, default="")
    name: str = _json_field(omitempty=True, default="")
    value: str = _json_field(omitempty=True, default="")

    @classmethod
    def from_dict(cls, data: Any) -> BrandSnippetItem:
        return cls(
            format=get_field(data, "format") or "",
            name=get_field(data, "name") or "",
            value=get_field(data, "value") or "",
        )


@dataclass
class BrandSnippets:
    """The snippets defined on a brand."""

    items: list[BrandSnippetItem] = _json_field(omitempty=True, default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> BrandSnippets:
        return cls(
            items=[
                BrandSnippetItem.from_dict(item)
                for item in get_field(data, "items") or []
                if item is not None
            ]
        )


@dataclass
class BrandResponse:
    """A brand as stored by the API."""

    id: str = ""
    name: str = ""
    created: int = 0
    published: int = 0
    updated: int = 0
    settings: BrandSettings = field(default_factory=BrandSettings)
    snippets: BrandSnippets = field(default_factory=BrandSnippets)
    version: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> BrandResponse:
        return cls(
            id=get_field(data, "id") or "",
            name=get_field(data, "name") or "",
            created=get_field(data, "created") or 0,
            published=get_field(data, "published") or 0,
            updated=get_field(data, "updated") or 0,
            settings=BrandSettings.from_dict(get_field(data, "settings") or {}),
            snippets=BrandSnippets.from_dict(get_field(data, "snippets") or {}),
            version=get_field(data, "version") or "",
        )


@dataclass
class BrandsResponse:
    """One page of brands."""

    paging: PagingResponse | None = None
    results: list[BrandResponse] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> BrandsResponse:
        paging = get_field(data, "paging")
        return cls(
            paging=PagingResponse.from_dict(paging) if paging is not None else None,
            results=[
                BrandResponse.from_dict(item)
                for item in get_field(data, "results") or []
                if item is not None
            ],
        )


@dataclass
class PostBrandBody:
    """The body for creating a brand."""

    id: str = _json_field(omitempty=True, default="")
    name: str = ""
    settings: BrandSettings = field(default_factory=BrandSettings)
    snippets: BrandSnippets = field(default_factory=BrandSnippets)


@dataclass
class PutBrandBody:
    """The body for replacing a brand."""

    name: str = ""
    settings: BrandSettings = field(default_factory=BrandSettings)
    snippets: BrandSnippets = field(default_factory=BrandSnippets)


class BrandsMixin:
    """Brand endpoints; expects an ``api`` attribute holding an APIConfiguration."""

    api: APIConfiguration

    def get_brands(self, cursor: str = "") -> BrandsResponse:
        """Fetch one page of brands."""
        url = f"{self.api.base_url}/brands"
        if cursor:
            url += "?" + urlencode({"cursor": cursor})
        return BrandsResponse.from_dict(json.loads(self.api.execute_request("GET", url)))

    def get_brand(self, brand_id: str) -> BrandResponse:
        """Fetch one brand by id."""
        if not brand_id:
            raise ValueError(_ID_REQUIRED)
        raw = self.api.execute_request("GET", f"{self.api.base_url}/brands/{brand_id}")
        return BrandResponse.from_dict(json.loads(raw))

    def post_brand(self, body: Any) -> BrandResponse:
        """Create a brand."""
        raw = self.api.execute_request("POST", f"{self.api.base_url}/brands", _dumps(body))
        return BrandResponse.from_dict(json.loads(raw))

    def put_brand(self, brand_id: str, body: Any) -> BrandResponse:
        """Replace the brand with the given id."""
        if not brand_id:
            raise ValueError(_ID_REQUIRED)
        raw = self.api.execute_request(
            "PUT", f"{self.api.base_url}/brands/{brand_id}", _dumps(body)
        )
        return BrandResponse.from_dict(json.loads(raw))

    def delete_brand(self, brand_id: str) -> None:
        """Delete a brand."""
        if not brand_id:
            raise ValueError(_ID_REQUIRED)
        self.api.execute_request("DELETE", f"{self.api.base_url}/brands/{brand_id}")
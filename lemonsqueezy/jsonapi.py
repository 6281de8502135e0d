"""JSON:API document structures shared by every resource."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Generic, TypeVar

A = TypeVar("A")
R = TypeVar("R")

_FRACTION = re.compile(r"\.(\d+)")


def parse_datetime(value: str | None) -> datetime | None:
    """Parse an RFC 3339 timestamp; None stays None."""
    if value is None:
        return None
    text = re.sub(r"[Zz]$", "+00:00", value)
    text = _FRACTION.sub(lambda m: "." + m.group(1).ljust(6, "0")[:6], text, count=1)
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        raise ValueError(f"invalid RFC 3339 timestamp: {value!r}")
    return parsed


def _decode(cls: Any, data: dict[str, Any] | None, **overrides: Any) -> Any:
    """Build a dataclass from a JSON object keyed by its field names."""
    data = data or {}
    values: dict[str, Any] = {}
    for f in fields(cls):
        raw = data.get(f.name)
        if f.name in overrides:
            values[f.name] = overrides[f.name]
        elif str(f.type) == "bool":
            values[f.name] = bool(raw)
        elif "datetime" in str(f.type):
            values[f.name] = parse_datetime(raw)
        elif raw is not None:
            values[f.name] = raw
    return cls(**values)


def _decode_links(cls: Any, data: dict[str, Any] | None) -> Any:
    """Build a relationships dataclass; JSON keys use hyphens for underscores."""
    data = data or {}
    return cls(
        **{
            f.name: RelationshipLinks.from_dict(data.get(f.name.replace("_", "-")))
            for f in fields(cls)
        }
    )


def _load_object(body: bytes | str) -> dict[str, Any]:
    document = json.loads(body)
    if not isinstance(document, dict):
        raise ValueError("expected a JSON object")
    return document


@dataclass(frozen=True)
class Link:
    """A pair of related and self links."""

    related: str = ""
    self_url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Link:
        data = data or {}
        return cls(related=data.get("related") or "", self_url=data.get("self") or "")


@dataclass(frozen=True)
class RelationshipLinks:
    """The links object of one relationship."""

    links: Link = field(default_factory=Link)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> RelationshipLinks:
        return cls(links=Link.from_dict((data or {}).get("links")))


@dataclass(frozen=True)
class ResourceData(Generic[A, R]):
    """One resource object: type, id, attributes, relationships and self link."""

    type: str
    id: str
    attributes: A
    relationships: R
    self_link: str = ""

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], attributes_type: Any = None, relationships_type: Any = None
    ) -> ResourceData:
        attributes: Any = data.get("attributes") or {}
        if attributes_type is not None:
            attributes = attributes_type.from_dict(attributes)
        relationships: Any = data.get("relationships")
        if relationships_type is not None:
            relationships = relationships_type.from_dict(relationships or {})
        raw_id = data.get("id")
        return cls(
            type=data.get("type") or "",
            id="" if raw_id is None else str(raw_id),
            attributes=attributes,
            relationships=relationships,
            self_link=(data.get("links") or {}).get("self") or "",
        )


@dataclass(frozen=True)
class ApiResponse(Generic[A, R]):
    """A document holding a single resource."""

    jsonapi_version: str
    self_link: str
    data: ResourceData[A, R]

    @classmethod
    def from_json(
        cls, body: bytes | str, attributes_type: Any = None, relationships_type: Any = None
    ) -> ApiResponse:
        document = _load_object(body)
        return cls(
            jsonapi_version=(document.get("jsonapi") or {}).get("version") or "",
            self_link=(document.get("links") or {}).get("self") or "",
            data=ResourceData.from_dict(
                document.get("data") or {}, attributes_type, relationships_type
            ),
        )


@dataclass(frozen=True)
class ApiResponseList(Generic[A, R]):
    """A document holding a page of resources."""

    jsonapi_version: str
    meta: dict[str, Any]
    links: dict[str, Any]
    data: list[ResourceData[A, R]]

    @classmethod
    def from_json(
        cls, body: bytes | str, attributes_type: Any = None, relationships_type: Any = None
    ) -> ApiResponseList:
        document = _load_object(body)
        return cls(
            jsonapi_version=(document.get("jsonapi") or {}).get("version") or "",
            meta=document.get("meta") or {},
            links=document.get("links") or {},
            data=[
                ResourceData.from_dict(item, attributes_type, relationships_type)
                for item in document.get("data") or []
            ],
        )
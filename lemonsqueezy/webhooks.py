"""Webhook resources and the payloads delivered to webhook endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, TypeVar

from .jsonapi import RelationshipLinks, ResourceData, _decode, _decode_links, _load_object
from .orders import OrderAttributes, OrderRelationships
from .subscriptions import (
    Subscription,
    SubscriptionInvoiceAttributes,
    SubscriptionInvoiceRelationships,
    SubscriptionRelationships,
)

A = TypeVar("A")
R = TypeVar("R")


@dataclass(frozen=True)
class WebhookCreateParams:
    """Parameters for creating a webhook."""

    url: str
    events: list[str]
    secret: str
    store_id: str

    def to_payload(self) -> dict[str, Any]:
        attributes = {"url": self.url, "events": list(self.events), "secret": self.secret}
        store = {"data": {"type": "stores", "id": self.store_id}}
        return {
            "data": {
                "type": "webhooks",
                "attributes": attributes,
                "relationships": {"store": store},
            }
        }


@dataclass(frozen=True)
class WebhookUpdateParams:
    """Parameters for updating a webhook."""

    id: str
    secret: str = ""
    events: list[str] = field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        attributes = {"events": list(self.events), "secret": self.secret}
        return {"data": {"type": "webhooks", "id": self.id, "attributes": attributes}}


@dataclass(frozen=True)
class WebhookAttributes:
    """A registered webhook."""

    store_id: int = 0
    url: str = ""
    events: list[str] = field(default_factory=list)
    last_sent_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    test_mode: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WebhookAttributes:
        return _decode(cls, data, events=list(data.get("events") or []))


@dataclass(frozen=True)
class WebhookRelationships:
    """Relationships of a webhook."""

    store: RelationshipLinks = field(default_factory=RelationshipLinks)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WebhookRelationships:
        return _decode_links(cls, data)


@dataclass(frozen=True)
class WebhookRequestMeta:
    """Metadata of a webhook delivery."""

    event_name: str = ""
    test_mode: bool = False
    custom_data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WebhookRequestMeta:
        return _decode(cls, data, custom_data=dict(data.get("custom_data") or {}))


@dataclass(frozen=True)
class WebhookRequest(Generic[A, R]):
    """A webhook delivery: its metadata and the resource it concerns."""

    meta: WebhookRequestMeta
    data: ResourceData[A, R]

    @classmethod
    def from_json(
        cls, body: bytes | str, attributes_type: Any = None, relationships_type: Any = None
    ) -> WebhookRequest:
        document = _load_object(body)
        return cls(
            meta=WebhookRequestMeta.from_dict(document.get("meta") or {}),
            data=ResourceData.from_dict(
                document.get("data") or {}, attributes_type, relationships_type
            ),
        )


def parse_order_webhook(body: bytes | str) -> WebhookRequest[OrderAttributes, OrderRelationships]:
    """Parse the payload of an order event such as order_created."""
    return WebhookRequest.from_json(body, OrderAttributes, OrderRelationships)


def parse_subscription_webhook(
    body: bytes | str,
) -> WebhookRequest[Subscription, SubscriptionRelationships]:
    """Parse the payload of a subscription event such as subscription_updated."""
    return WebhookRequest.from_json(body, Subscription, SubscriptionRelationships)


def parse_subscription_invoice_webhook(
    body: bytes | str,
) -> WebhookRequest[SubscriptionInvoiceAttributes, SubscriptionInvoiceRelationships]:
    """Parse the payload of a subscription payment event."""
    return WebhookRequest.from_json(
        body, SubscriptionInvoiceAttributes, SubscriptionInvoiceRelationships
    )
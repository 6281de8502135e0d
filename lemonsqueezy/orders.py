"""Orders and order items."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .jsonapi import RelationshipLinks, _decode, _decode_links


@dataclass(frozen=True)
class OrderUrls:
    """Customer-facing URLs of an order."""

    receipt: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> OrderUrls:
        return _decode(cls, data)


@dataclass(frozen=True)
class FirstOrderItem:
    """The first line item of an order, embedded in the order."""

    id: int = 0
    order_id: int = 0
    product_id: int = 0
    variant_id: int = 0
    product_name: str = ""
    variant_name: str = ""
    price: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    test_mode: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> FirstOrderItem:
        return _decode(cls, data)


@dataclass(frozen=True)
class OrderAttributes:
    """An order, created when a customer purchases a product."""

    store_id: int = 0
    customer_id: int = 0
    identifier: str = ""
    order_number: int = 0
    user_name: str = ""
    user_email: str = ""
    currency: str = ""
    currency_rate: str = ""
    subtotal: int = 0
    discount_total: int = 0
    tax: int = 0
    total: int = 0
    subtotal_usd: int = 0
    discount_total_usd: int = 0
    tax_usd: int = 0
    total_usd: int = 0
    tax_name: str = ""
    tax_rate: str = ""
    status: str = ""
    status_formatted: str = ""
    refunded: bool = False
    refunded_at: datetime | None = None
    subtotal_formatted: str = ""
    discount_total_formatted: str = ""
    tax_formatted: str = ""
    total_formatted: str = ""
    urls: OrderUrls = field(default_factory=OrderUrls)
    first_order_item: FirstOrderItem = field(default_factory=FirstOrderItem)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OrderAttributes:
        return _decode(
            cls,
            data,
            urls=OrderUrls.from_dict(data.get("urls")),
            first_order_item=FirstOrderItem.from_dict(data.get("first_order_item")),
        )


@dataclass(frozen=True)
class OrderRelationships:
    """Relationships of an order."""

    store: RelationshipLinks = field(default_factory=RelationshipLinks)
    customer: RelationshipLinks = field(default_factory=RelationshipLinks)
    order_items: RelationshipLinks = field(default_factory=RelationshipLinks)
    subscriptions: RelationshipLinks = field(default_factory=RelationshipLinks)
    license_keys: RelationshipLinks = field(default_factory=RelationshipLinks)
    discount_redemptions: RelationshipLinks = field(default_factory=RelationshipLinks)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OrderRelationships:
        return _decode_links(cls, data)


@dataclass(frozen=True)
class OrderItemAttributes:
    """A line item of an order."""

    order_id: int = 0
    product_id: int = 0
    variant_id: int = 0
    product_name: str = ""
    variant_name: str = ""
    price: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OrderItemAttributes:
        return _decode(cls, data)


@dataclass(frozen=True)
class OrderItemRelationships:
    """Relationships of an order item."""

    order: RelationshipLinks = field(default_factory=RelationshipLinks)
    product: RelationshipLinks = field(default_factory=RelationshipLinks)
    variant: RelationshipLinks = field(default_factory=RelationshipLinks)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OrderItemRelationships:
        return _decode_links(cls, data)
"""Subscriptions, their update parameters and subscription invoices."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any

from .jsonapi import RelationshipLinks, _decode, _decode_links


def _format_datetime(value: datetime) -> str:
    """Format a datetime as RFC 3339, trimming trailing fractional zeros."""
    base = value.replace(microsecond=0, tzinfo=None).isoformat()
    fraction = f".{value.microsecond:06d}".rstrip("0") if value.microsecond else ""
    offset = value.strftime("%z")
    zone = "Z" if offset in ("", "+0000") else f"{offset[:3]}:{offset[3:5]}"
    return base + fraction + zone


@dataclass(frozen=True)
class SubscriptionUrls:
    """Customer-facing URLs for managing a subscription."""

    update_payment_method: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> SubscriptionUrls:
        return _decode(cls, data)


@dataclass(frozen=True)
class SubscriptionPause:
    """How a subscription is paused and when it resumes."""

    mode: str = ""
    resumes_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SubscriptionPause:
        return _decode(cls, data)

    def to_dict(self) -> dict[str, Any]:
        resumes_at = None if self.resumes_at is None else _format_datetime(self.resumes_at)
        return {"mode": self.mode, "resumes_at": resumes_at}


@dataclass(frozen=True)
class Subscription:
    """A subscription that bills the customer on a recurring basis."""

    store_id: int = 0
    order_id: int = 0
    order_item_id: int = 0
    product_id: int = 0
    variant_id: int = 0
    product_name: str = ""
    variant_name: str = ""
    user_name: str = ""
    user_email: str = ""
    status: str = ""
    status_formatted: str = ""
    pause: SubscriptionPause | None = None
    cancelled: bool = False
    trial_ends_at: datetime | None = None
    billing_anchor: int = 0
    urls: SubscriptionUrls = field(default_factory=SubscriptionUrls)
    renews_at: datetime | None = None
    ends_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    test_mode: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Subscription:
        pause = data.get("pause")
        return _decode(
            cls,
            data,
            pause=None if pause is None else SubscriptionPause.from_dict(pause),
            urls=SubscriptionUrls.from_dict(data.get("urls")),
        )


@dataclass(frozen=True)
class SubscriptionUpdateAttributes:
    """Attributes that can be changed on a subscription."""

    product_id: int = 0
    variant_id: int = 0
    billing_anchor: int = 0


@dataclass(frozen=True)
class SubscriptionUpdateParams:
    """Parameters for updating a subscription."""

    type: str = "subscriptions"
    id: str = ""
    pause: SubscriptionPause | None = None
    cancelled: bool = False
    invoice_immediately: bool = False
    attributes: SubscriptionUpdateAttributes = field(default_factory=SubscriptionUpdateAttributes)

    def to_dict(self) -> dict[str, Any]:
        """The request body; unset pause and false flags are left out."""
        body: dict[str, Any] = {"type": self.type, "id": self.id}
        if self.pause is not None:
            body["pause"] = self.pause.to_dict()
        if self.cancelled:
            body["cancelled"] = True
        if self.invoice_immediately:
            body["invoice_immediately"] = True
        body["attributes"] = asdict(self.attributes)
        return body


@dataclass(frozen=True)
class SubscriptionRelationships:
    """Relationships of a subscription."""

    store: RelationshipLinks = field(default_factory=RelationshipLinks)
    order: RelationshipLinks = field(default_factory=RelationshipLinks)
    order_item: RelationshipLinks = field(default_factory=RelationshipLinks)
    product: RelationshipLinks = field(default_factory=RelationshipLinks)
    variant: RelationshipLinks = field(default_factory=RelationshipLinks)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SubscriptionRelationships:
        return _decode_links(cls, data)


@dataclass(frozen=True)
class SubscriptionInvoiceAttributes:
    """An invoice raised for a subscription."""

    store_id: int = 0
    subscription_id: int = 0
    billing_reason: str = ""
    card_brand: str = ""
    card_last_four: str = ""
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
    status: str = ""
    status_formatted: str = ""
    refunded: bool = False
    refunded_at: datetime | None = None
    subtotal_formatted: str = ""
    discount_total_formatted: str = ""
    tax_formatted: str = ""
    total_formatted: str = ""
    invoice_url: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    test_mode: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SubscriptionInvoiceAttributes:
        invoice_url = (data.get("urls") or {}).get("invoice_url") or ""
        return _decode(cls, data, invoice_url=invoice_url)


@dataclass(frozen=True)
class SubscriptionInvoiceRelationships:
    """Relationships of a subscription invoice."""

    store: RelationshipLinks = field(default_factory=RelationshipLinks)
    subscription: RelationshipLinks = field(default_factory=RelationshipLinks)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SubscriptionInvoiceRelationships:
        return _decode_links(cls, data)
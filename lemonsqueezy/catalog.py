"""Stores, products, variants and users."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .jsonapi import RelationshipLinks, parse_datetime


def _links(data: dict[str, Any], key: str) -> RelationshipLinks:
    return RelationshipLinks.from_dict(data.get(key))


@dataclass(frozen=True)
class StoreAttributes:
    """A store; everything in Lemon Squeezy belongs to one."""

    name: str = ""
    slug: str = ""
    domain: str = ""
    url: str = ""
    avatar_url: str = ""
    plan: str = ""
    country: str = ""
    country_nicename: str = ""
    currency: str = ""
    total_sales: int = 0
    total_revenue: int = 0
    thirty_day_sales: int = 0
    thirty_day_revenue: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StoreAttributes:
        return cls(
            name=data.get("name") or "",
            slug=data.get("slug") or "",
            domain=data.get("domain") or "",
            url=data.get("url") or "",
            avatar_url=data.get("avatar_url") or "",
            plan=data.get("plan") or "",
            country=data.get("country") or "",
            country_nicename=data.get("country_nicename") or "",
            currency=data.get("currency") or "",
            total_sales=data.get("total_sales") or 0,
            total_revenue=data.get("total_revenue") or 0,
            thirty_day_sales=data.get("thirty_day_sales") or 0,
            thirty_day_revenue=data.get("thirty_day_revenue") or 0,
            created_at=parse_datetime(data.get("created_at")),
            updated_at=parse_datetime(data.get("updated_at")),
        )


@dataclass(frozen=True)
class StoreRelationships:
    """Relationships of a store."""

    subscriptions: RelationshipLinks = field(default_factory=RelationshipLinks)
    orders: RelationshipLinks = field(default_factory=RelationshipLinks)
    products: RelationshipLinks = field(default_factory=RelationshipLinks)
    license_keys: RelationshipLinks = field(default_factory=RelationshipLinks)
    discounts: RelationshipLinks = field(default_factory=RelationshipLinks)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StoreRelationships:
        return cls(
            subscriptions=_links(data, "subscriptions"),
            orders=_links(data, "orders"),
            products=_links(data, "products"),
            license_keys=_links(data, "license-keys"),
            discounts=_links(data, "discounts"),
        )


@dataclass(frozen=True)
class ProductAttributes:
    """A product sold in a store."""

    store_id: int = 0
    name: str = ""
    slug: str = ""
    description: str = ""
    status: str = ""
    status_formatted: str = ""
    thumb_url: str = ""
    large_thumb_url: str = ""
    price: int = 0
    pay_what_you_want: bool = False
    from_price: int | None = None
    to_price: int | None = None
    buy_now_url: str = ""
    price_formatted: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProductAttributes:
        return cls(
            store_id=data.get("store_id") or 0,
            name=data.get("name") or "",
            slug=data.get("slug") or "",
            description=data.get("description") or "",
            status=data.get("status") or "",
            status_formatted=data.get("status_formatted") or "",
            thumb_url=data.get("thumb_url") or "",
            large_thumb_url=data.get("large_thumb_url") or "",
            price=data.get("price") or 0,
            pay_what_you_want=bool(data.get("pay_what_you_want")),
            from_price=data.get("from_price"),
            to_price=data.get("to_price"),
            buy_now_url=data.get("buy_now_url") or "",
            price_formatted=data.get("price_formatted") or "",
            created_at=parse_datetime(data.get("created_at")),
            updated_at=parse_datetime(data.get("updated_at")),
        )


@dataclass(frozen=True)
class ProductRelationships:
    """Relationships of a product."""

    store: RelationshipLinks = field(default_factory=RelationshipLinks)
    variants: RelationshipLinks = field(default_factory=RelationshipLinks)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProductRelationships:
        return cls(store=_links(data, "store"), variants=_links(data, "variants"))


@dataclass(frozen=True)
class VariantAttributes:
    """An option of a product presented to the customer at checkout."""

    product_id: int = 0
    name: str = ""
    slug: str = ""
    description: str = ""
    price: int = 0
    is_subscription: bool = False
    interval: str | None = None
    interval_count: int | None = None
    has_free_trial: bool = False
    trial_interval: str = ""
    trial_interval_count: int = 0
    pay_what_you_want: bool = False
    min_price: int = 0
    suggested_price: int = 0
    has_license_keys: bool = False
    license_activation_limit: int = 0
    is_license_limit_unlimited: bool = False
    license_length_value: int = 0
    license_length_unit: str = ""
    is_license_length_unlimited: bool = False
    sort: int = 0
    status: str = ""
    status_formatted: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VariantAttributes:
        return cls(
            product_id=data.get("product_id") or 0,
            name=data.get("name") or "",
            slug=data.get("slug") or "",
            description=data.get("description") or "",
            price=data.get("price") or 0,
            is_subscription=bool(data.get("is_subscription")),
            interval=data.get("interval"),
            interval_count=data.get("interval_count"),
            has_free_trial=bool(data.get("has_free_trial")),
            trial_interval=data.get("trial_interval") or "",
            trial_interval_count=data.get("trial_interval_count") or 0,
            pay_what_you_want=bool(data.get("pay_what_you_want")),
            min_price=data.get("min_price") or 0,
            suggested_price=data.get("suggested_price") or 0,
            has_license_keys=bool(data.get("has_license_keys")),
            license_activation_limit=data.get("license_activation_limit") or 0,
            is_license_limit_unlimited=bool(data.get("is_license_limit_unlimited")),
            license_length_value=data.get("license_length_value") or 0,
            license_length_unit=data.get("license_length_unit") or "",
            is_license_length_unlimited=bool(data.get("is_license_length_unlimited")),
            sort=data.get("sort") or 0,
            status=data.get("status") or "",
            status_formatted=data.get("status_formatted") or "",
            created_at=parse_datetime(data.get("created_at")),
            updated_at=parse_datetime(data.get("updated_at")),
        )


@dataclass(frozen=True)
class VariantRelationships:
    """Relationships of a variant."""

    product: RelationshipLinks = field(default_factory=RelationshipLinks)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VariantRelationships:
        return cls(product=_links(data, "product"))


@dataclass(frozen=True)
class UserAttributes:
    """The user account used to log in."""

    name: str = ""
    email: str = ""
    color: str = ""
    avatar_url: str = ""
    has_custom_avatar: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserAttributes:
        return cls(
            name=data.get("name") or "",
            email=data.get("email") or "",
            color=data.get("color") or "",
            avatar_url=data.get("avatar_url") or "",
            has_custom_avatar=bool(data.get("has_custom_avatar")),
            created_at=parse_datetime(data.get("createdAt")),
            updated_at=parse_datetime(data.get("updatedAt")),
        )
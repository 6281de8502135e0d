import json
from datetime import datetime, timezone

import pytest

from lemonsqueezy.jsonapi import ApiResponse, ApiResponseList
from lemonsqueezy.orders import (
    FirstOrderItem,
    OrderAttributes,
    OrderItemAttributes,
    OrderItemRelationships,
    OrderRelationships,
    OrderUrls,
)

IDENTIFIER = "89b36d62-4f5c-4353-853f-0c769d0535c8"
CREATED = "2021-08-11T13:47:27.000000Z"
CREATED_DT = datetime(2021, 8, 11, 13, 47, 27, tzinfo=timezone.utc)


def _order_attributes():
    return {
        "store_id": 1,
        "customer_id": 25,
        "identifier": IDENTIFIER,
        "order_number": 1,
        "user_name": "Darlene Daugherty",
        "user_email": "darlene@example.com",
        "currency": "USD",
        "currency_rate": "1.0000",
        "subtotal": 999,
        "total": 1199,
        "tax_name": "VAT",
        "status": "paid",
        "refunded": False,
        "refunded_at": None,
        "total_formatted": "$11.99",
        "urls": {"receipt": "receipt-link"},
        "first_order_item": {
            "id": 1,
            "order_id": 1,
            "product_name": "Example Product",
            "price": 999,
            "created_at": CREATED,
            "test_mode": True,
        },
        "created_at": CREATED,
        "updated_at": CREATED,
    }


def test_order_attributes_from_dict():
    order = OrderAttributes.from_dict(_order_attributes())
    assert order.identifier == IDENTIFIER
    assert order.customer_id == 25
    assert order.user_email == "darlene@example.com"
    assert order.total == 1199
    assert order.total_formatted == "$11.99"
    assert order.refunded is False
    assert order.refunded_at is None
    assert order.urls == OrderUrls(receipt="receipt-link")
    assert order.created_at == CREATED_DT


def test_first_order_item_nested():
    item = OrderAttributes.from_dict(_order_attributes()).first_order_item
    assert item.product_name == "Example Product"
    assert item.price == 999
    assert item.test_mode is True
    assert item.created_at == CREATED_DT
    assert item.updated_at is None


def test_refunded_at_parsed_when_present():
    data = dict(_order_attributes(), refunded=True, refunded_at=CREATED)
    order = OrderAttributes.from_dict(data)
    assert order.refunded is True
    assert order.refunded_at == CREATED_DT


def test_empty_order_defaults():
    order = OrderAttributes.from_dict({})
    assert order == OrderAttributes()
    assert order.first_order_item == FirstOrderItem.from_dict(None)


def test_order_relationships_hyphenated_keys():
    data = {
        "order-items": {"links": {"related": "items"}},
        "discount-redemptions": {"links": {"self": "redemptions"}},
        "license-keys": {"links": {"related": "keys"}},
    }
    rels = OrderRelationships.from_dict(data)
    assert rels.order_items.links.related == "items"
    assert rels.discount_redemptions.links.self_url == "redemptions"
    assert rels.license_keys.links.related == "keys"
    assert rels.store.links.related == ""


def test_order_item_attributes_and_relationships():
    item = OrderItemAttributes.from_dict(
        {"order_id": 4, "variant_id": 6, "variant_name": "Default", "updated_at": CREATED}
    )
    assert (item.order_id, item.variant_id, item.variant_name) == (4, 6, "Default")
    assert item.updated_at == CREATED_DT
    rels = OrderItemRelationships.from_dict({"variant": {"links": {"related": "v"}}})
    assert rels.variant.links.related == "v"


def test_bad_timestamp_in_first_order_item_raises():
    data = dict(_order_attributes(), first_order_item={"created_at": "soon"})
    with pytest.raises(ValueError):
        OrderAttributes.from_dict(data)


def test_order_response_document():
    body = json.dumps(
        {
            "jsonapi": {"version": "1.0"},
            "data": {
                "type": "orders",
                "id": "1",
                "attributes": _order_attributes(),
                "relationships": {"customer": {"links": {"related": "c"}}},
            },
        }
    )
    response = ApiResponse.from_json(body, OrderAttributes, OrderRelationships)
    assert response.data.id == "1"
    assert response.data.attributes.identifier == IDENTIFIER
    assert response.data.relationships.customer.links.related == "c"


def test_order_items_list_document():
    body = json.dumps({"data": [{"type": "order-items", "id": "1", "attributes": {"price": 999}}]})
    page = ApiResponseList.from_json(body, OrderItemAttributes, OrderItemRelationships)
    assert len(page.data) == 1
    assert page.data[0].attributes.price == 999
import json
from datetime import datetime, timezone

import pytest

from lemonsqueezy.webhooks import (
    WebhookAttributes,
    WebhookCreateParams,
    WebhookRelationships,
    WebhookRequest,
    WebhookRequestMeta,
    WebhookUpdateParams,
    parse_order_webhook,
    parse_subscription_invoice_webhook,
    parse_subscription_webhook,
)

API = "https://api.example.com/v1"

ORDER_CREATED = json.dumps(
    {
        "meta": {
            "event_name": "order_created",
            "test_mode": False,
            "custom_data": {"customer_id": 25},
        },
        "data": {
            "type": "orders",
            "id": "1",
            "attributes": {
                "store_id": 1,
                "identifier": "89b36d62-4f5c-4353-853f-0c769d0535c8",
                "order_number": 1,
                "user_email": "buyer@example.com",
                "total": 999,
                "status": "paid",
                "refunded": False,
                "refunded_at": None,
                "urls": {"receipt": "https://app.example.com/receipt/1"},
                "first_order_item": {
                    "id": 1,
                    "order_id": 1,
                    "product_name": "Test Limited License",
                    "created_at": "2021-08-17T09:45:53.000000Z",
                },
                "created_at": "2021-08-17T09:45:53.000000Z",
                "updated_at": "2021-08-17T09:45:53.000000Z",
            },
            "relationships": {"store": {"links": {"related": f"{API}/orders/1/store"}}},
            "links": {"self": f"{API}/orders/1"},
        },
    }
)


def test_order_webhook_meta_and_identifier():
    request = parse_order_webhook(ORDER_CREATED)
    assert request.meta == WebhookRequestMeta(
        event_name="order_created", test_mode=False, custom_data={"customer_id": 25}
    )
    assert request.data.attributes.identifier == "89b36d62-4f5c-4353-853f-0c769d0535c8"


def test_order_webhook_resource_details():
    request = parse_order_webhook(ORDER_CREATED.encode())
    assert request.data.type == "orders"
    assert request.data.id == "1"
    assert request.data.self_link == f"{API}/orders/1"
    assert request.data.attributes.first_order_item.product_name == "Test Limited License"
    assert request.data.relationships.store.links.related == f"{API}/orders/1/store"


def test_subscription_webhook():
    body = json.dumps(
        {
            "meta": {"event_name": "subscription_updated", "test_mode": True},
            "data": {
                "type": "subscriptions",
                "id": 8,
                "attributes": {"status": "active", "billing_anchor": 12},
                "relationships": {"variant": {"links": {"related": f"{API}/subscriptions/8/variant"}}},
            },
        }
    )
    request = parse_subscription_webhook(body)
    assert request.meta.event_name == "subscription_updated"
    assert request.meta.test_mode is True
    assert request.meta.custom_data == {}
    assert request.data.id == "8"
    assert request.data.attributes.status == "active"
    assert request.data.attributes.billing_anchor == 12
    assert request.data.relationships.variant.links.related == f"{API}/subscriptions/8/variant"


def test_subscription_invoice_webhook():
    body = json.dumps(
        {
            "meta": {"event_name": "subscription_payment_success"},
            "data": {
                "type": "subscription-invoices",
                "id": "3",
                "attributes": {"subscription_id": 8, "billing_reason": "renewal"},
            },
        }
    )
    request = parse_subscription_invoice_webhook(body)
    assert request.meta.event_name == "subscription_payment_success"
    assert request.data.attributes.subscription_id == 8
    assert request.data.attributes.billing_reason == "renewal"


def test_webhook_request_rejects_non_object():
    with pytest.raises(ValueError):
        WebhookRequest.from_json("[1, 2]")


def test_webhook_request_rejects_invalid_json():
    with pytest.raises(json.JSONDecodeError):
        parse_order_webhook(b"not json")


def test_create_params_payload():
    params = WebhookCreateParams(
        url="https://hooks.example.com/lemon",
        events=["order_created", "subscription_created"],
        secret="secret",
        store_id="12",
    )
    assert params.to_payload() == {
        "data": {
            "type": "webhooks",
            "attributes": {
                "url": "https://hooks.example.com/lemon",
                "events": ["order_created", "subscription_created"],
                "secret": "secret",
            },
            "relationships": {"store": {"data": {"type": "stores", "id": "12"}}},
        }
    }


def test_update_params_payload():
    params = WebhookUpdateParams(id="5", secret="secret", events=["order_refunded"])
    assert params.to_payload() == {
        "data": {
            "type": "webhooks",
            "id": "5",
            "attributes": {"events": ["order_refunded"], "secret": "secret"},
        }
    }


def test_webhook_attributes_from_dict():
    attributes = WebhookAttributes.from_dict(
        {
            "store_id": 1,
            "url": "https://hooks.example.com/lemon",
            "events": ["order_created"],
            "last_sent_at": None,
            "created_at": "2022-06-07T08:32:47.000000Z",
            "test_mode": True,
        }
    )
    assert attributes.store_id == 1
    assert attributes.events == ["order_created"]
    assert attributes.last_sent_at is None
    assert attributes.created_at == datetime(2022, 6, 7, 8, 32, 47, tzinfo=timezone.utc)
    assert attributes.test_mode is True


def test_webhook_relationships_from_dict():
    relationships = WebhookRelationships.from_dict(
        {"store": {"links": {"related": f"{API}/webhooks/1/store"}}}
    )
    assert relationships.store.links.related == f"{API}/webhooks/1/store"
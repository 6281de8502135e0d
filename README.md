# lemonsqueezy

A Python client for the Lemon Squeezy API. It covers the `/v1` endpoints for
stores, products, variants, users, orders, order items, license keys, license
key instances, subscriptions, subscription invoices and webhooks, decodes the
JSON:API responses into frozen dataclasses, and verifies the signatures on
incoming webhook requests.

## Installation

```
pip install lemonsqueezy
```

It depends on `requests`.

## Usage

```python
from lemonsqueezy.client import Client

client = Client(api_key="placeholder", signing_secret="secret")

store = client.stores.get("1")
print(store.data.id, store.data.attributes.name)

for product in client.products.list().data:
    print(product.attributes.name, product.attributes.price_formatted)

me = client.users.me()
print(me.data.attributes.email)
```

`Client` takes `api_key`, `base_url` (default `https://api.lemonsqueezy.com`),
`signing_secret` and an optional `requests.Session`. When an API key is given it
is sent as a bearer token. The client exposes these services:

| Attribute               | Methods                                         |
|-------------------------|-------------------------------------------------|
| `stores`                | `get(store_id)`, `list()`                       |
| `products`              | `get(product_id)`, `list()`                     |
| `variants`              | `get(variant_id)`, `list()`                     |
| `users`                 | `me()`                                          |
| `orders`                | `get(order_id)`, `list()`                       |
| `order_items`           | `get(order_item_id)`, `list()`                  |
| `license_keys`          | `get(license_key_id)`, `list()`                 |
| `license_key_instances` | `get(instance_id)`, `list()`                    |
| `subscription_invoices` | `get(invoice_id)`, `list()`                     |
| `subscriptions`         | `get(id)`, `list()`, `update(params)`, `cancel(id)` |
| `webhooks`              | `get(id)`, `list()`, `create(params)`, `update(params)`, `delete(id)`, `verify(signature, body)` |

A single resource comes back as `lemonsqueezy.jsonapi.ApiResponse`, with
`jsonapi_version`, `self_link` and `data`; a list comes back as
`ApiResponseList`, with `jsonapi_version`, `meta`, `links` and a list `data`.
Each item of `data` is a `ResourceData` holding `type`, `id`, `attributes`,
`relationships` and `self_link`. Attributes are dataclasses from
`lemonsqueezy.catalog`, `lemonsqueezy.orders`, `lemonsqueezy.subscriptions` and
`lemonsqueezy.webhooks`; timestamps are timezone-aware `datetime` objects. License
key and license key instance attributes are left as plain dicts.

### Errors

A response whose status is not one of 200, 201, 202, 204 or 205 raises
`lemonsqueezy.transport.ApiError`. Its message has the form
`"<status>: <reason>, Body: <body>"`, and it carries the raw `response` and its
`status_code`. A body that is not valid JSON raises `ValueError` from the
`json` module.

```python
from lemonsqueezy.transport import ApiError

try:
    client.orders.get("does-not-exist")
except ApiError as error:
    print(error.status_code, error)
```

### Subscriptions

```python
from lemonsqueezy.subscriptions import SubscriptionUpdateAttributes, SubscriptionUpdateParams

params = SubscriptionUpdateParams(
    id="1",
    attributes=SubscriptionUpdateAttributes(product_id=9, variant_id=11, billing_anchor=29),
)
client.subscriptions.update(params)
client.subscriptions.cancel("1")
```

`SubscriptionUpdateParams.to_dict()` leaves out `pause` when it is unset and
`cancelled` / `invoice_immediately` when they are false.

### Webhooks

Manage webhooks through the API:

```python
from lemonsqueezy.webhooks import WebhookCreateParams, WebhookUpdateParams

client.webhooks.create(
    WebhookCreateParams(
        url="https://shop.example.com/hooks",
        events=["order_created"],
        secret="secret",
        store_id="1",
    )
)
client.webhooks.update(WebhookUpdateParams(id="1", events=["order_refunded"]))
client.webhooks.delete("1")  # returns the raw transport Response
```

Check and decode the requests Lemon Squeezy sends you. `verify` compares the
signature with the hex HMAC-SHA256 of the body under the client's
`signing_secret`:

```python
from lemonsqueezy.webhooks import parse_order_webhook

if client.webhooks.verify(signature_header, raw_body):
    request = parse_order_webhook(raw_body)
    print(request.meta.event_name, request.data.attributes.identifier)
```

`parse_subscription_webhook` and `parse_subscription_invoice_webhook` decode the
subscription and subscription payment payloads the same way.
`WebhookRequest.from_json(body, attributes_type, relationships_type)` decodes
any other payload.

## Limitations

- There is no command-line tool; this is a library only.
- List calls return the first page the API sends; there are no paging, filter
  or include parameters.
- Only the endpoints listed above are covered; there is nothing for
  customers, discounts, checkouts or license key activation.
- Calls are synchronous.

## Running the tests

```
pip install -e ".[test]"
pytest
```
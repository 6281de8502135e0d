"""API clients for orders, order items, license keys, invoices and subscriptions."""

from __future__ import annotations

from typing import Any

from .jsonapi import ApiResponse, ApiResponseList
from .orders import (
    OrderAttributes,
    OrderItemAttributes,
    OrderItemRelationships,
    OrderRelationships,
)
from .subscriptions import (
    Subscription,
    SubscriptionInvoiceAttributes,
    SubscriptionInvoiceRelationships,
    SubscriptionRelationships,
    SubscriptionUpdateParams,
)
from .transport import Transport


class _Endpoint:
    """A read-only collection endpoint that returns JSON:API documents."""

    path = ""
    attributes_type: Any = None
    relationships_type: Any = None

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _one(self, method: str, path: str, payload: Any = None) -> ApiResponse:
        response = self._transport.request(method, path, payload)
        return ApiResponse.from_json(
            response.body, self.attributes_type, self.relationships_type
        )

    def _many(self, path: str) -> ApiResponseList:
        response = self._transport.request("GET", path)
        return ApiResponseList.from_json(
            response.body, self.attributes_type, self.relationships_type
        )


class OrdersService(_Endpoint):
    """Client for the /v1/orders endpoint."""

    attributes_type = OrderAttributes
    relationships_type = OrderRelationships

    def __init__(self, transport: Transport) -> None:
        super().__init__(transport)

    def get(self, order_id: str) -> ApiResponse[OrderAttributes, OrderRelationships]:
        """Return the order with the given ID."""
        return self._one("GET", f"/v1/orders/{order_id}")

    def list(self) -> ApiResponseList[OrderAttributes, OrderRelationships]:
        """Return a paginated list of orders."""
        return self._many("/v1/orders")


class OrderItemsService(_Endpoint):
    """Client for the /v1/order-items endpoint."""

    attributes_type = OrderItemAttributes
    relationships_type = OrderItemRelationships

    def __init__(self, transport: Transport) -> None:
        super().__init__(transport)

    def get(
        self, order_item_id: str
    ) -> ApiResponse[OrderItemAttributes, OrderItemRelationships]:
        """Return the order item with the given ID."""
        return self._one("GET", f"/v1/order-items/{order_item_id}")

    def list(self) -> ApiResponseList[OrderItemAttributes, OrderItemRelationships]:
        """Return a paginated list of order items."""
        return self._many("/v1/order-items")


class LicenseKeysService(_Endpoint):
    """Client for the /v1/license-keys endpoint; attributes are left as plain dicts."""

    def __init__(self, transport: Transport) -> None:
        super().__init__(transport)

    def get(self, license_key_id: str) -> ApiResponse:
        """Return the license key with the given ID."""
        return self._one("GET", f"/v1/license-keys/{license_key_id}")

    def list(self) -> ApiResponseList:
        """Return a paginated list of license keys."""
        return self._many("/v1/license-keys")


class LicenseKeyInstancesService(_Endpoint):
    """Client for the /v1/license-key-instances endpoint; attributes are plain dicts."""

    def __init__(self, transport: Transport) -> None:
        super().__init__(transport)

    def get(self, instance_id: str) -> ApiResponse:
        """Return the license key instance with the given ID."""
        return self._one("GET", f"/v1/license-key-instances/{instance_id}")

    def list(self) -> ApiResponseList:
        """Return a paginated list of license key instances."""
        return self._many("/v1/license-key-instances")


class SubscriptionInvoicesService(_Endpoint):
    """Client for the /v1/subscription-invoices endpoint."""

    attributes_type = SubscriptionInvoiceAttributes
    relationships_type = SubscriptionInvoiceRelationships

    def __init__(self, transport: Transport) -> None:
        super().__init__(transport)

    def get(
        self, invoice_id: str
    ) -> ApiResponse[SubscriptionInvoiceAttributes, SubscriptionInvoiceRelationships]:
        """Return the subscription invoice with the given ID."""
        return self._one("GET", f"/v1/subscription-invoices/{invoice_id}")

    def list(
        self,
    ) -> ApiResponseList[SubscriptionInvoiceAttributes, SubscriptionInvoiceRelationships]:
        """Return a paginated list of subscription invoices."""
        return self._many("/v1/subscription-invoices")


class SubscriptionsService(_Endpoint):
    """Client for the /v1/subscriptions endpoint."""

    attributes_type = Subscription
    relationships_type = SubscriptionRelationships

    def __init__(self, transport: Transport) -> None:
        super().__init__(transport)

    def update(
        self, params: SubscriptionUpdateParams
    ) -> ApiResponse[Subscription, SubscriptionRelationships]:
        """Update an existing subscription."""
        return self._one("PATCH", f"/v1/subscriptions/{params.id}", params.to_dict())

    def list(self) -> ApiResponseList[Subscription, SubscriptionRelationships]:
        """Return a paginated list of subscriptions, newest first."""
        return self._many("/v1/subscriptions")

    def get(self, subscription_id: str) -> ApiResponse[Subscription, SubscriptionRelationships]:
        """Return the subscription with the given ID."""
        return self._one("GET", f"/v1/subscriptions/{subscription_id}")

    def cancel(
        self, subscription_id: str
    ) -> ApiResponse[Subscription, SubscriptionRelationships]:
        """Cancel the active subscription with the given ID."""
        return self._one("DELETE", f"/v1/subscriptions/{subscription_id}")
"""The top-level API client and the webhooks endpoint."""

from __future__ import annotations

import hashlib
import hmac

import requests

from .commerce_services import (
    LicenseKeyInstancesService,
    LicenseKeysService,
    OrderItemsService,
    OrdersService,
    SubscriptionInvoicesService,
    SubscriptionsService,
)
from .jsonapi import ApiResponse, ApiResponseList
from .services import ProductsService, StoresService, UsersService, VariantsService
from .transport import DEFAULT_BASE_URL, Response, Transport
from .webhooks import (
    WebhookAttributes,
    WebhookCreateParams,
    WebhookRelationships,
    WebhookUpdateParams,
)


class WebhooksService:
    """Client for the /v1/webhooks endpoint and webhook signature checks."""

    def __init__(self, transport: Transport, signing_secret: str = "") -> None:
        self._transport = transport
        self._signing_secret = signing_secret

    def verify(self, signature: str, body: bytes | str) -> bool:
        """Check that signature is the hex HMAC-SHA256 of body under the signing secret."""
        if isinstance(body, str):
            body = body.encode("utf-8")
        digest = hmac.new(
            self._signing_secret.encode("utf-8"), body, hashlib.sha256
        ).hexdigest()
        return hmac.compare_digest(digest, signature)

    def _parse(self, response: Response) -> ApiResponse[WebhookAttributes, WebhookRelationships]:
        return ApiResponse.from_json(response.body, WebhookAttributes, WebhookRelationships)

    def create(
        self, params: WebhookCreateParams
    ) -> ApiResponse[WebhookAttributes, WebhookRelationships]:
        """Create a webhook."""
        return self._parse(self._transport.request("POST", "/v1/webhooks/", params.to_payload()))

    def get(self, webhook_id: str) -> ApiResponse[WebhookAttributes, WebhookRelationships]:
        """Return the webhook with the given ID."""
        return self._parse(self._transport.request("GET", f"/v1/webhooks/{webhook_id}"))

    def update(
        self, params: WebhookUpdateParams
    ) -> ApiResponse[WebhookAttributes, WebhookRelationships]:
        """Update an existing webhook."""
        return self._parse(
            self._transport.request("PATCH", f"/v1/webhooks/{params.id}", params.to_payload())
        )

    def delete(self, webhook_id: str) -> Response:
        """Delete the webhook with the given ID."""
        return self._transport.request("DELETE", f"/v1/webhooks/{webhook_id}")

    def list(self) -> ApiResponseList[WebhookAttributes, WebhookRelationships]:
        """Return a paginated list of webhooks."""
        response = self._transport.request("GET", "/v1/webhooks")
        return ApiResponseList.from_json(response.body, WebhookAttributes, WebhookRelationships)


class Client:
    """Entry point to every Lemon Squeezy API endpoint."""

    def __init__(
        self,
        api_key: str = "",
        base_url: str = DEFAULT_BASE_URL,
        signing_secret: str = "",
        session: requests.Session | None = None,
    ) -> None:
        self.transport = Transport(base_url=base_url, api_key=api_key, session=session)
        self.stores = StoresService(self.transport)
        self.products = ProductsService(self.transport)
        self.variants = VariantsService(self.transport)
        self.users = UsersService(self.transport)
        self.orders = OrdersService(self.transport)
        self.order_items = OrderItemsService(self.transport)
        self.license_keys = LicenseKeysService(self.transport)
        self.license_key_instances = LicenseKeyInstancesService(self.transport)
        self.subscription_invoices = SubscriptionInvoicesService(self.transport)
        self.subscriptions = SubscriptionsService(self.transport)
        self.webhooks = WebhooksService(self.transport, signing_secret)
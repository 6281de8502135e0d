"""API clients for stores, products, variants and users."""

from __future__ import annotations

from typing import Any

from .catalog import (
    ProductAttributes,
    ProductRelationships,
    StoreAttributes,
    StoreRelationships,
    UserAttributes,
    VariantAttributes,
    VariantRelationships,
)
from .jsonapi import ApiResponse, ApiResponseList
from .transport import Transport


def _fetch_one(
    transport: Transport, path: str, attributes_type: Any, relationships_type: Any
) -> ApiResponse:
    response = transport.request("GET", path)
    return ApiResponse.from_json(response.body, attributes_type, relationships_type)


def _fetch_list(
    transport: Transport, path: str, attributes_type: Any, relationships_type: Any
) -> ApiResponseList:
    response = transport.request("GET", path)
    return ApiResponseList.from_json(response.body, attributes_type, relationships_type)


class StoresService:
    """Client for the /v1/stores endpoint."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def get(self, store_id: str) -> ApiResponse[StoreAttributes, StoreRelationships]:
        """Return the store with the given ID."""
        return _fetch_one(
            self._transport, f"/v1/stores/{store_id}", StoreAttributes, StoreRelationships
        )

    def list(self) -> ApiResponseList[StoreAttributes, StoreRelationships]:
        """Return a paginated list of stores."""
        return _fetch_list(self._transport, "/v1/stores/", StoreAttributes, StoreRelationships)


class ProductsService:
    """Client for the /v1/products endpoint."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def get(self, product_id: str) -> ApiResponse[ProductAttributes, ProductRelationships]:
        """Return the product with the given ID."""
        return _fetch_one(
            self._transport,
            f"/v1/products/{product_id}",
            ProductAttributes,
            ProductRelationships,
        )

    def list(self) -> ApiResponseList[ProductAttributes, ProductRelationships]:
        """Return a paginated list of products."""
        return _fetch_list(
            self._transport, "/v1/products", ProductAttributes, ProductRelationships
        )


class VariantsService:
    """Client for the /v1/variants endpoint."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def get(self, variant_id: str) -> ApiResponse[VariantAttributes, VariantRelationships]:
        """Return the variant with the given ID."""
        return _fetch_one(
            self._transport,
            f"/v1/variants/{variant_id}",
            VariantAttributes,
            VariantRelationships,
        )

    def list(self) -> ApiResponseList[VariantAttributes, VariantRelationships]:
        """Return a paginated list of variants."""
        return _fetch_list(
            self._transport, "/v1/variants", VariantAttributes, VariantRelationships
        )


class UsersService:
    """Client for the /v1/users endpoint."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def me(self) -> ApiResponse[UserAttributes, Any]:
        """Return the currently authenticated user."""
        return _fetch_one(self._transport, "/v1/users/me", UserAttributes, None)
"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.session import StorefrontSession
from storefront.domain.repository.product_catalog import ProductCatalog
from storefront.infrastructure.config import Settings
from storefront.infrastructure.http.order_gateway import HttpOrderGateway
from storefront.infrastructure.persistence.json_product_catalog import (
    JsonProductCatalog,
)
from storefront.infrastructure.persistence.memory_product_catalog import (
    InMemoryProductCatalog,
)


def product_catalog(settings: Settings) -> ProductCatalog:
    if settings.catalog_path is not None:
        return JsonProductCatalog(settings.catalog_path)
    return InMemoryProductCatalog()


def order_gateway(settings: Settings) -> HttpOrderGateway:
    return HttpOrderGateway(settings.orders_url, timeout_s=settings.http_timeout)


def storefront_session(settings: Settings) -> StorefrontSession:
    return StorefrontSession(
        catalog=product_catalog(settings),
        gateway=order_gateway(settings),
        customer_id=settings.customer_id,
    )

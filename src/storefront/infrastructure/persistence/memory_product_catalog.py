"""Built-in catalog used when no catalog file is configured."""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_catalog import ProductCatalog

DEFAULT_PRODUCTS: tuple[Product, ...] = (
    Product(
        id="64c2fc901c2f8b4f68b2ef66",
        name="Premium Wireless Headphones",
        description="High-quality wireless headphones with noise cancellation",
        price=Money.of("79.99"),
    ),
    Product(
        id="64c2fca01c2f8b4f68b2ef67",
        name="Smart Fitness Watch",
        description="Advanced fitness tracking with heart rate monitoring",
        price=Money.of("149.99"),
    ),
    Product(
        id="64c2fcb01c2f8b4f68b2ef68",
        name="Bluetooth Speaker",
        description="Portable speaker with deep bass and long battery life",
        price=Money.of("89.99"),
    ),
)


class InMemoryProductCatalog(ProductCatalog):

    def __init__(self, products: list[Product] | tuple[Product, ...] = DEFAULT_PRODUCTS) -> None:
        self._products = list(products)

    def get_by_id(self, product_id: str) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._products)

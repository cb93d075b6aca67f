"""Abstract read-only catalog of products.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (built-in list, JSON file)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductCatalog(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product, in catalog order."""

"""Product record supplied by the catalog.

The storefront never edits products; the cart copies what it needs
(id, name, price) at add time.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: str
    name: str
    price: Money
    description: str = ""
    image: str = ""

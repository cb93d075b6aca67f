"""Cart aggregate: the ledger of line items a customer intends to buy.

Invariants:
- at most one LineItem per ``product_id``
- a line's quantity only grows through repeated ``add_item``; the line is
  otherwise removed as a whole
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class LineItem:
    """Captures the price snapshot of a product at add-to-cart time."""

    product_id: str
    name: str
    price: Money  # locked when the product was first added
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Cart:

    _items: list[LineItem] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product: Product) -> None:
        """Add one unit of *product*, merging with an existing line."""
        for i, item in enumerate(self._items):
            if item.product_id == product.id:
                # Price stays at the first snapshot even if the catalog moved.
                self._items[i] = replace(item, quantity=item.quantity.increment())
                return

        self._items.append(
            LineItem(
                product_id=product.id,
                name=product.name,
                price=product.price,
                quantity=Quantity(1),
            )
        )

    def remove_item(self, product_id: str) -> None:
        """Drop the line for *product_id*; unknown ids are ignored."""
        self._items = [item for item in self._items if item.product_id != product_id]

    def clear(self) -> None:
        self._items = []

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    def total(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.line_total
        return result

    def is_empty(self) -> bool:
        return not self._items

    def count(self) -> int:
        """Number of distinct lines (what the cart badge shows)."""
        return len(self._items)

    def unit_count(self) -> int:
        """Number of units across all lines."""
        return sum(item.quantity.value for item in self._items)

    def find(self, product_id: str) -> LineItem | None:
        for item in self._items:
            if item.product_id == product_id:
                return item
        return None

"""The order sent to the order-creation endpoint, and its receipt.

Built from a cart snapshot at submission time; the cart's display-only
``name`` is not part of the order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from storefront.domain.model.address import ShippingAddress
from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class OrderItem:
    product_id: str
    quantity: int
    price: Money


@dataclass(frozen=True)
class OrderRequest:
    customer_id: str
    items: tuple[OrderItem, ...]
    total_amount: Money
    shipping_address: ShippingAddress

    @staticmethod
    def from_cart(
        customer_id: str, cart: Cart, address: ShippingAddress
    ) -> OrderRequest:
        return OrderRequest(
            customer_id=customer_id,
            items=tuple(
                OrderItem(
                    product_id=item.product_id,
                    quantity=item.quantity.value,
                    price=item.price,
                )
                for item in cart.items
            ),
            total_amount=cart.total(),
            shipping_address=address,
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "customerId": self.customer_id,
            "items": [
                {
                    "productId": item.product_id,
                    "quantity": item.quantity,
                    "price": item.price.to_number(),
                }
                for item in self.items
            ],
            "totalAmount": self.total_amount.to_number(),
            "shippingAddress": self.shipping_address.to_payload(),
        }


@dataclass(frozen=True)
class OrderReceipt:
    """What the endpoint returned for a created order."""

    order_id: str

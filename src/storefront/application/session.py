"""Session-scoped store for one shopper.

Owns the cart and the checkout orchestrator, and is the only thing the
presentation layer talks to. Callbacks either call the operations below
or ``dispatch`` an intent; neither reaches into cart or address state
directly.
"""

from __future__ import annotations

from storefront.application.checkout import CheckoutOrchestrator
from storefront.application.dto import CartLineDTO, SessionView, SubmissionResult
from storefront.application.intents import (
    AddItem,
    Intent,
    RemoveItem,
    SubmitOrder,
    UpdateAddressField,
)
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.address import AddressField
from storefront.domain.model.cart import Cart
from storefront.domain.repository.order_gateway import OrderGateway
from storefront.domain.repository.product_catalog import ProductCatalog


class StorefrontSession:

    def __init__(
        self,
        catalog: ProductCatalog,
        gateway: OrderGateway,
        customer_id: str,
    ) -> None:
        self._catalog = catalog
        self._cart = Cart()
        self._checkout = CheckoutOrchestrator(self._cart, gateway, customer_id)

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def checkout(self) -> CheckoutOrchestrator:
        return self._checkout

    # --- Operations -----------------------------------------------------------

    def add_item(self, product_id: str) -> None:
        product = self._catalog.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")
        self._cart.add_item(product)

    def remove_item(self, product_id: str) -> None:
        self._cart.remove_item(product_id)

    def update_address_field(self, field: AddressField | str, value: str) -> None:
        self._checkout.update_address_field(AddressField.parse(field), value)

    async def submit_order(self) -> SubmissionResult:
        return await self._checkout.submit_order()

    async def dispatch(self, intent: Intent) -> SubmissionResult | None:
        """Apply one intent. Only ``SubmitOrder`` produces a result."""
        if isinstance(intent, AddItem):
            self.add_item(intent.product_id)
        elif isinstance(intent, RemoveItem):
            self.remove_item(intent.product_id)
        elif isinstance(intent, UpdateAddressField):
            self.update_address_field(intent.field, intent.value)
        elif isinstance(intent, SubmitOrder):
            return await self.submit_order()
        else:
            raise ValidationError(f"Unsupported intent: {intent!r}")
        return None

    # --- Query ----------------------------------------------------------------

    def view(self) -> SessionView:
        address = self._checkout.address
        status = self._checkout.status
        return SessionView(
            lines=[
                CartLineDTO(
                    product_id=item.product_id,
                    name=item.name,
                    quantity=item.quantity.value,
                    unit_price=str(item.price),
                    line_total=str(item.line_total),
                )
                for item in self._cart.items
            ],
            total=str(self._cart.total()),
            count=self._cart.count(),
            unit_count=self._cart.unit_count(),
            address=address.to_payload(),
            missing_fields=[f.value for f in address.missing_fields()],
            status=status.kind.value,
            status_message=status.message,
            is_submitting=self._checkout.is_submitting,
        )

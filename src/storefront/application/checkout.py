"""Application service: Checkout.

Sequences validation, the order-creation call and the post-order reset.
Every call to ``submit_order`` resolves to a SubmissionResult; no error
crosses this boundary, and the busy flag is released on every exit path.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import structlog

from storefront.application.dto import SubmissionResult
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.address import AddressField, ShippingAddress
from storefront.domain.model.cart import Cart
from storefront.domain.model.order_request import OrderRequest
from storefront.domain.model.order_status import OrderStatus, SubmissionPhase
from storefront.domain.repository.order_gateway import OrderGateway
from storefront.domain.service.checkout_validation import validate_checkout

logger = structlog.get_logger(__name__)

SUCCESS_MESSAGE = "Order created successfully! Order ID: {order_id}"
FAILURE_MESSAGE = "Failed to create order. Please try again."


class CheckoutOrchestrator:

    def __init__(
        self,
        cart: Cart,
        gateway: OrderGateway,
        customer_id: str,
    ) -> None:
        self._cart = cart  # shared with the session, not owned
        self._gateway = gateway
        self._customer_id = customer_id
        self._address = ShippingAddress.empty()
        self._status = OrderStatus.idle()
        self._phase = SubmissionPhase.IDLE

    # --- State ----------------------------------------------------------------

    @property
    def address(self) -> ShippingAddress:
        return self._address

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def phase(self) -> SubmissionPhase:
        return self._phase

    @property
    def is_submitting(self) -> bool:
        return self._phase == SubmissionPhase.SUBMITTING

    # --- Commands -------------------------------------------------------------

    def update_address_field(self, field: AddressField, value: str) -> None:
        """Overwrite one address field. Validation waits for submission."""
        self._address = self._address.with_field(field, value)

    async def submit_order(self) -> SubmissionResult:
        """Validate, send the order, and reflect the outcome.

        Steps:
        1. Refuse re-entry while a submission is in flight.
        2. Validate cart and address locally (no network on failure).
        3. Send the order built from the current cart and address.
        4. On success clear the cart and address; on failure keep both
           so the customer can retry.
        """
        if self.is_submitting:
            logger.info("checkout_ignored_in_flight")
            return SubmissionResult.ignored()

        try:
            validate_checkout(self._cart, self._address)
        except ValidationError as exc:
            logger.info("checkout_rejected", reason=str(exc))
            return SubmissionResult.rejected(str(exc))

        with self._submitting():
            try:
                request = OrderRequest.from_cart(
                    self._customer_id, self._cart, self._address
                )
                logger.info(
                    "checkout_submitted",
                    lines=len(request.items),
                    total=str(request.total_amount),
                )
                receipt = await self._gateway.create(request)
            except Exception as exc:
                logger.error(
                    "order_submission_failed",
                    error=str(exc),
                    error_type=type(exc).__name__,
                    exc_info=True,
                )
                self._status = OrderStatus.failure(FAILURE_MESSAGE)
                return SubmissionResult.failure(FAILURE_MESSAGE)

            message = SUCCESS_MESSAGE.format(order_id=receipt.order_id)
            self._status = OrderStatus.success(message)
            self._cart.clear()
            self._address = ShippingAddress.empty()
            logger.info("order_created", order_id=receipt.order_id)
            return SubmissionResult.success(message, receipt.order_id)

    # --- Internal helpers -----------------------------------------------------

    @contextmanager
    def _submitting(self) -> Iterator[None]:
        self._phase = SubmissionPhase.SUBMITTING
        try:
            yield
        finally:
            self._phase = SubmissionPhase.RESOLVED

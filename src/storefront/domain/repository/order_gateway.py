"""Abstract gateway to the remote order-creation endpoint."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order_request import OrderReceipt, OrderRequest


class OrderGateway(ABC):

    @abstractmethod
    async def create(self, request: OrderRequest) -> OrderReceipt:
        """Create the order remotely.

        Raises OrderGatewayError when the endpoint is unreachable, answers
        with a non-success status, or returns a body without an order id.
        """

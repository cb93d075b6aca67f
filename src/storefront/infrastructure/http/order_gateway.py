"""httpx-backed implementation of OrderGateway."""

from __future__ import annotations

import httpx
import structlog

from storefront.domain.exceptions import OrderGatewayError
from storefront.domain.model.order_request import OrderReceipt, OrderRequest
from storefront.domain.repository.order_gateway import OrderGateway

logger = structlog.get_logger(__name__)


class HttpOrderGateway(OrderGateway):
    """POSTs orders as JSON to a fixed endpoint.

    A shared ``httpx.AsyncClient`` may be injected; otherwise one is opened
    and closed around each call.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout_s: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = url
        self._timeout_s = timeout_s
        self._client = client

    # --- OrderGateway interface -----------------------------------------------

    async def create(self, request: OrderRequest) -> OrderReceipt:
        try:
            if self._client is not None:
                response = await self._post(self._client, request)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._post(client, request)
        except httpx.HTTPError as exc:
            raise OrderGatewayError(f"Order request failed: {exc!r}") from exc

        logger.debug("order_response", status_code=response.status_code)
        if not response.is_success:
            raise OrderGatewayError(
                f"Order endpoint returned HTTP {response.status_code}"
            )

        return self._parse_receipt(response)

    # --- Internal helpers -----------------------------------------------------

    async def _post(
        self, client: httpx.AsyncClient, request: OrderRequest
    ) -> httpx.Response:
        logger.debug("order_request", url=self._url, lines=len(request.items))
        return await client.post(
            self._url,
            json=request.to_json(),
            headers={"Content-Type": "application/json"},
            timeout=self._timeout_s,
        )

    @staticmethod
    def _parse_receipt(response: httpx.Response) -> OrderReceipt:
        try:
            body = response.json()
        except ValueError as exc:
            raise OrderGatewayError("Order endpoint returned a non-JSON body") from exc

        if not isinstance(body, dict):
            raise OrderGatewayError(
                f"Expected a JSON object, got {type(body).__name__}"
            )

        order_id = body.get("id")
        if order_id is None or isinstance(order_id, (dict, list, bool)) or str(order_id) == "":
            raise OrderGatewayError("Order response is missing an order id")
        return OrderReceipt(order_id=str(order_id))

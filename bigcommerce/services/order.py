import logging
from typing import TYPE_CHECKING, Optional, Tuple

import httpx

from bigcommerce.schemas.common import Count
from bigcommerce.schemas.order import Order, OrderBody, OrderEditParams, OrderListParams, Orders

if TYPE_CHECKING:
    from bigcommerce.client import BigCommerceClient

logger = logging.getLogger(__name__)


class OrderService:
    """Calls against the ``orders/`` resource.

    Holds nothing but the client and the base path, so a single instance can
    serve concurrent calls. Every call returns the decoded value together with
    the raw ``httpx.Response`` it came from, for headers such as rate limits.
    """

    path = "orders/"

    def __init__(self, client: "BigCommerceClient"):
        self._client = client

    async def list(self, params: Optional[OrderListParams] = None) -> Tuple[Orders, httpx.Response]:
        """Orders matching the given filters, one page at a time."""
        query = (params or OrderListParams()).to_query()
        orders, response = await self._client.request("GET", self.path, Orders, params=query)
        logger.info(f"Fetched {len(orders)} orders")
        return orders, response

    async def count(self, params: Optional[OrderListParams] = None) -> Tuple[Count, httpx.Response]:
        query = (params or OrderListParams()).to_query()
        return await self._client.request("GET", f"{self.path}count", Count, params=query)

    async def show(self, order_id: int) -> Tuple[Order, httpx.Response]:
        return await self._client.request("GET", f"{self.path}{order_id}", Order)

    async def new(self, body: OrderBody) -> Tuple[Order, httpx.Response]:
        """Create an order and return it with the fields the server assigned."""
        order, response = await self._client.request("POST", self.path, Order, json=body.to_payload())
        logger.info(f"Order created: {order.id}")
        return order, response

    async def edit(self, order_id: int, params: OrderEditParams) -> Tuple[Order, httpx.Response]:
        """Update only the fields set on ``params``."""
        return await self._client.request("PUT", f"{self.path}{order_id}", Order, json=params.to_payload())

import logging
from typing import Any, Dict, Optional, Tuple

import httpx

from bigcommerce.core.config import settings
from bigcommerce.core.http import perform_request, relevant_error
from bigcommerce.services.order import OrderService

logger = logging.getLogger(__name__)


class BigCommerceClient:
    """HTTP client for the BigCommerce v2 REST API of a single store."""

    def __init__(
        self,
        store_hash: str = None,
        access_token: str = None,
        client_id: str = None,
        base_url: str = None,
        timeout: float = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.store_hash = store_hash or settings.BIGCOMMERCE_STORE_HASH
        self.access_token = access_token or settings.BIGCOMMERCE_ACCESS_TOKEN
        self.client_id = client_id or settings.BIGCOMMERCE_CLIENT_ID

        if not self.store_hash or not self.access_token:
            raise ValueError(
                "BigCommerce credentials not configured. Set BIGCOMMERCE_STORE_HASH and BIGCOMMERCE_ACCESS_TOKEN"
            )

        base_url = base_url or settings.BIGCOMMERCE_API_BASE_URL
        self.base_url = base_url.format(store_hash=self.store_hash).rstrip("/") + "/"
        self.timeout = timeout if timeout is not None else settings.BIGCOMMERCE_TIMEOUT
        self.headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "X-Auth-Token": self.access_token,
        }
        if self.client_id:
            self.headers["X-Auth-Client"] = self.client_id

        self.transport = transport
        self.client = None

        self.orders = OrderService(self)

    async def _get_client(self) -> httpx.AsyncClient:
        if self.client is None:
            logger.info(f"Opening BigCommerce client for {self.base_url}")
            self.client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self.headers,
                timeout=self.timeout,
                transport=self.transport,
            )
        return self.client

    async def request(
        self,
        method: str,
        path: str,
        result_type: Any,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Tuple[Any, httpx.Response]:
        """Run one API call and return the decoded result with its raw response.

        Raises the relevant error instead when the call failed.
        """
        client = await self._get_client()
        response, result, transport_error, api_error = await perform_request(
            client, method, path, result_type, params=params, json=json
        )
        error = relevant_error(transport_error, api_error)
        if error is not None:
            raise error
        return result, response

    async def close(self):
        if self.client:
            await self.client.aclose()
            self.client = None

    async def __aenter__(self) -> "BigCommerceClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

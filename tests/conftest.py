import json

import httpx
import pytest

from bigcommerce.client import BigCommerceClient


STORE_HASH = "abc123"
BASE_URL = "https://api.bigcommerce.com/stores/{store_hash}/v2/"
BASE_PATH = f"/stores/{STORE_HASH}/v2/orders/"


def make_order(order_id, **overrides):
    order = {
        "id": order_id,
        "customer_id": 7,
        "date_created": "Tue, 05 Mar 2024 10:00:00 +0000",
        "date_modified": "Tue, 05 Mar 2024 10:00:00 +0000",
        "date_shipped": "",
        "status_id": 11,
        "status": "Awaiting Fulfillment",
        "subtotal_ex_tax": "20.0000",
        "subtotal_inc_tax": "21.5000",
        "total_ex_tax": "25.0000",
        "total_inc_tax": "26.8750",
        "items_total": 2,
        "payment_method": "Manual",
        "currency_code": "USD",
        "staff_notes": "",
        "customer_message": "",
        "billing_address": {
            "first_name": "Jane",
            "last_name": "Doe",
            "street_1": "12 Main St",
            "city": "Austin",
            "state": "Texas",
            "zip": "78701",
            "country": "United States",
            "country_iso2": "US",
            "email": "jane@example.com",
        },
    }
    order.update(overrides)
    return order


class FakeOrderAPI:
    """In-memory stand-in for the orders endpoints of one store."""

    def __init__(self):
        self.orders = {100: make_order(100), 101: make_order(101, customer_id=0, status_id=0)}
        self.next_id = 200
        self.requests = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        assert request.url.path.startswith(BASE_PATH)
        tail = request.url.path[len(BASE_PATH):]

        if request.method == "GET" and tail == "":
            matched = self._filter(request.url.params)
            if not matched:
                return httpx.Response(204)
            return httpx.Response(200, json=matched)

        if request.method == "GET" and tail == "count":
            return httpx.Response(200, json={"count": len(self._filter(request.url.params))})

        if request.method == "POST" and tail == "":
            body = json.loads(request.content)
            order = make_order(
                self.next_id,
                customer_id=body.get("customer_id") or 0,
                status_id=body.get("status_id") or 1,
                billing_address=body["billing_address"],
                customer_message=body.get("customer_message", ""),
                staff_notes=body.get("staff_notes", ""),
            )
            self.orders[self.next_id] = order
            self.next_id += 1
            return httpx.Response(201, json=order)

        order = self.orders.get(int(tail)) if tail.isdigit() else None
        if order is None:
            return httpx.Response(404, json=[{"status": 404, "message": "The requested resource was not found."}])

        if request.method == "GET":
            return httpx.Response(200, json=order)

        if request.method == "PUT":
            order.update(json.loads(request.content))
            return httpx.Response(200, json=order)

        return httpx.Response(405, json=[{"status": 405, "message": "Method not allowed."}])

    def _filter(self, params):
        orders = list(self.orders.values())
        if "min_id" in params:
            orders = [o for o in orders if o["id"] >= int(params["min_id"])]
        if "max_id" in params:
            orders = [o for o in orders if o["id"] <= int(params["max_id"])]
        if "customer_id" in params:
            orders = [o for o in orders if o["customer_id"] == int(params["customer_id"])]
        if "status_id" in params:
            orders = [o for o in orders if o["status_id"] == int(params["status_id"])]
        return orders


@pytest.fixture
def fake_api():
    return FakeOrderAPI()


@pytest.fixture
async def client(fake_api):
    client = BigCommerceClient(
        store_hash=STORE_HASH,
        access_token="test_token_123",
        base_url=BASE_URL,
        client_id="test_client",
        transport=httpx.MockTransport(fake_api.handle),
    )
    yield client
    await client.close()


@pytest.fixture
def make_client():
    def _make(handler):
        return BigCommerceClient(
            store_hash=STORE_HASH,
            access_token="test_token_123",
            base_url=BASE_URL,
            transport=httpx.MockTransport(handler),
        )
    return _make

from datetime import datetime, timezone
from decimal import Decimal
from email.utils import format_datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic_core import to_jsonable_python

from bigcommerce.schemas.address import AddressEntities, AddressEntity
from bigcommerce.schemas.common import Money, compact


class Order(BaseModel):
    id: int = 0
    customer_id: int = 0
    date_created: str = ""
    date_modified: str = ""
    date_shipped: str = ""
    status_id: int = 0
    status: str = ""
    handling_cost_ex_tax: Money = ""
    handling_cost_inc_tax: Money = ""
    handling_cost_tax: Money = ""
    shipping_cost_ex_tax: Money = ""
    shipping_cost_inc_tax: Money = ""
    shipping_cost_tax: Money = ""
    subtotal_ex_tax: Money = ""
    subtotal_inc_tax: Money = ""
    subtotal_tax: Money = ""
    total_ex_tax: Money = ""
    total_inc_tax: Money = ""
    total_tax: Money = ""
    base_shipping_cost: Money = ""
    items_total: int = 0
    payment_method: str = ""
    payment_status: str = ""
    ip_address: str = ""
    currency_id: int = 0
    currency_code: str = ""
    staff_notes: str = ""
    customer_message: str = ""
    discount_amount: Money = ""
    coupon_discount: Money = ""
    shipping_address_count: int = 0
    billing_address: AddressEntity = Field(default_factory=AddressEntity)

    class Config:
        extra = "ignore"

    @field_validator("*", mode="before")
    @classmethod
    def null_as_zero(cls, value: Any, info: ValidationInfo) -> Any:
        # The API sends null for fields that were never set on the order.
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


Orders = List[Order]


class OrderProduct(BaseModel):
    """A line item for a new order.

    Catalog products need product_id and quantity. Custom products need name,
    quantity and one of the prices. Neither combination is checked here; the
    API reports violations.
    """

    product_id: Optional[int] = None
    name: Optional[str] = None
    quantity: int
    price_inc_tax: Optional[Decimal] = None
    price_ex_tax: Optional[Decimal] = None

    def to_payload(self) -> Dict[str, Any]:
        return to_jsonable_python(compact(self.model_dump(), keep=("quantity",)))


OrderProducts = List[OrderProduct]


class OrderBody(BaseModel):
    external_source: str = ""
    customer_id: Optional[int] = None
    status_id: Optional[int] = None
    billing_address: AddressEntity
    products: OrderProducts = []
    shipping_cost_inc_tax: Optional[Decimal] = None
    shipping_cost_ex_tax: Optional[Decimal] = None
    handling_cost_inc_tax: Optional[Decimal] = None
    handling_cost_ex_tax: Optional[Decimal] = None
    shipping_addresses: AddressEntities = []
    customer_message: str = ""
    staff_notes: str = ""

    def to_payload(self) -> Dict[str, Any]:
        payload = {
            "external_source": self.external_source,
            "customer_id": self.customer_id,
            "status_id": self.status_id,
            "billing_address": self.billing_address.to_payload(),
            "products": [product.to_payload() for product in self.products],
        }

        costs = compact({
            "shipping_cost_inc_tax": self.shipping_cost_inc_tax,
            "shipping_cost_ex_tax": self.shipping_cost_ex_tax,
            "handling_cost_inc_tax": self.handling_cost_inc_tax,
            "handling_cost_ex_tax": self.handling_cost_ex_tax,
        })
        payload.update(to_jsonable_python(costs))

        if self.shipping_addresses:
            payload["shipping_addresses"] = [address.to_payload() for address in self.shipping_addresses]

        payload["customer_message"] = self.customer_message
        payload["staff_notes"] = self.staff_notes
        return payload


class OrderEditParams(BaseModel):
    customer_id: Optional[int] = None
    status_id: Optional[int] = None
    ip_address: Optional[str] = None
    staff_notes: Optional[str] = None
    customer_message: Optional[str] = None
    billing_address: Optional[AddressEntity] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class OrderListParams(BaseModel):
    page: int = 0
    limit: int = 0
    sort: str = ""
    min_id: int = 0
    max_id: int = 0
    min_total: Optional[Decimal] = None
    max_total: Optional[Decimal] = None
    customer_id: Optional[int] = None
    email: str = ""
    status_id: Optional[int] = None
    payment_method: str = ""
    min_date_created: Optional[Union[datetime, str]] = None
    max_date_created: Optional[Union[datetime, str]] = None
    min_date_modified: Optional[Union[datetime, str]] = None
    max_date_modified: Optional[Union[datetime, str]] = None
    is_deleted: Optional[bool] = None

    def to_query(self) -> Dict[str, str]:
        data = compact(self.model_dump(), keep=("customer_id", "status_id", "is_deleted"))
        return {key: _query_value(value) for key, value in data.items()}


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        # v2 date filters take RFC 2822 dates; naive datetimes are taken as UTC.
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return format_datetime(value)
    return str(value)

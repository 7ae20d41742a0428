from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class AddressEntity(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    street_1: Optional[str] = None
    street_2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None
    country_iso2: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None

    # Only present on shipping addresses read back from an order.
    id: Optional[int] = None
    order_id: Optional[int] = None
    shipping_method: Optional[str] = None

    class Config:
        extra = "ignore"

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


AddressEntities = List[AddressEntity]

from bigcommerce.client import BigCommerceClient
from bigcommerce.core.errors import APIError, BigCommerceError, NotFoundError, TransportError

__all__ = [
    "BigCommerceClient",
    "BigCommerceError",
    "APIError",
    "NotFoundError",
    "TransportError",
]

from typing import List, Optional

import httpx

from bigcommerce.schemas.common import APIErrorDetail


class BigCommerceError(Exception):
    """Base class for every error raised by the client."""

    def __init__(self, message: str, response: Optional[httpx.Response] = None):
        super().__init__(message)
        self.response = response


class TransportError(BigCommerceError):
    """The request never produced a usable response: network failure,
    timeout, or a success body that could not be decoded."""


class APIError(BigCommerceError):
    """The API answered with a non-success status."""

    def __init__(self, status_code: int, errors: List[APIErrorDetail], response: Optional[httpx.Response] = None):
        self.status_code = status_code
        self.errors = errors
        super().__init__(self._format(status_code, errors), response)

    @staticmethod
    def _format(status_code: int, errors: List[APIErrorDetail]) -> str:
        messages = "; ".join(e.message for e in errors if e.message)
        return f"BigCommerce API error {status_code}: {messages or 'no details'}"


class NotFoundError(APIError):
    pass

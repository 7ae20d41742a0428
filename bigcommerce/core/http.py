import logging
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple, get_origin

import httpx
from pydantic import TypeAdapter

from bigcommerce.core.errors import APIError, BigCommerceError, NotFoundError, TransportError
from bigcommerce.schemas.common import APIErrorDetail, parse_error_body

logger = logging.getLogger(__name__)


async def perform_request(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    result_type: Any,
    params: Optional[Dict[str, str]] = None,
    json: Optional[Dict[str, Any]] = None,
) -> Tuple[Optional[httpx.Response], Any, Optional[TransportError], Optional[APIError]]:
    """Send one request and decode whichever destination the status calls for.

    Returns ``(response, result, transport_error, api_error)``. On a success
    status only ``result`` is filled; on a failure status only ``api_error``;
    ``transport_error`` is set when no usable response could be read. Nothing
    is raised here, the caller decides with :func:`relevant_error`.
    """
    adapter = TypeAdapter(result_type)
    empty = adapter.validate_python([] if get_origin(result_type) is list else {})

    try:
        logger.info(f"{method} {url}")
        if params:
            logger.debug(f"Query params: {params}")
        if json is not None:
            logger.debug(f"Request body: {json}")
        response = await client.request(method, url, params=params, json=json)
    except httpx.TimeoutException as e:
        logger.error(f"{method} {url} timed out: {str(e)}")
        error = TransportError(f"Request timed out: {method} {url}")
        error.__cause__ = e
        return None, empty, error, None
    except httpx.HTTPError as e:
        logger.error(f"{method} {url} failed: {str(e)}")
        error = TransportError(f"Request failed: {method} {url}: {str(e)}")
        error.__cause__ = e
        return None, empty, error, None

    logger.info(f"Response status code: {response.status_code}")

    if not response.is_success:
        return response, empty, None, _api_error(response)

    if response.status_code == 204 or not response.content:
        return response, empty, None, None

    try:
        # Decimal keeps monetary amounts sent as JSON numbers digit-exact.
        result = adapter.validate_python(response.json(parse_float=Decimal))
    except ValueError as e:
        logger.error(f"Could not decode response of {method} {url}: {str(e)}")
        error = TransportError(f"Malformed response from {method} {url}: {str(e)}", response)
        error.__cause__ = e
        return response, empty, error, None

    return response, result, None, None


def _api_error(response: httpx.Response) -> APIError:
    try:
        errors = parse_error_body(response.json())
    except ValueError:
        errors = []

    if not errors:
        errors = [APIErrorDetail(status=response.status_code, message=response.reason_phrase or response.text)]

    error_class = NotFoundError if response.status_code == 404 else APIError
    error = error_class(response.status_code, errors, response)
    logger.warning(f"BigCommerce API error: {str(error)}")
    return error


def relevant_error(
    transport_error: Optional[TransportError], api_error: Optional[APIError]
) -> Optional[BigCommerceError]:
    """Pick the single error worth surfacing, transport failures first."""
    if transport_error is not None:
        return transport_error
    if api_error is not None:
        return api_error
    return None

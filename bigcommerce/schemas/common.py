from decimal import Decimal
from typing import Annotated, Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, BeforeValidator


def _money_to_str(value: Any) -> Any:
    # Decimal keeps the digits as sent; fixed-point format avoids exponent
    # notation. float is only reached when a caller builds a model by hand.
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if value is None:
        return ""
    return value


# Monetary amounts are carried as the exact text the API sent.
Money = Annotated[str, BeforeValidator(_money_to_str)]


def compact(data: Dict[str, Any], keep: Iterable[str] = ()) -> Dict[str, Any]:
    """Drop unset values from a dumped model.

    None is always dropped. Zero values (0, "", empty lists) are dropped too,
    except for the keys in `keep`, where an explicit zero is meaningful.
    """
    keep = set(keep)
    result = {}
    for key, value in data.items():
        if value is None:
            continue
        if key not in keep and not value:
            continue
        result[key] = value
    return result


class Count(BaseModel):
    count: int = 0


class APIErrorDetail(BaseModel):
    status: int = 0
    message: str = ""
    details: Optional[Any] = None


def parse_error_body(body: Union[List[Any], Dict[str, Any], Any]) -> List[APIErrorDetail]:
    """Read the error payload of a failed call.

    The v2 API answers with a list of ``{"status", "message"}`` objects, the v3
    API with a single ``{"status", "title", "errors"}`` object. Anything else
    yields an empty list.
    """
    if isinstance(body, dict):
        body = [body]
    if not isinstance(body, list):
        return []

    errors = []
    for item in body:
        if not isinstance(item, dict):
            continue
        message = item.get("message") or item.get("title") or ""
        details = item.get("details", item.get("errors"))
        status = item.get("status")
        errors.append(APIErrorDetail(
            status=status if isinstance(status, int) else 0,
            message=str(message),
            details=details,
        ))
    return errors

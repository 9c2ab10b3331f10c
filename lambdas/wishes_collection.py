"""
GET/POST/OPTIONS /wishes
List every wish or create a new one.
"""

from __future__ import annotations

from typing import Any, Dict

from src.logging import clogger, log_lambda_handler
from src.utils.events import get_http_method
from src.utils.http import (
    LambdaResponse,
    empty_response,
    json_response,
    method_not_allowed,
    parse_json_object_body,
    translate_exceptions,
    wish_error_response,
)
from src.wishes.errors import WishError
from src.wishes.factory import get_store
from src.wishes.store import WishStore

ALLOWED_METHODS = ("GET", "POST")


# =============================================================================
# Request handling: /wishes
# =============================================================================
#
# Error codes:
#   400 - body not a JSON object
#   405 - unsupported method
#   500 - catchall (handled by @translate_exceptions)
# =============================================================================
def handle_collection_request(
    event: Dict[str, Any], store: WishStore
) -> LambdaResponse:
    method = get_http_method(event)

    if method == "OPTIONS":
        return empty_response(200)

    try:
        if method == "GET":
            wishes = store.list_wishes()
            clogger.debug(f"Listing {len(wishes)} wishes")
            return json_response(200, [dict(wish) for wish in wishes])

        if method == "POST":
            created = store.create(parse_json_object_body(event))
            return json_response(201, dict(created))

        return method_not_allowed(method, ALLOWED_METHODS)

    except WishError as exc:
        clogger.info(
            f"{method} /wishes request rejected: {exc}",
            extra={"status_code": exc.status_code, "error_code": exc.error_code},
        )
        return wish_error_response(exc)


@translate_exceptions
@log_lambda_handler("/wishes")
def lambda_handler(event: Dict[str, Any], context: Any) -> LambdaResponse:
    return handle_collection_request(event, get_store())

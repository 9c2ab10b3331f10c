"""
GET/PUT/PATCH/DELETE/OPTIONS /wishes/{id}
Read, replace, partially update or delete a single wish.
"""

from __future__ import annotations

from typing import Any, Dict

from src.logging import clogger, log_lambda_handler
from src.utils.events import (
    get_http_method,
    get_multi_query_values,
    get_path_parameters,
    get_query_parameters,
)
from src.utils.http import (
    LambdaResponse,
    empty_response,
    json_response,
    method_not_allowed,
    parse_json_object_body,
    translate_exceptions,
    wish_error_response,
)
from src.wishes.errors import WishError, WishNotFoundError, WishValidationError
from src.wishes.factory import get_store
from src.wishes.store import WishStore

ALLOWED_METHODS = ("GET", "PUT", "PATCH", "DELETE")


def extract_wish_id(event: Dict[str, Any]) -> str:
    """
    Read the wish id from the path, falling back to the ``id`` query parameter.

    Raises:
        WishValidationError: If the id is missing, empty, not a string, or
            taken from a query parameter supplied more than once
    """
    wish_id = get_path_parameters(event).get("id")
    if wish_id is None:
        multi_values = get_multi_query_values(event, "id")
        if multi_values is not None and len(multi_values) > 1:
            raise WishValidationError("Invalid wish ID")
        wish_id = get_query_parameters(event).get("id")

    if not isinstance(wish_id, str) or not wish_id:
        raise WishValidationError("Invalid wish ID")

    return wish_id


# =============================================================================
# Request handling: /wishes/{id}
# =============================================================================
#
# Responsibilities:
#   1. Answer CORS preflight
#   2. Validate the wish id
#   3. Dispatch on method to the store
#   4. Map the outcome to a response
#
# Error codes:
#   400 - id missing/malformed, or body not a JSON object
#   404 - no wish with this id
#   405 - unsupported method
#   500 - catchall (handled by @translate_exceptions)
# =============================================================================
def handle_wish_request(event: Dict[str, Any], store: WishStore) -> LambdaResponse:
    method = get_http_method(event)

    # ---------------------------------------------------------------------
    # Step 1 - Preflight
    # ---------------------------------------------------------------------
    if method == "OPTIONS":
        return empty_response(200)

    try:
        # -----------------------------------------------------------------
        # Step 2 - Validate id
        # -----------------------------------------------------------------
        wish_id = extract_wish_id(event)

        # -----------------------------------------------------------------
        # Step 3 - Dispatch
        # -----------------------------------------------------------------
        if method == "GET":
            wish = store.get_by_id(wish_id)
            if wish is None:
                raise WishNotFoundError(wish_id)
            return json_response(200, dict(wish))

        if method == "PUT":
            updated = store.update(wish_id, parse_json_object_body(event))
            return json_response(200, dict(updated))

        if method == "PATCH":
            patched = store.patch(wish_id, parse_json_object_body(event))
            return json_response(200, dict(patched))

        if method == "DELETE":
            store.delete(wish_id)
            return empty_response(204)

        return method_not_allowed(method, ALLOWED_METHODS)

    except WishError as exc:
        # -----------------------------------------------------------------
        # Step 4 - Typed errors
        # -----------------------------------------------------------------
        clogger.info(
            f"{method} /wishes request rejected: {exc}",
            extra={"status_code": exc.status_code, "error_code": exc.error_code},
        )
        return wish_error_response(exc)


@translate_exceptions
@log_lambda_handler("/wishes/{id}")
def lambda_handler(event: Dict[str, Any], context: Any) -> LambdaResponse:
    return handle_wish_request(event, get_store())

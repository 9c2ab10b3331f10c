"""
HTTP response utilities for Lambda functions behind API Gateway.
Provides consistent JSON responses, error formatting, body parsing, and CORS headers.
"""

from __future__ import annotations

import base64
import binascii
import json
from functools import wraps
from typing import Any, Callable, Dict, Iterable, List, Optional, TypedDict, TypeVar, Union

from src.logging import logger
from src.settings import CORS_ALLOW_ORIGIN
from src.wishes.errors import WishError, WishValidationError

F = TypeVar("F", bound=Callable[..., Any])


# -----------------------------------------------------------------------------
# Typed response object for API Gateway
# -----------------------------------------------------------------------------
class LambdaResponse(TypedDict):
    statusCode: int
    headers: Dict[str, str]
    body: str


# -----------------------------------------------------------------------------
# Default CORS headers (shared by all responses)
# -----------------------------------------------------------------------------
DEFAULT_HEADERS: Dict[str, str] = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": CORS_ALLOW_ORIGIN,
    "Access-Control-Allow-Methods": "GET,POST,PUT,PATCH,DELETE,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

INTERNAL_ERROR_SUMMARY = "Internal server error"


def reject_json_constant(token: str) -> Any:
    """``parse_constant`` hook refusing NaN and Infinity, which JSON does not define."""
    raise ValueError(f"Non-standard JSON constant: {token}")


def _merge_headers(headers: Optional[Dict[str, str]]) -> Dict[str, str]:
    combined_headers = DEFAULT_HEADERS.copy()
    if headers:
        combined_headers.update(headers)
    return combined_headers


# -----------------------------------------------------------------------------
# Success Responses
# -----------------------------------------------------------------------------
def json_response(
    status_code: int,
    body: Union[Dict[str, Any], List[Any], str, bool],
    headers: Optional[Dict[str, str]] = None,
) -> LambdaResponse:
    """
    Build a standardized JSON response object for API Gateway.
    """
    return LambdaResponse(
        statusCode=status_code,
        headers=_merge_headers(headers),
        body=json.dumps(body, allow_nan=False),
    )


def empty_response(
    status_code: int,
    headers: Optional[Dict[str, str]] = None,
) -> LambdaResponse:
    """
    Build a response with an empty body (preflight, 204 No Content).
    """
    return LambdaResponse(
        statusCode=status_code,
        headers=_merge_headers(headers),
        body="",
    )


# -----------------------------------------------------------------------------
# Error Responses
# -----------------------------------------------------------------------------
def error_response(
    status_code: int,
    message: str,
    error_code: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
    detail: Optional[str] = None,
) -> LambdaResponse:
    """
    Build a standardized error JSON response.

    Example body:
    {
        "error": "Internal server error",
        "message": "Wish data at wishes.json is not valid JSON",
        "error_code": "INTERNAL_ERROR"
    }
    """
    payload: Dict[str, Any] = {"error": message}

    if detail is not None:
        payload["message"] = detail

    if error_code is not None:
        payload["error_code"] = error_code

    return json_response(
        status_code=status_code,
        body=payload,
        headers=headers,
    )


def wish_error_response(exc: WishError) -> LambdaResponse:
    """
    Map a typed wish error onto its HTTP response.

    Validation errors carry only a summary; everything else also reports the
    underlying message.
    """
    if isinstance(exc, WishValidationError):
        return error_response(exc.status_code, exc.summary, error_code=exc.error_code)

    return error_response(
        exc.status_code,
        exc.summary,
        error_code=exc.error_code,
        detail=str(exc),
    )


def method_not_allowed(method: str, allowed: Iterable[str]) -> LambdaResponse:
    """
    405 response with an ``Allow`` header listing the supported methods.
    """
    return error_response(
        405,
        f"Method {method} not allowed",
        error_code="METHOD_NOT_ALLOWED",
        headers={"Allow": ",".join(allowed)},
    )


# -----------------------------------------------------------------------------
# Request Body Parsing
# -----------------------------------------------------------------------------
def parse_json_object_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Parse the request body as a JSON object.

    Accepts an already-decoded dict, a JSON string, or a base64-encoded JSON
    string when ``isBase64Encoded`` is set.

    Raises:
        WishValidationError: If the body is missing, not JSON, or not an object
    """
    raw_body = event.get("body")

    if isinstance(raw_body, dict):
        return raw_body

    if not isinstance(raw_body, str) or not raw_body.strip():
        raise WishValidationError("Invalid request body")

    if event.get("isBase64Encoded"):
        try:
            raw_body = base64.b64decode(raw_body, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise WishValidationError("Invalid request body") from exc

    try:
        body = json.loads(raw_body, parse_constant=reject_json_constant)
    except ValueError as exc:
        raise WishValidationError("Invalid request body") from exc

    if not isinstance(body, dict):
        raise WishValidationError("Invalid request body")

    return body


# -----------------------------------------------------------------------------
# Exception -> API Gateway Response Translator Decorator
# -----------------------------------------------------------------------------
def translate_exceptions(func: F) -> Callable[[Dict[str, Any], Any], LambdaResponse]:
    """
    Decorator for Lambda handlers that ensures no exception escapes.

    Typed wish errors become their mapped responses; anything else becomes a
    500 carrying the exception message.
    """

    @wraps(func)
    def wrapper(event: Dict[str, Any], context: Any) -> LambdaResponse:
        try:
            return func(event, context)

        except WishError as e:
            logger.warning(f"{type(e).__name__} in {func.__name__}: {e}")
            return wish_error_response(e)

        except Exception as e:
            logger.exception(f"Error in {func.__name__}: {e}")
            return error_response(
                500,
                INTERNAL_ERROR_SUMMARY,
                error_code="INTERNAL_ERROR",
                detail=str(e),
            )

    return wrapper

"""
Lambda handler logging decorator.

Provides request/response logging for AWS Lambda handlers with:
- Correlation ID tracking
- Timing and performance metrics
- Sensitive data masking
"""

import json
import time
import uuid
from functools import wraps
from typing import Any, Callable, Dict, TypeVar

from src.logging.config import logger
from src.logging.context import clogger, correlation_id, request_start_time
from src.logging.masking import mask_sensitive_data
from src.utils.events import (
    get_http_method,
    get_path,
    get_path_parameters,
    get_query_parameters,
)

F = TypeVar("F", bound=Callable[..., Any])

__all__ = ["log_lambda_handler"]

_DEBUG_LEVEL_NO = 10


def _debug_enabled() -> bool:
    return logger._core.min_level <= _DEBUG_LEVEL_NO  # type: ignore[attr-defined]


def _resolve_correlation_id(context: Any) -> str:
    for attr in ("aws_request_id", "request_id"):
        value = getattr(context, attr, None)
        if isinstance(value, str) and value:
            return value
    return str(uuid.uuid4())


def _elapsed_ms() -> int:
    start_time = request_start_time.get()
    return int((time.time() - (start_time or time.time())) * 1000)


# -----------------------------------------------------------------------------
# Lambda Request/Response Logging Decorator
# -----------------------------------------------------------------------------
def log_lambda_handler(
    endpoint_name: str,
    log_request_body: bool = False,
    log_response_body: bool = False,
    mask_request: bool = True,
    mask_response: bool = True,
) -> Callable[[F], F]:
    """
    Lambda handler logging decorator.

    - Uses the Lambda request ID as correlation ID (uuid4 when absent)
    - INFO level: Summary only (method, path, status, duration)
    - DEBUG level: Headers, parameters and optionally bodies (masked)
    - Logs and re-raises any exception escaping the handler

    Args:
        endpoint_name: Human-readable endpoint name (e.g., "GET /wishes/{id}")
        log_request_body: Log request body at DEBUG level
        log_response_body: Log response body at DEBUG level
        mask_request: Whether to mask sensitive data in request
        mask_response: Whether to mask sensitive data in response

    Usage:
        @translate_exceptions
        @log_lambda_handler("/wishes/{id}")
        def lambda_handler(event, context):
            ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(
            event: Dict[str, Any], context: Any, **kwargs: Any
        ) -> Dict[str, Any]:
            # Initialize correlation context
            cid = _resolve_correlation_id(context)
            correlation_id.set(cid)
            request_start_time.set(time.time())

            http_method = get_http_method(event)
            path = get_path(event)

            clogger.info(
                f"Incoming request: {http_method} {path}",
                extra={
                    "event_type": "request",
                    "endpoint": endpoint_name,
                    "method": http_method,
                    "path": path,
                },
            )

            if _debug_enabled():
                headers = event.get("headers") or {}
                detailed_request: Dict[str, Any] = {
                    "event_type": "request_details",
                    "endpoint": endpoint_name,
                    "headers": (
                        mask_sensitive_data(headers) if mask_request else headers
                    ),
                    "query_params": get_query_parameters(event),
                    "path_params": get_path_parameters(event),
                }

                if log_request_body:
                    raw_body = event.get("body") or ""
                    try:
                        body = json.loads(raw_body) if raw_body else {}
                        detailed_request["body"] = (
                            mask_sensitive_data(body) if mask_request else body
                        )
                    except (TypeError, json.JSONDecodeError):
                        detailed_request["body"] = "[NON_JSON_BODY]"

                clogger.debug(
                    f"Request details: {http_method} {path}", extra=detailed_request
                )

            try:
                result = func(event, context, **kwargs)

                status_code = result.get("statusCode", 500)
                duration_ms = _elapsed_ms()

                log_level_name = "info" if 200 <= status_code < 400 else "warning"
                getattr(clogger, log_level_name)(
                    f"Request completed: {http_method} {path} -> {status_code} ({duration_ms}ms)",
                    extra={
                        "event_type": "response",
                        "endpoint": endpoint_name,
                        "status_code": status_code,
                        "duration_ms": duration_ms,
                    },
                )

                if log_response_body and _debug_enabled() and result.get("body"):
                    try:
                        body = json.loads(result["body"])
                        clogger.debug(
                            f"Response details: {status_code}",
                            extra={
                                "event_type": "response_details",
                                "body": (
                                    mask_sensitive_data(body) if mask_response else body
                                ),
                            },
                        )
                    except json.JSONDecodeError:
                        pass

                return result

            except Exception as e:
                clogger.exception(
                    f"Request failed: {http_method} {path}",
                    extra={
                        "event_type": "error",
                        "endpoint": endpoint_name,
                        "duration_ms": _elapsed_ms(),
                        "error_type": type(e).__name__,
                    },
                )
                raise

            finally:
                # Clean up context
                correlation_id.set(None)
                request_start_time.set(None)

        return wrapper  # type: ignore[return-value]

    return decorator

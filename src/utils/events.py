"""
Accessors for API Gateway proxy events.

Handlers accept both REST API (payload v1) and HTTP API (payload v2) events,
which place the method and path in different keys.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


def get_http_method(event: Dict[str, Any]) -> str:
    """Return the upper-cased HTTP method, or "UNKNOWN"."""
    method = event.get("httpMethod")
    if not method:
        http_ctx = (event.get("requestContext") or {}).get("http") or {}
        method = http_ctx.get("method")
    return str(method).upper() if method else "UNKNOWN"


def get_path(event: Dict[str, Any]) -> str:
    """Return the request path, or "UNKNOWN"."""
    return event.get("path") or event.get("rawPath") or "UNKNOWN"


def get_path_parameters(event: Dict[str, Any]) -> Dict[str, Any]:
    return event.get("pathParameters") or {}


def get_query_parameters(event: Dict[str, Any]) -> Dict[str, Any]:
    return event.get("queryStringParameters") or {}


def get_multi_query_values(event: Dict[str, Any], name: str) -> Optional[List[Any]]:
    """
    Return every value supplied for a query parameter, when the event carries them.

    REST API events expose repeated parameters through
    ``multiValueQueryStringParameters``; HTTP API events join them with commas
    into ``queryStringParameters`` and cannot be told apart here.
    """
    multi = event.get("multiValueQueryStringParameters") or {}
    values = multi.get(name)
    if values is None:
        return None
    return list(values)

"""
Typed errors raised by the wish store and request parsing.

Each error carries the HTTP status, summary and error code it maps to, so the
handler boundary dispatches on the error type instead of its message text.
"""

from __future__ import annotations


class WishError(Exception):
    """Base class for expected wish API errors."""

    status_code: int = 500
    summary: str = "Internal server error"
    error_code: str = "INTERNAL_ERROR"


class WishValidationError(WishError):
    """The request is malformed (bad id, non-object body, ...)."""

    status_code = 400
    error_code = "INVALID_REQUEST"

    def __init__(self, message: str):
        super().__init__(message)
        self.summary = message


class WishNotFoundError(WishError):
    """No wish is stored under the requested id."""

    status_code = 404
    summary = "Wish not found"
    error_code = "NOT_FOUND"

    def __init__(self, wish_id: str):
        super().__init__("Wish not found")
        self.wish_id = wish_id


class WishStoreError(WishError):
    """The backing data source could not be read or is malformed."""

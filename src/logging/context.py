"""
Contextual logging with correlation ID and timing support.

Every log line written through ``clogger`` during a request carries the
request's correlation ID (the Lambda ``aws_request_id`` when available) and
the milliseconds elapsed since the request started, so a single invocation
can be filtered out of CloudWatch even when many run side by side.
"""

import time
from contextvars import ContextVar
from typing import Any, Dict, Optional

from src.logging.config import logger

# Context variables for Lambda execution tracking
correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)
request_start_time: ContextVar[Optional[float]] = ContextVar(
    "request_start_time", default=None
)

__all__ = ["correlation_id", "request_start_time", "ContextualLogger", "clogger"]


# -----------------------------------------------------------------------------
# Contextual Logger with Correlation ID Support
# -----------------------------------------------------------------------------
class ContextualLogger:
    """
    Wrapper around loguru logger that automatically injects correlation_id and timing.
    Provides the same interface as loguru logger but with enhanced context.
    """

    def _enrich_message(self, msg: str) -> str:
        """Add correlation ID prefix if available."""
        cid = correlation_id.get()
        if cid:
            return f"[{cid[:8]}] {msg}"
        return msg

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Build context dict with correlation_id and elapsed time."""
        ctx = extra.copy() if extra else {}
        cid = correlation_id.get()
        start = request_start_time.get()

        if cid:
            ctx["correlation_id"] = cid
        if start:
            ctx["elapsed_ms"] = int((time.time() - start) * 1000)

        return ctx

    def _log(
        self, level: str, msg: str, extra: Optional[Dict[str, Any]], **kwargs: Any
    ) -> None:
        # depth=2 attributes the record to the caller, not this wrapper
        bound = logger.bind(**self._add_context(extra)).opt(depth=2)
        getattr(bound, level)(self._enrich_message(msg), **kwargs)

    def info(
        self, msg: str, extra: Optional[Dict[str, Any]] = None, **kwargs: Any
    ) -> None:
        self._log("info", msg, extra, **kwargs)

    def debug(
        self, msg: str, extra: Optional[Dict[str, Any]] = None, **kwargs: Any
    ) -> None:
        self._log("debug", msg, extra, **kwargs)

    def warning(
        self, msg: str, extra: Optional[Dict[str, Any]] = None, **kwargs: Any
    ) -> None:
        self._log("warning", msg, extra, **kwargs)

    def error(
        self, msg: str, extra: Optional[Dict[str, Any]] = None, **kwargs: Any
    ) -> None:
        self._log("error", msg, extra, **kwargs)

    def exception(
        self, msg: str, extra: Optional[Dict[str, Any]] = None, **kwargs: Any
    ) -> None:
        self._log("exception", msg, extra, **kwargs)


# Create singleton instance
clogger = ContextualLogger()

"""
Operation timing for store loads and other short-lived units of work.
"""

import time
from contextlib import contextmanager
from typing import Any, Iterator

from src.logging.context import clogger

__all__ = ["log_operation"]


# -----------------------------------------------------------------------------
# Operation Timing Context Manager
# -----------------------------------------------------------------------------
@contextmanager
def log_operation(
    operation_name: str, log_level: str = "debug", **metadata: Any
) -> Iterator[None]:
    """
    Context manager for timing and logging operations.

    Usage:
        with log_operation("load_wishes", source="wishes.json"):
            records = load_wish_document(source)
        # Logs: "Operation completed: load_wishes (3ms)"

    Args:
        operation_name: Name of the operation being performed
        log_level: Log level for completion message (default: debug)
        **metadata: Additional context to include in logs
    """
    start = time.time()
    clogger.debug(f"Starting operation: {operation_name}", extra=metadata)

    try:
        yield
        duration_ms = int((time.time() - start) * 1000)
        log_func = getattr(clogger, log_level)
        log_func(
            f"Operation completed: {operation_name} ({duration_ms}ms)",
            extra={**metadata, "duration_ms": duration_ms, "status": "success"},
        )
    except Exception as e:
        duration_ms = int((time.time() - start) * 1000)
        clogger.error(
            f"Operation failed: {operation_name} ({duration_ms}ms)",
            extra={
                **metadata,
                "duration_ms": duration_ms,
                "status": "failure",
                "error_type": type(e).__name__,
            },
        )
        raise

"""
Wishlist API logging infrastructure.

Provides logging utilities for AWS Lambda handlers including:
- Structured logging with loguru
- Correlation ID tracking
- Sensitive data masking
- Request/response logging
- Operation timing

Usage:
    from src.logging import clogger, log_lambda_handler

    @log_lambda_handler("/wishes/{id}")
    def lambda_handler(event, context):
        clogger.info("Processing request", extra={"wish_id": "1"})
        ...
"""

# Import and re-export all public components
from src.logging.config import logger, setup_logging
from src.logging.context import clogger, correlation_id, request_start_time
from src.logging.decorators import log_lambda_handler
from src.logging.masking import mask_sensitive_data
from src.logging.operations import log_operation

# Initialize logging when package is imported
setup_logging()

# Define public API
__all__ = [
    # Core logger instances
    "logger",  # Raw loguru logger
    "clogger",  # Contextual logger with correlation ID
    # Decorators
    "log_lambda_handler",
    # Context managers and utilities
    "log_operation",
    "mask_sensitive_data",
    # Context variables
    "correlation_id",
    "request_start_time",
    # Configuration
    "setup_logging",
]

"""
Logging configuration and setup for the wishlist API.

Configures loguru for both AWS Lambda (JSON output) and local development (pretty console output).
"""

import os
import sys

from loguru import logger

# Export the raw loguru logger instance
__all__ = ["logger", "setup_logging", "resolve_log_level"]

_SILENT_LEVELS = {"0", "OFF", "NONE", "SILENT"}
_NUMERIC_LEVELS = {"1": "INFO", "2": "DEBUG"}
_KNOWN_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def resolve_log_level(raw: str) -> str:
    """
    Normalize a LOG_LEVEL value to a loguru level name.

    Returns an empty string when logging should be disabled. Unknown names
    fall back to INFO.
    """
    level = raw.strip().upper()
    if level in _SILENT_LEVELS:
        return ""
    level = _NUMERIC_LEVELS.get(level, _ALIASES.get(level, level))
    return level if level in _KNOWN_LEVELS else "INFO"


# -----------------------------------------------------------------------------
# Logging Setup
# -----------------------------------------------------------------------------
def setup_logging() -> None:
    """
    Configure Loguru logging for both local development and AWS Lambda.

    Local: Pretty console output
    Lambda: JSON structured logging to CloudWatch
    """
    # Remove default logger
    logger.remove()

    log_level = resolve_log_level(os.getenv("LOG_LEVEL", "INFO"))
    if not log_level:
        return  # No logging

    # Check if running in AWS Lambda
    is_lambda = bool(os.getenv("AWS_LAMBDA_FUNCTION_NAME"))

    if is_lambda:
        # AWS Lambda: JSON format for CloudWatch
        logger.add(
            sys.stdout,
            level=log_level,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name}:{function}:{line} | {message}"
            ),
            serialize=True,  # JSON output for CloudWatch
            enqueue=False,  # sync logging
            backtrace=True,  # show full stack traces
            diagnose=False,  # SECURITY: Disabled to avoid exposing variable values
        )
    else:
        # Local development: Pretty format
        logger.add(
            sys.stdout,
            level=log_level,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                "<level>{message}</level>"
            ),
            colorize=True,
            enqueue=False,
            backtrace=True,
            diagnose=True,
        )

    logger.debug(f"Logging initialized with level: {log_level}")

"""
Centralized AWS client factory with lazy initialization and caching.
"""

from __future__ import annotations

from typing import Optional

import boto3
from botocore.client import BaseClient

from src.settings import AWS_REGION


# -------------------------------------------------------------------------------------
# Lazy-initialized client caches
# -------------------------------------------------------------------------------------
_s3_client: Optional[BaseClient] = None


# -------------------------------------------------------------------------------------
# S3
# -------------------------------------------------------------------------------------
def get_s3() -> BaseClient:
    """
    Returns a cached S3 client.
    """
    global _s3_client

    if _s3_client is None:
        _s3_client = boto3.client("s3", region_name=AWS_REGION)

    return _s3_client


# -------------------------------------------------------------------------------------
# Test helper
# -------------------------------------------------------------------------------------
def reset_clients() -> None:
    """
    Drop cached clients so the next call builds a fresh one.
    """
    global _s3_client
    _s3_client = None

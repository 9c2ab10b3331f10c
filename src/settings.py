"""
Global application settings loaded from environment variables.
Used by the Lambda handlers and shared utility modules.
"""

from __future__ import annotations

import os
from typing import Optional


# -----------------------------------------------------------------------------
# Helper: Fetch Optional Environment Variables
# -----------------------------------------------------------------------------
def _optional_env(name: str) -> Optional[str]:
    """
    Fetch an optional environment variable, treating blank values as unset.
    """
    value = os.environ.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()


# -----------------------------------------------------------------------------
# Core AWS & Application Settings
# -----------------------------------------------------------------------------
AWS_REGION: str = os.environ.get("AWS_REGION", "us-east-1")

# Wish data source: local JSON file path or s3://bucket/key.
# When unset, the purely in-memory store seeded with sample wishes is used.
WISHES_DATA_SOURCE: Optional[str] = _optional_env("WISHES_DATA_SOURCE")

# Key holding the list of wish records inside the source document
WISHES_COLLECTION_KEY: str = os.environ.get("WISHES_COLLECTION_KEY", "wishes")

# CORS
CORS_ALLOW_ORIGIN: str = os.environ.get("CORS_ALLOW_ORIGIN", "*")

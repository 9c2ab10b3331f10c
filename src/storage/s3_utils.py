"""
S3 storage utilities for wish data documents.
This module provides:
- Parsing s3://bucket/key URIs
- Reading a JSON document from S3
"""

from __future__ import annotations

import json
from typing import Any, Optional, Tuple

from botocore.exceptions import ClientError
from mypy_boto3_s3 import S3Client

from src.aws.clients import get_s3
from src.logging import logger
from src.utils.http import reject_json_constant

S3_SCHEME = "s3://"

_MISSING_OBJECT_CODES = {"NoSuchKey", "404", "NotFound"}


def is_s3_uri(source: str) -> bool:
    return source.startswith(S3_SCHEME)


def parse_s3_uri(uri: str) -> Tuple[str, str]:
    """
    Split ``s3://bucket/key`` into ``(bucket, key)``.

    Raises:
        ValueError: If the URI has no bucket or no key
    """
    if not is_s3_uri(uri):
        raise ValueError(f"Not an S3 URI: {uri}")

    bucket, _, key = uri[len(S3_SCHEME):].partition("/")
    if not bucket or not key:
        raise ValueError(f"S3 URI must look like s3://bucket/key, got: {uri}")
    return bucket, key


def read_json_object(bucket: str, key: str) -> Optional[Any]:
    """
    Download and decode a JSON object from S3.

    Returns None when the object does not exist. Other client errors and
    invalid JSON propagate.
    """
    s3: S3Client = get_s3()  # type: ignore[assignment]

    logger.debug(f"Reading s3://{bucket}/{key}")

    try:
        response = s3.get_object(Bucket=bucket, Key=key)
    except ClientError as e:
        code = str(e.response.get("Error", {}).get("Code", ""))
        if code in _MISSING_OBJECT_CODES:
            logger.info(f"S3 object not found: s3://{bucket}/{key}")
            return None
        logger.exception(f"Failed to read s3://{bucket}/{key}: {e}")
        raise

    raw = response["Body"].read()
    return json.loads(raw, parse_constant=reject_json_constant)

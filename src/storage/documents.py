"""
Loading of wish data documents from a local file or S3.

A document is a JSON object holding the list of wish records under a single
collection key, e.g. ``{"wishes": [{"id": "1", ...}]}``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from src.logging import logger
from src.storage.s3_utils import is_s3_uri, parse_s3_uri, read_json_object
from src.utils.http import reject_json_constant
from src.wishes.errors import WishStoreError


def read_local_json(path: str) -> Optional[Any]:
    """Decode a local JSON file, or return None when it does not exist."""
    file_path = Path(path)
    if not file_path.is_file():
        logger.info(f"Wish data file not found: {file_path}")
        return None

    with file_path.open("r", encoding="utf-8") as fh:
        return json.load(fh, parse_constant=reject_json_constant)


def read_document(source: str) -> Optional[Any]:
    """
    Read the raw JSON document at ``source``.

    Returns None when the source does not exist.

    Raises:
        WishStoreError: If the source cannot be read or is not valid JSON
    """
    try:
        if is_s3_uri(source):
            bucket, key = parse_s3_uri(source)
            return read_json_object(bucket, key)
        return read_local_json(source)
    except json.JSONDecodeError as e:
        raise WishStoreError(f"Wish data at {source} is not valid JSON: {e}") from e
    except (OSError, ValueError) as e:
        raise WishStoreError(f"Could not read wish data from {source}: {e}") from e


def _is_valid_id(value: Any) -> bool:
    """Ids are non-empty strings or integers (normalized to strings on load)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and bool(value)


def extract_records(document: Any, collection_key: str, source: str) -> List[Dict[str, Any]]:
    """
    Pull the list of wish records out of a decoded document.

    Raises:
        WishStoreError: If the document does not hold a list of objects,
            each with a string or integer id
    """
    if not isinstance(document, dict):
        raise WishStoreError(f"Wish data at {source} must be a JSON object")

    records = document.get(collection_key)
    if not isinstance(records, list):
        raise WishStoreError(
            f"Wish data at {source} has no list under '{collection_key}'"
        )

    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise WishStoreError(
                f"Wish data at {source}: entry {index} is not a JSON object"
            )
        if not _is_valid_id(record.get("id")):
            raise WishStoreError(
                f"Wish data at {source}: entry {index} has no usable 'id'"
            )

    return records


def load_wish_document(source: str, collection_key: str) -> Optional[List[Dict[str, Any]]]:
    """
    Load wish records from a local path or ``s3://bucket/key``.

    Returns None when the source does not exist, so callers can fall back to
    seed data.
    """
    document = read_document(source)
    if document is None:
        return None
    return extract_records(document, collection_key, source)

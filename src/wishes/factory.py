"""
Process-wide wish store, built once per Lambda container from settings.

Handlers receive the store as an argument; only the Lambda entry points call
``get_store``.
"""

from __future__ import annotations

from typing import Optional

from src import settings
from src.logging import logger
from src.wishes.store import DocumentWishStore, InMemoryWishStore, WishStore

_store: Optional[WishStore] = None


def build_store(
    data_source: Optional[str] = None,
    collection_key: str = "wishes",
) -> WishStore:
    """
    Build the store variant matching the configured data source.

    No source means the purely in-memory store.
    """
    if data_source:
        logger.info(f"Using document-backed wish store: {data_source}")
        return DocumentWishStore(data_source, collection_key=collection_key)

    logger.info("Using in-memory wish store")
    return InMemoryWishStore()


def get_store() -> WishStore:
    """
    Returns the cached process-wide store.
    """
    global _store

    if _store is None:
        _store = build_store(
            settings.WISHES_DATA_SOURCE,
            collection_key=settings.WISHES_COLLECTION_KEY,
        )

    return _store


def reset_store() -> None:
    """
    Drop the cached store so the next call builds a fresh one.
    """
    global _store
    _store = None

"""
WishItem record type and the sample wishes used to seed empty stores.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, TypedDict, Union, cast


class WishItem(TypedDict, total=False):
    """
    A single wish. Keys mirror the JSON wire format.

    Non-total because a full update may omit fields, which are then absent
    from the stored record.
    """

    id: str
    image: str
    title: str
    description: str
    price: Union[int, float]
    createdAt: str


SAMPLE_WISHES: List[WishItem] = [
    {
        "id": "1",
        "image": "https://images.unsplash.com/photo-1523275335684-37898b6baf30?w=800&q=80",
        "title": "Apple Watch Smartwatch",
        "description": (
            "Modern smartwatch with numerous features: health monitoring, "
            "notifications, fitness tracking and much more. Perfect companion "
            "for an active lifestyle."
        ),
        "price": 1299.99,
        "createdAt": "2025-01-01T00:00:00.000Z",
    },
    {
        "id": "2",
        "image": "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=800&q=80",
        "title": "Sony WH-1000XM5 Wireless Headphones",
        "description": (
            "Premium headphones with active noise cancellation, excellent sound "
            "quality and long battery life. Perfect for travel and daily use."
        ),
        "price": 399.99,
        "createdAt": "2025-01-02T00:00:00.000Z",
    },
]


def sample_wishes() -> List[WishItem]:
    """Fresh copies of the sample wishes."""
    return [cast(WishItem, dict(wish)) for wish in SAMPLE_WISHES]


def utc_timestamp() -> str:
    """Current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

"""
In-process wish stores.

Two variants share one contract:

- ``InMemoryWishStore`` seeds itself with the sample wishes.
- ``DocumentWishStore`` reads a JSON document (local file or S3 object) once
  and falls back to the sample wishes when the document does not exist.

Both load lazily on first access and keep every mutation in process memory
only. ``persist()`` is called after each mutation and deliberately does
nothing: data does not survive a fresh process, and under several Lambda
instances each one holds its own diverging copy.
"""

from __future__ import annotations

import random
import string
from typing import Any, Callable, Dict, List, Mapping, Optional, cast

from src.logging import clogger, log_operation
from src.storage.documents import load_wish_document
from src.wishes.errors import WishNotFoundError
from src.wishes.models import WishItem, sample_wishes, utc_timestamp

ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 4


def generate_wish_id() -> str:
    """
    Short random base-36 id.

    Not checked against existing ids; collisions are possible.
    """
    return "".join(random.choices(ID_ALPHABET, k=ID_LENGTH))


def _copy(wish: Mapping[str, Any]) -> WishItem:
    return cast(WishItem, dict(wish))


class WishStore:
    """
    Owns an ordered, in-memory collection of wishes keyed by id.

    Subclasses provide the initial records through ``_load_initial``. All
    returned records are copies; callers never alias stored state.
    """

    def __init__(
        self,
        id_factory: Callable[[], str] = generate_wish_id,
        clock: Callable[[], str] = utc_timestamp,
    ):
        self._id_factory = id_factory
        self._clock = clock
        self._wishes: Optional[List[WishItem]] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def _load_initial(self) -> List[WishItem]:
        raise NotImplementedError

    def _ensure_loaded(self) -> List[WishItem]:
        if self._wishes is None:
            self._wishes = self._load_initial()
            clogger.debug(
                f"{type(self).__name__} loaded {len(self._wishes)} wishes",
                extra={"wish_count": len(self._wishes)},
            )
        return self._wishes

    @property
    def loaded(self) -> bool:
        return self._wishes is not None

    def _index_of(self, wish_id: str) -> int:
        for index, wish in enumerate(self._ensure_loaded()):
            if wish.get("id") == wish_id:
                return index
        raise WishNotFoundError(wish_id)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def list_wishes(self) -> List[WishItem]:
        return [_copy(wish) for wish in self._ensure_loaded()]

    def get_by_id(self, wish_id: str) -> Optional[WishItem]:
        """Return the wish stored under ``wish_id``, or None."""
        try:
            index = self._index_of(wish_id)
        except WishNotFoundError:
            return None
        return _copy(self._ensure_loaded()[index])

    def create(self, data: Mapping[str, Any]) -> WishItem:
        """
        Append a new wish built from ``data``.

        Any ``id`` in ``data`` is replaced by a generated one; ``createdAt``
        defaults to now when missing or empty.
        """
        wishes = self._ensure_loaded()
        wish = _copy(data)
        wish["id"] = self._id_factory()
        wish["createdAt"] = data.get("createdAt") or self._clock()
        wishes.append(wish)
        self.persist()

        clogger.info(f"Created wish {wish['id']}", extra={"wish_id": wish["id"]})
        return _copy(wish)

    def update(self, wish_id: str, data: Mapping[str, Any]) -> WishItem:
        """
        Replace the whole record; fields missing from ``data`` are dropped.

        Raises:
            WishNotFoundError: If no wish has this id
        """
        index = self._index_of(wish_id)
        wish = _copy(data)
        wish["id"] = wish_id
        self._ensure_loaded()[index] = wish
        self.persist()

        clogger.info(f"Updated wish {wish_id}", extra={"wish_id": wish_id})
        return _copy(wish)

    def patch(self, wish_id: str, data: Mapping[str, Any]) -> WishItem:
        """
        Shallow-merge ``data`` into the stored record.

        Raises:
            WishNotFoundError: If no wish has this id
        """
        index = self._index_of(wish_id)
        wishes = self._ensure_loaded()
        wish = _copy({**wishes[index], **data})
        wish["id"] = wish_id
        wishes[index] = wish
        self.persist()

        clogger.info(
            f"Patched wish {wish_id}",
            extra={"wish_id": wish_id, "fields": sorted(data.keys())},
        )
        return _copy(wish)

    def delete(self, wish_id: str) -> None:
        """
        Raises:
            WishNotFoundError: If no wish has this id
        """
        index = self._index_of(wish_id)
        del self._ensure_loaded()[index]
        self.persist()

        clogger.info(f"Deleted wish {wish_id}", extra={"wish_id": wish_id})

    def persist(self) -> None:
        """No-op: mutations live only in this process."""


class InMemoryWishStore(WishStore):
    """Store seeded with the sample wishes on first access."""

    def _load_initial(self) -> List[WishItem]:
        return sample_wishes()


class DocumentWishStore(WishStore):
    """
    Store read once from a JSON document at a local path or ``s3://`` URI.

    Writes never reach the document.
    """

    def __init__(
        self,
        source: str,
        collection_key: str = "wishes",
        id_factory: Callable[[], str] = generate_wish_id,
        clock: Callable[[], str] = utc_timestamp,
    ):
        super().__init__(id_factory=id_factory, clock=clock)
        self.source = source
        self.collection_key = collection_key

    def _load_initial(self) -> List[WishItem]:
        with log_operation("load_wishes", source=self.source):
            records = load_wish_document(self.source, self.collection_key)

        if records is None:
            clogger.info(
                f"No wish data at {self.source}, using sample wishes",
                extra={"source": self.source},
            )
            return sample_wishes()

        return _dedupe(records, self.source)


def _dedupe(records: List[Dict[str, Any]], source: str) -> List[WishItem]:
    """
    Keep the first record for each id. Ids are normalized to strings.

    Every record already carries an id; documents without one are rejected
    when read.
    """
    seen = set()
    wishes: List[WishItem] = []
    for record in records:
        wish_id = str(record["id"])
        record = {**record, "id": wish_id}
        if wish_id in seen:
            clogger.warning(
                f"Dropping duplicate wish id {wish_id!r} from {source}",
                extra={"wish_id": wish_id, "source": source},
            )
            continue
        seen.add(wish_id)
        wishes.append(_copy(record))
    return wishes

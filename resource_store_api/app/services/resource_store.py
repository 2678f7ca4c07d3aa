"""
In-memory, thread-safe store of resources.

The store owns an insertion-ordered sequence of :class:`Resource`
records and hands out identifiers itself: the record appended to a
store holding ``n`` records receives ``id = n + 1``.  Every read and
write of the sequence happens while holding a single lock, so

* a list snapshot never contains a half-appended record, and
* two concurrent appends can never compute the same identifier.

The lock is released by ``with`` blocks, so an exception raised inside
one operation leaves the store usable for every later operation.  A
record is pushed only once it is fully built, and every append first
checks that the tail of the sequence still satisfies ``id == length``.

Records are never updated or removed.  The store lives as long as the
application that owns it; nothing is persisted.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Generic, Iterable, List, TypeVar

from resource_store_api.app.core.errors import StoreIntegrityError
from resource_store_api.app.schemas.resource import Resource

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ResourceStore(Generic[T]):
    """Append-only collection of resources guarded by one lock."""

    def __init__(self, initial: Iterable[T] = ()) -> None:
        """Create a store, appending each seed payload in order.

        Seeds go through :meth:`append`, so they receive ids ``1..k``.
        """
        self._lock = Lock()
        self._records: List[Resource[T]] = []
        for data in initial:
            self.append(data)

    def list(self) -> List[Resource[T]]:
        """Return a snapshot of all records in insertion order.

        The returned list is a copy; callers may mutate it freely.
        Records themselves are frozen.
        """
        with self._lock:
            return list(self._records)

    def append(self, data: T) -> Resource[T]:
        """Append ``data`` as a new record and return that record.

        Raises
        ------
        StoreIntegrityError
            If the last stored id no longer matches the sequence length.
            The sequence is left untouched.
        """
        with self._lock:
            count = len(self._records)
            if count and self._records[-1].id != count:
                logger.error(
                    "Resource store integrity check failed: last id %s, length %s",
                    self._records[-1].id,
                    count,
                )
                raise StoreIntegrityError(
                    "store_integrity",
                    f"last resource id {self._records[-1].id} does not match length {count}",
                )
            record = Resource(id=count + 1, data=data)
            self._records.append(record)
        logger.debug("Appended resource %s", record.id)
        return record

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

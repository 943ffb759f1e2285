# restobill/modules/store/services/document_store.py

"""
Document store with real-time subscription.

Every collection holds flat JSON documents keyed by id. Subscribers get the
full current snapshot of a collection on every change, never a diff, and
concurrent writes to the same document resolve as last-write-wins.
"""

from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional
import copy
import logging

from restobill.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

Document = Dict[str, Any]
Snapshot = List[Document]
SnapshotCallback = Callable[[Snapshot], None]


class Collections:
    """Collection names used by the POS"""

    TABLES = "tables"
    ORDERS = "orders"
    MENU = "menu"
    STAFF = "staff"
    SETTINGS = "settings"

    ALL = (TABLES, ORDERS, MENU, STAFF, SETTINGS)


class DocumentStore(ABC):
    """Interface consumed by the POS core"""

    def __init__(self):
        self._subscribers: Dict[str, List[SnapshotCallback]] = defaultdict(list)

    @abstractmethod
    async def save(self, collection: str, doc_id: str, record: Document) -> None:
        """Create or replace a document"""

    @abstractmethod
    async def update(self, collection: str, doc_id: str, fields: Document) -> None:
        """Merge ``fields`` into an existing document"""

    @abstractmethod
    async def delete(self, collection: str, doc_id: str) -> None:
        """Remove a document; deleting a missing document is a no-op"""

    @abstractmethod
    async def get_all(self, collection: str) -> Snapshot:
        """Current snapshot of a collection"""

    async def save_many(self, collection: str, records: Dict[str, Document]) -> None:
        for doc_id, record in records.items():
            await self.save(collection, doc_id, record)

    @abstractmethod
    async def get(self, collection: str, doc_id: str) -> Optional[Document]:
        """Single document or None"""

    async def subscribe(
        self, collection: str, callback: SnapshotCallback
    ) -> Callable[[], None]:
        """
        Register for snapshots of ``collection``.

        The callback fires immediately with the current snapshot and again
        after every change. Returns a callable that unsubscribes.
        """
        self._subscribers[collection].append(callback)
        callback(await self.get_all(collection))

        def unsubscribe():
            if callback in self._subscribers[collection]:
                self._subscribers[collection].remove(callback)

        return unsubscribe

    async def _notify(self, collection: str) -> None:
        callbacks = list(self._subscribers.get(collection, ()))
        if not callbacks:
            return
        snapshot = await self.get_all(collection)
        for callback in callbacks:
            try:
                callback(copy.deepcopy(snapshot))
            except Exception as e:
                logger.error(f"Snapshot subscriber for {collection} failed: {e}")


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed store; snapshots fan out synchronously after each write"""

    def __init__(self):
        super().__init__()
        self._collections: Dict[str, Dict[str, Document]] = defaultdict(dict)

    async def save(self, collection: str, doc_id: str, record: Document) -> None:
        self._collections[collection][doc_id] = copy.deepcopy(record)
        await self._notify(collection)

    async def update(self, collection: str, doc_id: str, fields: Document) -> None:
        current = self._collections[collection].get(doc_id)
        if current is None:
            raise NotFoundError(f"Document {collection}/{doc_id} not found")
        current.update(copy.deepcopy(fields))
        await self._notify(collection)

    async def delete(self, collection: str, doc_id: str) -> None:
        if self._collections[collection].pop(doc_id, None) is not None:
            await self._notify(collection)

    async def get_all(self, collection: str) -> Snapshot:
        return [copy.deepcopy(doc) for doc in self._collections[collection].values()]

    async def get(self, collection: str, doc_id: str) -> Optional[Document]:
        document = self._collections[collection].get(doc_id)
        return copy.deepcopy(document) if document is not None else None

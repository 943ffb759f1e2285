# restobill/modules/store/services/sql_document_store.py

"""
SQLAlchemy-backed document store.

Documents live in a single ``documents`` table as JSON payloads keyed by
(collection, doc_id). Database failures surface as ``PersistenceError`` so
callers can report them without knowing about SQLAlchemy.
"""

from contextlib import contextmanager
from typing import Dict, Optional
import copy
import logging

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from restobill.core.database import Base, build_engine, build_session_factory
from restobill.core.exceptions import NotFoundError, PersistenceError
from ..models.document_models import StoredDocument
from .document_store import Document, DocumentStore, Snapshot

logger = logging.getLogger(__name__)


class SqlDocumentStore(DocumentStore):
    """Document store persisting through a SQLAlchemy engine"""

    def __init__(self, engine: Optional[Engine] = None, create_schema: bool = True):
        super().__init__()
        self.engine = engine or build_engine()
        self.session_factory = build_session_factory(self.engine)
        if create_schema:
            Base.metadata.create_all(bind=self.engine, tables=[StoredDocument.__table__])

    @contextmanager
    def _session(self, action: str):
        db: Session = self.session_factory()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Document store {action} failed: {e}")
            raise PersistenceError(f"Document store {action} failed") from e
        finally:
            db.close()

    def _find(self, db: Session, collection: str, doc_id: str) -> Optional[StoredDocument]:
        return db.execute(
            select(StoredDocument).where(
                StoredDocument.collection == collection,
                StoredDocument.doc_id == doc_id,
            )
        ).scalar_one_or_none()

    def _upsert(self, db: Session, collection: str, doc_id: str, record: Document):
        row = self._find(db, collection, doc_id)
        if row is None:
            db.add(
                StoredDocument(
                    collection=collection, doc_id=doc_id, data=copy.deepcopy(record)
                )
            )
        else:
            row.data = copy.deepcopy(record)

    async def save(self, collection: str, doc_id: str, record: Document) -> None:
        with self._session(f"save {collection}/{doc_id}") as db:
            self._upsert(db, collection, doc_id, record)
        await self._notify(collection)

    async def save_many(self, collection: str, records: Dict[str, Document]) -> None:
        """Write several documents in one transaction"""
        with self._session(f"batch save {collection}") as db:
            for doc_id, record in records.items():
                self._upsert(db, collection, doc_id, record)
        await self._notify(collection)

    async def update(self, collection: str, doc_id: str, fields: Document) -> None:
        with self._session(f"update {collection}/{doc_id}") as db:
            row = self._find(db, collection, doc_id)
            if row is None:
                raise NotFoundError(f"Document {collection}/{doc_id} not found")
            merged = dict(row.data or {})
            merged.update(copy.deepcopy(fields))
            row.data = merged
        await self._notify(collection)

    async def delete(self, collection: str, doc_id: str) -> None:
        with self._session(f"delete {collection}/{doc_id}") as db:
            row = self._find(db, collection, doc_id)
            if row is None:
                return
            db.delete(row)
        await self._notify(collection)

    async def get(self, collection: str, doc_id: str) -> Optional[Document]:
        with self._session(f"read {collection}/{doc_id}") as db:
            row = self._find(db, collection, doc_id)
            return copy.deepcopy(row.data) if row is not None else None

    async def get_all(self, collection: str) -> Snapshot:
        with self._session(f"read {collection}") as db:
            rows = db.execute(
                select(StoredDocument)
                .where(StoredDocument.collection == collection)
                .order_by(StoredDocument.id)
            ).scalars().all()
            return [copy.deepcopy(row.data) for row in rows]

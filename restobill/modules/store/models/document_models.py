# restobill/modules/store/models/document_models.py

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, JSON, String, UniqueConstraint

from restobill.core.database import Base


def _utc_now():
    return datetime.now(timezone.utc)


class StoredDocument(Base):
    """One flat document of a collection"""

    __tablename__ = "documents"
    __table_args__ = (
        UniqueConstraint("collection", "doc_id", name="uq_documents_collection_doc"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    collection = Column(String(50), nullable=False, index=True)
    doc_id = Column(String(100), nullable=False)
    data = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), default=_utc_now)
    updated_at = Column(DateTime(timezone=True), default=_utc_now, onupdate=_utc_now)

    def __repr__(self):
        return f"<StoredDocument {self.collection}/{self.doc_id}>"

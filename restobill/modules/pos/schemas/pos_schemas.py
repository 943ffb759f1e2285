# restobill/modules/pos/schemas/pos_schemas.py

from datetime import datetime, timezone
from enum import Enum
import uuid

from pydantic import Field

from restobill.core.schemas import DocumentModel


class NotificationType(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class PosNotification(DocumentModel):
    """Transient message for the staff terminal"""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    message: str
    type: NotificationType = NotificationType.INFO
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

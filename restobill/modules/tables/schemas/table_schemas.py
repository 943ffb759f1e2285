# restobill/modules/tables/schemas/table_schemas.py

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field

from restobill.core.schemas import DocumentModel
from ..enums.table_enums import TableStatus


class Table(DocumentModel):
    """Physical table; occupancy is derived from its order's lifecycle"""

    id: str
    name: str = Field(..., max_length=50)
    capacity: int = Field(4, ge=1)
    status: TableStatus = TableStatus.AVAILABLE
    current_order_id: Optional[str] = None

    @property
    def is_available(self) -> bool:
        return self.status == TableStatus.AVAILABLE


class TableMutation(DocumentModel):
    """Required table state after an order transition"""

    table_id: str
    status: TableStatus
    current_order_id: Optional[str] = None

    @classmethod
    def occupy(cls, table_id: str, order_id: str) -> "TableMutation":
        return cls(table_id=table_id, status=TableStatus.OCCUPIED, current_order_id=order_id)

    @classmethod
    def release(cls, table_id: str) -> "TableMutation":
        return cls(table_id=table_id, status=TableStatus.AVAILABLE, current_order_id=None)

    def to_fields(self) -> Dict[str, Any]:
        """Partial document for ``DocumentStore.update``"""
        return {
            "status": self.status.value,
            "currentOrderId": self.current_order_id,
        }


class TableOverview(DocumentModel):
    """Read model for the tables screen"""

    table_id: str
    name: str
    capacity: int
    status: TableStatus
    order_id: Optional[str] = None
    opened_at: Optional[datetime] = None
    running_total: float = 0.0
    item_count: int = 0

# restobill/modules/analytics/schemas/analytics_schemas.py

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from restobill.core.schemas import DocumentModel, coerce_text
from ..enums.analytics_enums import ReportRange


class OrderRecord(DocumentModel):
    """
    Lenient read-only projection of an order document.

    Categorical fields stay plain strings so unknown values can be defaulted
    instead of rejecting the whole record.
    """

    id: str
    status: str
    table_id: Optional[str] = None
    completed_at: Optional[datetime] = None
    total: float = 0.0
    order_type: Optional[str] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    payment_mode: Optional[str] = None
    delivery_method: Optional[str] = None

    @field_validator(
        "table_id",
        "order_type",
        "customer_name",
        "customer_phone",
        "payment_mode",
        "delivery_method",
        mode="before",
    )
    @classmethod
    def read_text(cls, v):
        return coerce_text(v)


class SalesBucket(DocumentModel):
    key: str
    label: str
    sales: float = 0.0
    orders: int = 0


class SalesSummary(DocumentModel):
    total_sales: float = 0.0
    total_orders: int = 0
    average_order_value: float = 0.0


class DistributionSlice(DocumentModel):
    name: str
    value: int = 0
    percentage: float = 0.0


class LedgerRow(DocumentModel):
    id: str
    completed_at: datetime
    table_id: Optional[str] = None
    order_type: Optional[str] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    total: float = 0.0
    payment_mode: str
    delivery_method: str


class LedgerPage(DocumentModel):
    query: str = ""
    rows: List[LedgerRow] = Field(default_factory=list)
    total_matches: int = 0
    limit: int = 50

    @property
    def truncated(self) -> bool:
        return self.total_matches > len(self.rows)


class SalesReport(DocumentModel):
    range: ReportRange
    generated_at: datetime
    series: List[SalesBucket] = Field(default_factory=list)
    summary: SalesSummary = Field(default_factory=SalesSummary)
    payment_modes: List[DistributionSlice] = Field(default_factory=list)
    delivery_methods: List[DistributionSlice] = Field(default_factory=list)
    ledger: LedgerPage = Field(default_factory=LedgerPage)

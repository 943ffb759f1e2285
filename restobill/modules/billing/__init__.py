"""Billing engine: totals breakdown for order line items."""

from .schemas.billing_schemas import BillTotals
from .services.billing_service import compute_totals, item_count

__all__ = ["BillTotals", "compute_totals", "item_count"]

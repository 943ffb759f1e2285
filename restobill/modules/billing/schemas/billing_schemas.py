# restobill/modules/billing/schemas/billing_schemas.py

from pydantic import Field

from restobill.core.schemas import DocumentModel

DISPLAY_PRECISION = 2


class BillTotals(DocumentModel):
    """Totals breakdown derived from an order's line items"""

    subtotal: float = Field(0.0, ge=0)
    tax_amount: float = Field(0.0, ge=0)
    service_charge_amount: float = Field(0.0, ge=0)
    discount_amount: float = Field(0.0, ge=0)
    total: float = Field(0.0, ge=0)

    def for_display(self) -> "BillTotals":
        """Copy rounded to currency display precision; never store the result"""
        return BillTotals(
            subtotal=round(self.subtotal, DISPLAY_PRECISION),
            tax_amount=round(self.tax_amount, DISPLAY_PRECISION),
            service_charge_amount=round(self.service_charge_amount, DISPLAY_PRECISION),
            discount_amount=round(self.discount_amount, DISPLAY_PRECISION),
            total=round(self.total, DISPLAY_PRECISION),
        )

# restobill/modules/billing/services/billing_service.py

"""
Billing engine: turns a line-item list and the store's tax and service
charge rates into a totals breakdown.

Amounts are kept unrounded. Rounding to display precision happens only
through ``BillTotals.for_display`` so repeated recomputation never
accumulates rounding error.
"""

from typing import Iterable
import logging

from ..schemas.billing_schemas import BillTotals

logger = logging.getLogger(__name__)


def compute_totals(
    items: Iterable, gst_rate: float, service_charge_rate: float
) -> BillTotals:
    """
    Calculate subtotal, tax, service charge and total for a list of items.

    Args:
        items: Objects exposing ``price`` and ``quantity``
        gst_rate: Tax rate as a percentage, e.g. 5 for 5%
        service_charge_rate: Service charge as a percentage

    Returns:
        BillTotals with discount_amount fixed at 0
    """
    subtotal = 0.0
    for item in items:
        if item.quantity > 0:
            subtotal += item.price * item.quantity

    tax_amount = subtotal * gst_rate / 100
    service_charge_amount = subtotal * service_charge_rate / 100
    total = subtotal + tax_amount + service_charge_amount

    logger.debug(
        f"Computed totals: subtotal={subtotal}, tax={tax_amount}, "
        f"service={service_charge_amount}, total={total}"
    )

    return BillTotals(
        subtotal=subtotal,
        tax_amount=tax_amount,
        service_charge_amount=service_charge_amount,
        discount_amount=0.0,
        total=total,
    )


def item_count(items: Iterable) -> int:
    """Total number of units across all line items"""
    return sum(item.quantity for item in items)

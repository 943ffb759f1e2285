# restobill/modules/orders/services/order_lifecycle_service.py

"""
Order lifecycle: item list mutations and status transitions.

Structural changes to the item list always recompute the bill through the
billing engine before returning, so an order's monetary fields never lag
behind its items. ``complete`` and ``cancel`` return the table mutation the
caller has to apply.
"""

from datetime import datetime
from typing import Optional
import logging

from restobill.core.exceptions import NotFoundError, OrderStateError, ValidationError
from restobill.modules.billing import BillTotals, compute_totals
from restobill.modules.menu.schemas.menu_schemas import MenuItem
from restobill.modules.settings.schemas.settings_schemas import StoreSettings
from restobill.modules.tables.schemas.table_schemas import TableMutation
from restobill.modules.tables.services.table_state_service import transition_for_order
from ..enums.order_enums import OrderStatus, OrderType, PaymentMode, DeliveryMethod
from ..schemas.order_schemas import Order, OrderLineItem, utc_now

logger = logging.getLogger(__name__)


class OrderLifecycleService:
    """Service for mutating orders and moving them through their states"""

    def __init__(self, settings: Optional[StoreSettings] = None):
        self.settings = settings or StoreSettings()

    def new_order(self, table_id: str) -> Order:
        """Fresh active order with an empty cart"""
        return Order(
            table_id=table_id,
            status=OrderStatus.ACTIVE,
            order_type=OrderType.EAT_IN,
            payment_mode=PaymentMode.CASH,
            delivery_method=DeliveryMethod.NONE,
        )

    def recompute(self, order: Order) -> BillTotals:
        """Write fresh totals for the current item list onto the order"""
        totals = compute_totals(
            order.items, self.settings.gst_rate, self.settings.service_charge_rate
        )
        order.subtotal = totals.subtotal
        order.tax_amount = totals.tax_amount
        order.service_charge_amount = totals.service_charge_amount
        order.discount_amount = totals.discount_amount
        order.total = totals.total
        return totals

    def add_item(self, order: Order, menu_item: MenuItem) -> bool:
        """
        Add one unit of a menu item.

        An existing line for the same menu item is incremented (its note is
        kept); otherwise a new line with quantity 1 is appended.

        Returns:
            False without touching the order if it is not active
        """
        if not order.is_active:
            logger.warning(
                f"Ignoring add_item on order {order.id} with status {order.status.value}"
            )
            return False

        existing = next(
            (item for item in order.items if item.menu_item_id == menu_item.id), None
        )
        if existing is not None:
            existing.quantity += 1
        else:
            order.items.append(
                OrderLineItem(
                    menu_item_id=menu_item.id,
                    name=menu_item.name,
                    price=menu_item.price,
                    quantity=1,
                    note="",
                )
            )

        self.recompute(order)
        return True

    def change_quantity(self, order: Order, line_item_id: str, delta: int) -> bool:
        """
        Adjust a line's quantity by ``delta``, clamped at zero.

        A line that reaches zero is removed from the order.

        Returns:
            False without touching the order if it is not active
        """
        if not order.is_active:
            logger.warning(
                f"Ignoring quantity change on order {order.id} with status {order.status.value}"
            )
            return False

        item = self._get_line_item(order, line_item_id)
        item.quantity = max(0, item.quantity + delta)
        order.items = [i for i in order.items if i.quantity > 0]

        self.recompute(order)
        return True

    def set_item_note(self, order: Order, line_item_id: str, text: str) -> bool:
        if not order.is_active:
            return False
        self._get_line_item(order, line_item_id).note = text
        return True

    def set_order_type(self, order: Order, order_type: OrderType) -> bool:
        if not order.is_active:
            return False
        order.order_type = OrderType(order_type)
        return True

    def set_customer(
        self,
        order: Order,
        customer_name: Optional[str] = None,
        customer_phone: Optional[str] = None,
    ) -> bool:
        if order.status == OrderStatus.CANCELLED:
            return False
        if customer_name is not None:
            order.customer_name = customer_name.strip() or None
        if customer_phone is not None:
            order.customer_phone = customer_phone.strip() or None
        return True

    def set_delivery_method(
        self,
        order: Order,
        delivery_method: DeliveryMethod,
        customer_phone: Optional[str] = None,
    ) -> None:
        """Record how the bill was handed over; allowed after completion"""
        if order.status == OrderStatus.CANCELLED:
            raise OrderStateError(
                f"Cannot send a bill for cancelled order {order.id}"
            )
        order.delivery_method = DeliveryMethod(delivery_method)
        if customer_phone:
            order.customer_phone = customer_phone

    def complete(
        self,
        order: Order,
        payment_mode: PaymentMode = PaymentMode.CASH,
        delivery_method: DeliveryMethod = DeliveryMethod.NONE,
        completed_at: Optional[datetime] = None,
    ) -> TableMutation:
        """
        Settle an active order and freeze its items.

        Raises:
            OrderStateError: order is already completed or cancelled
            ValidationError: order has no items
        """
        self._require_active(order, "complete")
        if not order.items:
            raise ValidationError(f"Cannot complete order {order.id} with no items")

        # Totals must reflect the frozen item list
        self.recompute(order)
        order.payment_mode = PaymentMode(payment_mode)
        order.delivery_method = DeliveryMethod(delivery_method)
        order.completed_at = completed_at or utc_now()
        order.status = OrderStatus.COMPLETED

        logger.info(
            f"Completed order {order.id} for table {order.table_id}: "
            f"total={order.total}, payment={order.payment_mode.value}"
        )
        return transition_for_order(order)

    def cancel(self, order: Order) -> TableMutation:
        """
        Cancel an active order; it is dropped from analytics.

        Raises:
            OrderStateError: order is already completed or cancelled
        """
        self._require_active(order, "cancel")
        order.status = OrderStatus.CANCELLED
        logger.info(f"Cancelled order {order.id} for table {order.table_id}")
        return transition_for_order(order)

    def _require_active(self, order: Order, action: str):
        if not order.is_active:
            raise OrderStateError(
                f"Cannot {action} order {order.id}: status is {order.status.value}"
            )

    def _get_line_item(self, order: Order, line_item_id: str) -> OrderLineItem:
        item = order.find_line_item(line_item_id)
        if item is None:
            raise NotFoundError(
                f"Line item {line_item_id} not found in order {order.id}"
            )
        return item

# tests/factories/order.py

import factory
from factory import Faker, Sequence, LazyAttribute, LazyFunction
from datetime import datetime, timezone

from restobill.modules.orders.enums.order_enums import (
    OrderStatus,
    OrderType,
    PaymentMode,
    DeliveryMethod,
)
from restobill.modules.orders.schemas.order_schemas import Order, OrderLineItem


class OrderLineItemFactory(factory.Factory):
    """Factory for creating order line items."""

    class Meta:
        model = OrderLineItem

    id = Sequence(lambda n: f"line-{n + 1}")
    menu_item_id = Sequence(lambda n: f"m{n + 1}")
    name = Sequence(lambda n: f"Dish {n + 1}")
    price = 100.0
    quantity = 1
    note = ""


class OrderFactory(factory.Factory):
    """Factory for creating active orders."""

    class Meta:
        model = Order

    id = Sequence(lambda n: f"order-{n + 1}")
    table_id = "t1"
    items = factory.LazyFunction(list)
    status = OrderStatus.ACTIVE
    order_type = OrderType.EAT_IN


class CompletedOrderFactory(OrderFactory):
    """
    Factory for completed orders as analytics sees them.

    ``total`` is set directly; pass ``subtotal`` too if the breakdown matters.
    """

    status = OrderStatus.COMPLETED
    completed_at = LazyFunction(lambda: datetime.now(timezone.utc))
    created_at = LazyAttribute(lambda obj: obj.completed_at)
    total = 100.0
    payment_mode = PaymentMode.CASH
    delivery_method = DeliveryMethod.NONE
    customer_name = Faker("name")
    customer_phone = Sequence(lambda n: f"98{n:08d}")

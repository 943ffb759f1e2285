"""
Tests for order item mutations and status transitions.
"""

import pytest

from restobill.core.exceptions import NotFoundError, OrderStateError, ValidationError
from restobill.modules.tables.enums.table_enums import TableStatus
from ..enums.order_enums import OrderStatus, OrderType, PaymentMode, DeliveryMethod
from ..schemas.order_schemas import Order
from ..services.order_lifecycle_service import OrderLifecycleService
from tests.factories import CompletedOrderFactory, OrderFactory, OrderLineItemFactory


@pytest.fixture
def order(lifecycle):
    return lifecycle.new_order("t1")


class TestNewOrder:
    def test_new_order_defaults(self, lifecycle):
        """Test a new order is an empty active eat-in order"""
        order = lifecycle.new_order("t3")

        assert order.table_id == "t3"
        assert order.status == OrderStatus.ACTIVE
        assert order.order_type == OrderType.EAT_IN
        assert order.items == []
        assert order.total == 0
        assert order.completed_at is None
        assert order.payment_mode == PaymentMode.CASH
        assert order.delivery_method == DeliveryMethod.NONE

    def test_new_orders_get_distinct_ids(self, lifecycle):
        assert lifecycle.new_order("t1").id != lifecycle.new_order("t1").id


class TestAddItem:
    """Test adding menu items"""

    def test_add_same_item_twice_increments_quantity(self, lifecycle, order, paneer_tikka):
        """Test adding an item twice yields a single line with quantity 2"""
        lifecycle.add_item(order, paneer_tikka)
        lifecycle.add_item(order, paneer_tikka)

        assert len(order.items) == 1
        assert order.items[0].quantity == 2
        assert order.items[0].menu_item_id == paneer_tikka.id

    def test_add_item_recomputes_totals(self, lifecycle, order, paneer_tikka, chicken_tikka):
        lifecycle.add_item(order, paneer_tikka)
        lifecycle.add_item(order, chicken_tikka)

        assert order.subtotal == pytest.approx(520)
        assert order.tax_amount == pytest.approx(26)
        assert order.service_charge_amount == pytest.approx(26)
        assert order.total == pytest.approx(572)

    def test_add_item_snapshots_name_and_price(self, lifecycle, order, paneer_tikka):
        lifecycle.add_item(order, paneer_tikka)
        paneer_tikka.price = 999

        assert order.items[0].price == 240
        assert order.items[0].name == "Paneer Tikka"
        assert order.items[0].note == ""

    def test_add_item_keeps_existing_note(self, lifecycle, order, paneer_tikka):
        lifecycle.add_item(order, paneer_tikka)
        lifecycle.set_item_note(order, order.items[0].id, "extra spicy")
        lifecycle.add_item(order, paneer_tikka)

        assert order.items[0].note == "extra spicy"

    @pytest.mark.parametrize(
        "order_factory",
        [
            lambda: CompletedOrderFactory(items=[OrderLineItemFactory()]),
            lambda: OrderFactory(status=OrderStatus.CANCELLED, items=[OrderLineItemFactory()]),
        ],
    )
    def test_add_item_ignored_when_not_active(self, lifecycle, paneer_tikka, order_factory):
        """Test adding to a finished order is a silent no-op"""
        order = order_factory()
        before = order.model_dump()

        assert lifecycle.add_item(order, paneer_tikka) is False
        assert order.model_dump() == before


class TestChangeQuantity:
    def test_decrement_to_zero_removes_line(self, lifecycle, order, paneer_tikka):
        """Test a line reaching zero disappears"""
        lifecycle.add_item(order, paneer_tikka)
        line_id = order.items[0].id

        lifecycle.change_quantity(order, line_id, -1)

        assert order.items == []
        assert order.subtotal == 0
        assert order.total == 0

    def test_quantity_clamped_at_zero(self, lifecycle, order, paneer_tikka):
        lifecycle.add_item(order, paneer_tikka)

        lifecycle.change_quantity(order, order.items[0].id, -5)

        assert order.items == []

    def test_increment_recomputes(self, lifecycle, order, chicken_tikka):
        lifecycle.add_item(order, chicken_tikka)

        lifecycle.change_quantity(order, order.items[0].id, 2)

        assert order.items[0].quantity == 3
        assert order.subtotal == pytest.approx(840)

    def test_unknown_line_raises(self, lifecycle, order):
        with pytest.raises(NotFoundError):
            lifecycle.change_quantity(order, "missing", 1)

    def test_ignored_on_cancelled_order(self, lifecycle, order, paneer_tikka):
        lifecycle.add_item(order, paneer_tikka)
        lifecycle.cancel(order)

        assert lifecycle.change_quantity(order, order.items[0].id, 1) is False
        assert order.items[0].quantity == 1


class TestOrderDetails:
    def test_set_item_note(self, lifecycle, order, paneer_tikka):
        lifecycle.add_item(order, paneer_tikka)

        assert lifecycle.set_item_note(order, order.items[0].id, "no onions") is True
        assert order.items[0].note == "no onions"

    def test_set_order_type(self, lifecycle, order):
        lifecycle.set_order_type(order, OrderType.TAKEAWAY)

        assert order.order_type == OrderType.TAKEAWAY

    def test_set_customer_strips_whitespace(self, lifecycle, order):
        lifecycle.set_customer(order, "  Asha Rao ", " 98765 ")

        assert order.customer_name == "Asha Rao"
        assert order.customer_phone == "98765"

    def test_set_customer_blank_clears(self, lifecycle, order):
        lifecycle.set_customer(order, "Asha", "123")
        lifecycle.set_customer(order, "   ", None)

        assert order.customer_name is None
        assert order.customer_phone == "123"


class TestCompleteOrder:
    """Test settling orders"""

    def test_complete_sets_payment_and_releases_table(self, lifecycle, order, paneer_tikka):
        lifecycle.add_item(order, paneer_tikka)

        mutation = lifecycle.complete(order, PaymentMode.UPI, DeliveryMethod.WHATSAPP)

        assert order.status == OrderStatus.COMPLETED
        assert order.completed_at is not None
        assert order.completed_at.tzinfo is not None
        assert order.payment_mode == PaymentMode.UPI
        assert order.delivery_method == DeliveryMethod.WHATSAPP
        assert mutation.table_id == "t1"
        assert mutation.status == TableStatus.AVAILABLE
        assert mutation.current_order_id is None

    def test_complete_twice_rejected_without_changes(self, lifecycle, order, paneer_tikka):
        """Test completing a completed order leaves it untouched"""
        lifecycle.add_item(order, paneer_tikka)
        lifecycle.complete(order, PaymentMode.CARD)
        before = order.model_dump()

        with pytest.raises(OrderStateError):
            lifecycle.complete(order, PaymentMode.CASH)

        assert order.model_dump() == before

    def test_complete_cancelled_rejected(self, lifecycle, order, paneer_tikka):
        lifecycle.add_item(order, paneer_tikka)
        lifecycle.cancel(order)

        with pytest.raises(OrderStateError):
            lifecycle.complete(order)

        assert order.status == OrderStatus.CANCELLED
        assert order.completed_at is None

    def test_complete_empty_order_rejected(self, lifecycle, order):
        with pytest.raises(ValidationError):
            lifecycle.complete(order)

        assert order.status == OrderStatus.ACTIVE

    def test_complete_uses_current_rates(self, order, paneer_tikka, store_settings):
        lifecycle = OrderLifecycleService(store_settings)
        lifecycle.add_item(order, paneer_tikka)

        lifecycle.settings = store_settings.model_copy(update={"gst_rate": 0})
        lifecycle.complete(order)

        assert order.tax_amount == 0
        assert order.total == pytest.approx(252)


class TestCancelOrder:
    def test_cancel_releases_table(self, lifecycle, order, paneer_tikka):
        lifecycle.add_item(order, paneer_tikka)

        mutation = lifecycle.cancel(order)

        assert order.status == OrderStatus.CANCELLED
        assert order.completed_at is None
        assert mutation.status == TableStatus.AVAILABLE

    def test_cancel_completed_rejected(self, lifecycle, order, paneer_tikka):
        lifecycle.add_item(order, paneer_tikka)
        lifecycle.complete(order)

        with pytest.raises(OrderStateError):
            lifecycle.cancel(order)

        assert order.status == OrderStatus.COMPLETED


class TestDeliveryMethod:
    def test_delivery_method_after_completion(self, lifecycle, order, paneer_tikka):
        lifecycle.add_item(order, paneer_tikka)
        lifecycle.complete(order)

        lifecycle.set_delivery_method(order, DeliveryMethod.WHATSAPP, "9876543210")

        assert order.delivery_method == DeliveryMethod.WHATSAPP
        assert order.customer_phone == "9876543210"

    def test_delivery_method_on_cancelled_rejected(self, lifecycle, order):
        lifecycle.cancel(order)

        with pytest.raises(OrderStateError):
            lifecycle.set_delivery_method(order, DeliveryMethod.PRINTED)


class TestOrderDocumentParsing:
    def test_unknown_choices_read_as_unset(self):
        order = Order.model_validate(
            {
                "id": "o1",
                "tableId": "t1",
                "paymentMode": "Bitcoin",
                "deliveryMethod": 7,
                "customerName": "Asha",
                "customerPhone": 9876543210,
            }
        )

        assert order.payment_mode is None
        assert order.delivery_method is None
        assert order.customer_phone == "9876543210"

    def test_known_choices_kept(self):
        order = Order.model_validate(
            {"id": "o1", "tableId": "t1", "paymentMode": "UPI", "deliveryMethod": "Printed"}
        )

        assert order.payment_mode == PaymentMode.UPI
        assert order.delivery_method == DeliveryMethod.PRINTED

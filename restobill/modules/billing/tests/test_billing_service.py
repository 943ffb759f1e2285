"""
Tests for the billing engine.
"""

import pytest

from ..schemas.billing_schemas import BillTotals
from ..services.billing_service import compute_totals, item_count
from restobill.modules.orders.schemas.order_schemas import OrderLineItem


def line(price, quantity, menu_item_id="m1"):
    return OrderLineItem(menu_item_id=menu_item_id, name="Dish", price=price, quantity=quantity)


class TestComputeTotals:
    """Test totals calculation"""

    def test_two_units_at_five_percent(self):
        """Test 2 x 100 at 5% tax and 5% service"""
        totals = compute_totals([line(100, 2)], gst_rate=5, service_charge_rate=5)

        assert totals.subtotal == pytest.approx(200)
        assert totals.tax_amount == pytest.approx(10)
        assert totals.service_charge_amount == pytest.approx(10)
        assert totals.discount_amount == 0
        assert totals.total == pytest.approx(220)

    def test_two_units_at_ten_percent(self):
        """Test 2 x 100 at 10% tax and 10% service"""
        totals = compute_totals([line(100, 2)], gst_rate=10, service_charge_rate=10)

        assert totals.subtotal == pytest.approx(200)
        assert totals.tax_amount == pytest.approx(20)
        assert totals.service_charge_amount == pytest.approx(20)
        assert totals.discount_amount == 0
        assert totals.total == pytest.approx(240)

    def test_empty_items(self):
        """Test an empty cart bills nothing"""
        totals = compute_totals([], gst_rate=5, service_charge_rate=5)

        assert totals == BillTotals()

    def test_zero_rates(self):
        """Test zero rates leave the total equal to the subtotal"""
        totals = compute_totals([line(240, 1), line(55, 3, "m2")], 0, 0)

        assert totals.subtotal == pytest.approx(405)
        assert totals.total == pytest.approx(405)

    def test_zero_quantity_lines_ignored(self):
        """Test lines with quantity 0 do not contribute"""
        totals = compute_totals([line(100, 0), line(50, 1, "m2")], 5, 5)

        assert totals.subtotal == pytest.approx(50)

    @pytest.mark.parametrize(
        "items,gst,service",
        [
            ([(240, 1), (280, 2)], 5, 5),
            ([(35, 7)], 18, 0),
            ([(199.99, 3), (0.5, 11)], 12.5, 7.5),
        ],
    )
    def test_total_is_sum_of_parts(self, items, gst, service):
        """Test total equals subtotal + tax + service - discount"""
        totals = compute_totals(
            [line(price, qty, f"m{i}") for i, (price, qty) in enumerate(items)], gst, service
        )

        expected_subtotal = sum(price * qty for price, qty in items)
        assert totals.subtotal == pytest.approx(expected_subtotal, abs=1e-9)
        assert totals.tax_amount == pytest.approx(expected_subtotal * gst / 100, abs=1e-9)
        assert totals.total == pytest.approx(
            totals.subtotal
            + totals.tax_amount
            + totals.service_charge_amount
            - totals.discount_amount,
            abs=1e-9,
        )

    def test_amounts_are_not_rounded(self):
        """Test stored totals keep full precision"""
        totals = compute_totals([line(33.33, 1)], gst_rate=5, service_charge_rate=0)

        assert totals.tax_amount == pytest.approx(1.6665)


class TestDisplayRounding:
    def test_for_display_rounds_to_two_places(self):
        totals = compute_totals([line(33.33, 1)], gst_rate=5, service_charge_rate=0)

        display = totals.for_display()

        assert display.tax_amount == pytest.approx(1.67)
        assert totals.tax_amount == pytest.approx(1.6665)


def test_item_count_sums_quantities():
    assert item_count([line(10, 2), line(20, 3, "m2")]) == 5
    assert item_count([]) == 0

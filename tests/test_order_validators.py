"""
Tests for order consistency checks.
"""
from decimal import Decimal
from uuid import uuid4

import pytest

from apps.orders.domain.entities.order import Order
from apps.orders.domain.entities.order_item import OrderItem
from apps.orders.domain.validators import (
    OrderTotalsValidator,
    SufficientStockValidator,
    validate_order,
)
from apps.products.domain.value_objects.product_status import ProductStatus
from shared.domain.validation import violations_on


@pytest.fixture
def order(shipping_address):
    return Order(customer_id=uuid4(), shipping_address=shipping_address)


def codes(violations):
    return sorted(v.code for v in violations)


class TestOrderTotalsValidator:
    """Tests for OrderTotalsValidator."""

    def test_consistent_order_passes(self, order):
        order.add_order_item(OrderItem(unit_price='10.00', quantity=2))
        order.calculate_totals()
        assert OrderTotalsValidator().validate(order) == []

    def test_stale_subtotal_reported(self, order):
        order.add_order_item(OrderItem(unit_price='10.00', quantity=2))
        order.calculate_totals()
        order.add_order_item(OrderItem(unit_price='5.00'))

        violations = OrderTotalsValidator().validate(order)
        assert codes(violations) == ['order.subtotal.mismatch']
        assert violations[0].path == 'subtotal'
        assert violations[0].params == {'expected': '25.00', 'actual': '20.00'}

    def test_total_mismatch_reported(self, order):
        order.add_order_item(OrderItem(unit_price='10.00'))
        order.calculate_totals()
        order.total_amount = '15.00'
        violations = OrderTotalsValidator().validate(order)
        assert codes(violations) == ['order.total.mismatch']
        assert violations[0].path == 'total_amount'

    def test_difference_within_one_cent_tolerated(self, order):
        order.add_order_item(OrderItem(unit_price='10.00'))
        order.calculate_totals()
        order.subtotal = '10.01'
        order.total_amount = '10.01'
        assert OrderTotalsValidator().validate(order) == []

    def test_empty_order_reported(self, order):
        violations = OrderTotalsValidator().validate(order)
        assert codes(violations) == ['order.items.empty']
        assert violations[0].path == 'order_items'

    def test_below_minimum_reported(self, order):
        order.add_order_item(OrderItem(unit_price='0.50'))
        order.calculate_totals()
        violations = OrderTotalsValidator().validate(order)
        assert codes(violations) == ['order.total.minimum']

    def test_zero_total_is_not_below_minimum(self, order):
        order.add_order_item(OrderItem(unit_price='0.00'))
        order.calculate_totals()
        assert OrderTotalsValidator().validate(order) == []

    def test_checks_are_independent(self, order):
        order.total_amount = '0.50'
        violations = OrderTotalsValidator().validate(order)
        assert codes(violations) == ['order.items.empty', 'order.total.minimum', 'order.total.mismatch']
        assert len(violations_on(violations, 'total_amount')) == 2


class TestSufficientStockValidator:
    """Tests for SufficientStockValidator."""

    def test_no_product_is_skipped(self):
        assert SufficientStockValidator().validate(OrderItem(quantity=5)) == []

    def test_enough_stock_passes(self, make_product):
        item = OrderItem(product=make_product(stock_level=5), quantity=5)
        assert SufficientStockValidator().validate(item) == []

    def test_shortfall_reported(self, make_product):
        item = OrderItem(product=make_product(name='Mug', stock_level=2), quantity=3)
        violations = SufficientStockValidator().validate(item)
        assert codes(violations) == ['order_item.insufficient_stock']
        assert violations[0].path == 'quantity'
        assert violations[0].params == {'requested': 3, 'available': 2, 'product': 'Mug'}

    def test_requested_total_overrides_line_quantity(self, make_product):
        item = OrderItem(product=make_product(stock_level=5), quantity=3)
        violations = SufficientStockValidator().validate(item, requested=6)
        assert codes(violations) == ['order_item.insufficient_stock']
        assert violations[0].params['requested'] == 6

    def test_unavailable_product_reported_separately(self, make_product):
        product = make_product(stock_level=0, status=ProductStatus.OUT_OF_STOCK)
        violations = SufficientStockValidator().validate(OrderItem(product=product, quantity=1))
        assert codes(violations) == ['order_item.insufficient_stock', 'order_item.product_not_available']
        unavailable = violations_on(violations, 'product')[0]
        assert unavailable.params['status'] == 'out_of_stock'


class TestValidateOrder:
    """Tests for the combined order check."""

    def test_item_paths_are_prefixed(self, order, make_product):
        order.add_order_item(OrderItem(product=make_product(stock_level=10), quantity=1))
        order.add_order_item(OrderItem(product=make_product(stock_level=1), quantity=4))
        order.calculate_totals()

        violations = validate_order(order)
        assert [v.path for v in violations] == ['order_items[1].quantity']

    def test_stock_check_can_be_skipped(self, order, make_product):
        order.add_order_item(OrderItem(product=make_product(stock_level=0), quantity=4))
        order.calculate_totals()
        assert validate_order(order, check_stock=False) == []

    def test_stock_summed_over_lines_of_one_product(self, order, make_product):
        product = make_product(stock_level=5)
        order.add_order_item(OrderItem(product=product, quantity=3))
        order.add_order_item(OrderItem(product=product, quantity=2))
        order.calculate_totals()
        assert validate_order(order) == []

        order.order_items[1].quantity = 3
        order.calculate_totals()
        violations = validate_order(order)
        assert [v.path for v in violations] == ['order_items[0].quantity', 'order_items[1].quantity']

    def test_missing_customer_and_negative_amounts(self, shipping_address):
        order = Order(shipping_address=shipping_address)
        order.add_order_item(OrderItem(unit_price='5.00'))
        order.shipping_amount = Decimal('-1.00')
        order.calculate_totals()
        violations = validate_order(order)
        assert 'order.customer.not_null' in codes(violations)
        assert 'order.shipping_amount.positive' in codes(violations)
        assert 'order_item.product.not_null' in codes(violations)

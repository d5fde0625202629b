"""
Tests for OrderItem line totals.
"""
from decimal import Decimal

from apps.orders.domain.entities.order_item import OrderItem


class TestLineTotal:
    """Tests for line total recalculation."""

    def test_defaults(self):
        item = OrderItem()
        assert item.quantity == 1
        assert item.unit_price == Decimal('0.00')
        assert not item.has_unit_price
        assert item.line_total == Decimal('0.00')

    def test_product_price_copied_when_unset(self, make_product):
        item = OrderItem(product=make_product(selling_price=Decimal('19.99')), quantity=3)
        assert item.unit_price == Decimal('19.99')
        assert item.line_total == Decimal('59.97')

    def test_line_total_rounded_from_unrounded_unit_price(self):
        item = OrderItem(unit_price='10.333', quantity=3)
        assert item.line_total == Decimal('31.00')

    def test_explicit_price_kept_when_product_changes(self, make_product):
        item = OrderItem(unit_price='7.50', quantity=2)
        item.product = make_product(selling_price=Decimal('12.00'))
        assert item.unit_price == Decimal('7.50')
        assert item.line_total == Decimal('15.00')

    def test_explicit_zero_price_is_kept(self, make_product):
        item = OrderItem(unit_price='0.00')
        item.product = make_product(selling_price=Decimal('12.00'))
        assert item.has_unit_price
        assert item.line_total == Decimal('0.00')

    def test_first_product_claims_the_price(self, make_product):
        item = OrderItem(product=make_product(selling_price=Decimal('5.00')))
        item.product = make_product(selling_price=Decimal('8.00'))
        assert item.unit_price == Decimal('5.00')

    def test_product_repricing_does_not_change_attached_price(self, make_product):
        product = make_product(selling_price=Decimal('5.00'))
        item = OrderItem(product=product)
        product.update_pricing(selling_price='9.00')
        item.quantity = 2
        assert item.unit_price == Decimal('5.00')
        assert item.line_total == Decimal('10.00')

    def test_quantity_change_recalculates(self):
        item = OrderItem(unit_price='2.50', quantity=1)
        item.quantity = 4
        assert item.line_total == Decimal('10.00')

    def test_non_positive_quantity_gives_zero_total(self):
        item = OrderItem(unit_price='2.50', quantity=0)
        assert item.line_total == Decimal('0.00')
        item.quantity = -3
        assert item.line_total == Decimal('0.00')


class TestRendering:
    """Tests for string rendering."""

    def test_unknown_product(self):
        assert str(OrderItem()) == 'Unknown Product'

    def test_named_product(self, make_product):
        item = OrderItem(product=make_product(name='Desk Lamp'), quantity=2)
        assert str(item) == 'Desk Lamp (x2)'
        assert item.product_name == 'Desk Lamp'

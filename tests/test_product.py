"""
Tests for the Product entity.
"""
from decimal import Decimal

import pytest

from apps.products.domain.entities.product import MAX_IMAGES, Product
from apps.products.domain.events import ProductCreated, StockLevelChanged
from apps.products.domain.exceptions import InvalidProductError, InvalidSKUError
from apps.products.domain.value_objects.product_status import ProductStatus


class TestProductAvailability:
    """Tests for stock and availability flags."""

    def test_available_with_stock(self, make_product):
        product = make_product(stock_level=3)
        assert product.is_available
        assert product.is_in_stock

    def test_available_status_without_stock_is_not_orderable(self, make_product):
        product = make_product(stock_level=0)
        assert not product.is_available
        assert not product.is_in_stock

    @pytest.mark.parametrize('status', [ProductStatus.OUT_OF_STOCK, ProductStatus.DISCONTINUED])
    def test_other_status_is_not_available(self, make_product, status):
        product = make_product(stock_level=50, status=status)
        assert not product.is_available
        assert product.is_in_stock


class TestProductMargin:
    """Tests for the margin percentage."""

    def test_margin_over_cost(self, make_product):
        product = make_product(cost_price=Decimal('10.00'), selling_price=Decimal('15.00'))
        assert product.margin == Decimal('50.00')

    def test_margin_is_rounded(self, make_product):
        product = make_product(cost_price=Decimal('3.00'), selling_price=Decimal('4.00'))
        assert product.margin == Decimal('33.33')

    def test_margin_is_zero_without_cost(self, make_product):
        product = make_product(cost_price=Decimal('0.00'), selling_price=Decimal('9.99'))
        assert product.margin == Decimal('0.00')


class TestProductValidation:
    """Tests for construction rules."""

    def test_blank_name_rejected(self, make_product):
        with pytest.raises(InvalidProductError) as exc_info:
            make_product(name='   ')
        assert exc_info.value.field == 'name'

    def test_negative_price_rejected(self, make_product):
        with pytest.raises(InvalidProductError):
            make_product(selling_price=Decimal('-1.00'))

    def test_negative_stock_rejected(self, make_product):
        with pytest.raises(InvalidProductError):
            make_product(stock_level=-1)

    def test_sku_is_normalized(self, make_product):
        product = make_product(sku=' abc-01 ')
        assert product.sku.value == 'ABC-01'

    def test_invalid_sku_rejected(self, make_product):
        with pytest.raises(InvalidSKUError):
            make_product(sku='has space')

    def test_status_parsed_from_string(self, make_product):
        assert make_product(status='discontinued').status == ProductStatus.DISCONTINUED


class TestProductBehavior:
    """Tests for product mutations."""

    def test_create_records_event(self):
        product = Product.create(name='Mug', sku='mug-1', cost_price='2.50', selling_price='6.00')
        events = product.domain_events
        assert len(events) == 1
        assert isinstance(events[0], ProductCreated)
        assert events[0].sku == 'MUG-1'

    def test_stock_change_records_event(self, make_product):
        product = make_product(stock_level=5)
        product.update_stock_level(2)
        product.update_stock_level(2)
        events = product.domain_events
        assert len(events) == 1
        assert isinstance(events[0], StockLevelChanged)
        assert (events[0].old_level, events[0].new_level) == (5, 2)

    def test_update_pricing_rounds_and_validates(self, make_product):
        product = make_product()
        product.update_pricing(cost_price='4.005', selling_price='8')
        assert product.cost_price == Decimal('4.01')
        assert product.selling_price == Decimal('8.00')
        with pytest.raises(InvalidProductError):
            product.update_pricing(selling_price='-3')

    def test_images_are_unique_and_capped(self, make_product):
        product = make_product()
        product.add_image('https://cdn.example.com/a.jpg')
        product.add_image('https://cdn.example.com/a.jpg')
        assert product.images == ['https://cdn.example.com/a.jpg']

        for index in range(1, MAX_IMAGES):
            product.add_image(f'https://cdn.example.com/{index}.jpg')
        with pytest.raises(InvalidProductError):
            product.add_image('https://cdn.example.com/extra.jpg')

        product.remove_image('https://cdn.example.com/a.jpg')
        assert len(product.images) == MAX_IMAGES - 1

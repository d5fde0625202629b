"""
Tests for the order use cases.
"""
from decimal import Decimal
from uuid import uuid4

import pytest

from apps.orders.application.dtos import OrderLineDTO, PlaceOrderDTO, UpdateOrderStatusDTO
from apps.orders.application.use_cases import (
    PlaceOrderUseCase,
    RecalculateOrderUseCase,
    UpdateOrderStatusUseCase,
)
from apps.orders.domain.entities.order import Order
from apps.orders.domain.entities.order_item import OrderItem
from apps.orders.domain.events import OrderPlaced
from apps.orders.domain.exceptions import InvalidOrderStateError, OrderNotFoundError
from apps.products.domain.exceptions import ProductNotFoundError
from shared.domain.exceptions import ConstraintViolationError


class TestPlaceOrderUseCase:
    """Tests for PlaceOrderUseCase."""

    @pytest.fixture
    def use_case(self, order_repository, product_repository):
        return PlaceOrderUseCase(order_repository=order_repository, product_repository=product_repository)

    def test_places_order_with_product_prices(
        self, use_case, order_repository, product_repository, make_product, shipping_address
    ):
        lamp = product_repository.save(make_product(selling_price=Decimal('19.99')))
        mug = product_repository.save(make_product(selling_price=Decimal('6.00')))

        result = use_case.execute(PlaceOrderDTO(
            customer_id=uuid4(),
            shipping_address=shipping_address,
            items=[
                OrderLineDTO(product_id=lamp.id, quantity=2),
                OrderLineDTO(product_id=mug.id, quantity=1, unit_price=Decimal('5.00')),
            ],
            tax_amount=Decimal('4.50'),
            shipping_amount=Decimal('3.00'),
        ))

        assert result.success
        assert result.data.subtotal == Decimal('44.98')
        assert result.data.total_amount == Decimal('52.48')
        assert result.data.status == 'pending'
        assert [item.unit_price for item in result.data.items] == [Decimal('19.99'), Decimal('5.00')]

        saved = order_repository.saved[0]
        assert any(isinstance(event, OrderPlaced) for event in saved.domain_events)

    def test_unknown_product(self, use_case, shipping_address):
        with pytest.raises(ProductNotFoundError):
            use_case.execute(PlaceOrderDTO(
                customer_id=uuid4(),
                shipping_address=shipping_address,
                items=[OrderLineDTO(product_id=uuid4(), quantity=1)],
            ))

    def test_insufficient_stock_rejected_with_all_violations(
        self, use_case, order_repository, product_repository, make_product, shipping_address
    ):
        scarce = product_repository.save(make_product(stock_level=1))
        gone = product_repository.save(make_product(stock_level=0))

        with pytest.raises(ConstraintViolationError) as exc_info:
            use_case.execute(PlaceOrderDTO(
                customer_id=uuid4(),
                shipping_address=shipping_address,
                items=[
                    OrderLineDTO(product_id=scarce.id, quantity=2),
                    OrderLineDTO(product_id=gone.id, quantity=1),
                ],
            ))

        paths = [v.path for v in exc_info.value.violations]
        assert paths == ['order_items[0].quantity', 'order_items[1].quantity', 'order_items[1].product']
        assert order_repository.saved == []

    def test_stock_checked_against_all_lines_of_a_product(
        self, use_case, order_repository, product_repository, make_product, shipping_address
    ):
        product = product_repository.save(make_product(stock_level=5))

        with pytest.raises(ConstraintViolationError) as exc_info:
            use_case.execute(PlaceOrderDTO(
                customer_id=uuid4(),
                shipping_address=shipping_address,
                items=[
                    OrderLineDTO(product_id=product.id, quantity=3),
                    OrderLineDTO(product_id=product.id, quantity=3),
                ],
            ))

        violations = exc_info.value.violations
        assert [v.path for v in violations] == ['order_items[0].quantity', 'order_items[1].quantity']
        assert violations[0].params['requested'] == 6
        assert order_repository.saved == []

    def test_order_below_minimum_rejected(
        self, use_case, product_repository, make_product, shipping_address
    ):
        sticker = product_repository.save(make_product(selling_price=Decimal('0.40')))
        with pytest.raises(ConstraintViolationError) as exc_info:
            use_case.execute(PlaceOrderDTO(
                customer_id=uuid4(),
                shipping_address=shipping_address,
                items=[OrderLineDTO(product_id=sticker.id, quantity=1)],
            ))
        assert [v.code for v in exc_info.value.violations] == ['order.total.minimum']

    def test_stock_is_not_decremented(
        self, use_case, product_repository, make_product, shipping_address
    ):
        product = product_repository.save(make_product(stock_level=5))
        use_case.execute(PlaceOrderDTO(
            customer_id=uuid4(),
            shipping_address=shipping_address,
            items=[OrderLineDTO(product_id=product.id, quantity=3)],
        ))
        assert product_repository.find_by_id(product.id).stock_level == 5


class TestRecalculateOrderUseCase:
    """Tests for RecalculateOrderUseCase."""

    def test_recalculates_and_returns_remaining_violations(
        self, order_repository, make_product, shipping_address
    ):
        order = Order(customer_id=uuid4(), shipping_address=shipping_address)
        item = OrderItem(product=make_product(stock_level=2, selling_price=Decimal('4.00')), quantity=1)
        order.add_order_item(item)
        order.calculate_totals()
        item.quantity = 5
        order_repository.save(order)

        result = RecalculateOrderUseCase(order_repository).execute(order.id)

        assert result.success
        assert result.data.subtotal == Decimal('20.00')
        assert result.data.total_amount == Decimal('20.00')
        assert [v.code for v in result.violations] == ['order_item.insufficient_stock']

    def test_missing_order(self, order_repository):
        with pytest.raises(OrderNotFoundError):
            RecalculateOrderUseCase(order_repository).execute(uuid4())


class TestUpdateOrderStatusUseCase:
    """Tests for UpdateOrderStatusUseCase."""

    @pytest.fixture
    def placed(self, order_repository, shipping_address):
        order = Order(customer_id=uuid4(), shipping_address=shipping_address)
        order.add_order_item(OrderItem(unit_price='10.00'))
        order.calculate_totals()
        return order_repository.save(order)

    def test_ships_order(self, order_repository, placed):
        use_case = UpdateOrderStatusUseCase(order_repository)
        use_case.execute(UpdateOrderStatusDTO(order_id=placed.id, status='processing'))
        result = use_case.execute(UpdateOrderStatusDTO(order_id=placed.id, status='shipped'))
        assert result.data.status == 'shipped'
        assert result.data.shipped_at is not None

    def test_cannot_cancel_shipped_order(self, order_repository, placed):
        placed.set_status('shipped')
        with pytest.raises(InvalidOrderStateError) as exc_info:
            UpdateOrderStatusUseCase(order_repository).execute(
                UpdateOrderStatusDTO(order_id=placed.id, status='cancelled')
            )
        assert exc_info.value.code == 'INVALID_ORDER_STATE'

    def test_cancels_pending_order(self, order_repository, placed):
        result = UpdateOrderStatusUseCase(order_repository).execute(
            UpdateOrderStatusDTO(order_id=placed.id, status='cancelled')
        )
        assert result.data.status == 'cancelled'

"""
Field-level checks for orders and order items.
"""
from typing import List

from shared.domain.money import ZERO_AMOUNT
from shared.domain.validation import Validator, Violation
from ..entities.order import Order
from ..entities.order_item import OrderItem

AMOUNT_FIELDS = ('subtotal', 'tax_amount', 'shipping_amount', 'total_amount')


class OrderFieldsValidator(Validator[Order]):
    """Customer and address present, amounts not negative."""

    def validate(self, order: Order) -> List[Violation]:
        violations = []
        if order.customer_id is None:
            violations.append(Violation('customer', 'order.customer.not_null', "An order needs a customer"))
        if order.shipping_address is None:
            violations.append(Violation(
                'shipping_address', 'order.shipping_address.not_null', "An order needs a shipping address"
            ))
        for name in AMOUNT_FIELDS:
            if getattr(order, name) < ZERO_AMOUNT:
                violations.append(Violation(
                    name, f'order.{name}.positive', f"'{name}' must not be negative",
                    params={'actual': getattr(order, name)},
                ))
        return violations


class OrderItemFieldsValidator(Validator[OrderItem]):
    """Product present, positive quantity, non-negative unit price."""

    def validate(self, item: OrderItem) -> List[Violation]:
        violations = []
        if item.product is None:
            violations.append(Violation('product', 'order_item.product.not_null', "An order item needs a product"))
        if item.quantity <= 0:
            violations.append(Violation(
                'quantity', 'order_item.quantity.positive', "Quantity must be greater than zero",
                params={'actual': item.quantity},
            ))
        if item.unit_price < ZERO_AMOUNT:
            violations.append(Violation(
                'unit_price', 'order_item.unit_price.positive', "Unit price must not be negative",
                params={'actual': item.unit_price},
            ))
        return violations

# Order consistency checks
from collections import Counter
from typing import List

from shared.domain.validation import Violation
from .order_fields import OrderFieldsValidator, OrderItemFieldsValidator
from .order_totals import OrderTotalsValidator, MINIMUM_ORDER_AMOUNT
from .sufficient_stock import SufficientStockValidator


def validate_order(order, check_stock: bool = True) -> List[Violation]:
    """Run every order and item check; item paths are prefixed with order_items[i].

    Stock is checked against the quantity summed over every line of the
    same product.
    """
    violations = OrderFieldsValidator().validate(order)
    violations.extend(OrderTotalsValidator().validate(order))

    requested = Counter()
    for item in order.order_items:
        if item.product is not None and item.quantity > 0:
            requested[item.product.id] += item.quantity

    field_validator = OrderItemFieldsValidator()
    stock_validator = SufficientStockValidator()
    for index, item in enumerate(order.order_items):
        prefix = f'order_items[{index}]'
        item_violations = field_validator.validate(item)
        if check_stock and item.product is not None:
            item_violations.extend(stock_validator.validate(item, requested=requested[item.product.id]))
        violations.extend(v.with_prefix(prefix) for v in item_violations)
    return violations


__all__ = [
    'OrderFieldsValidator',
    'OrderItemFieldsValidator',
    'OrderTotalsValidator',
    'SufficientStockValidator',
    'MINIMUM_ORDER_AMOUNT',
    'validate_order',
]

"""
Stock sufficiency check for a single order item.
"""
from typing import List, Optional

from shared.domain.validation import Validator, Violation
from ..entities.order_item import OrderItem


class SufficientStockValidator(Validator[OrderItem]):
    """Reports a stock shortfall and, separately, an unavailable product.

    ``requested`` overrides the item's own quantity when several lines of
    one order draw on the same product.
    """

    def validate(self, item: OrderItem, requested: Optional[int] = None) -> List[Violation]:
        product = item.product
        if product is None:
            return []
        if requested is None:
            requested = item.quantity

        violations = []
        if product.stock_level < requested:
            violations.append(Violation(
                path='quantity',
                code='order_item.insufficient_stock',
                message=(
                    f"Insufficient stock for '{product.name}': "
                    f"requested {requested}, available {product.stock_level}"
                ),
                params={
                    'requested': requested,
                    'available': product.stock_level,
                    'product': product.name,
                },
            ))

        if not product.is_available:
            violations.append(Violation(
                path='product',
                code='order_item.product_not_available',
                message=f"Product '{product.name}' is not available ({product.status.value})",
                params={'product': product.name, 'status': product.status.value},
            ))

        return violations

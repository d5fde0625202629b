"""
Order totals consistency check.
"""
from decimal import Decimal
from typing import List

from shared.domain.money import AMOUNT_TOLERANCE, ZERO_AMOUNT, amounts_differ, format_amount
from shared.domain.validation import Validator, Violation
from ..entities.order import Order

MINIMUM_ORDER_AMOUNT = Decimal('1.00')


class OrderTotalsValidator(Validator[Order]):
    """
    Recomputes the subtotal from the current line totals and compares it,
    and the stored total, against what is stored on the order.

    Every check runs; one order can produce several violations.
    """

    def __init__(self, tolerance: Decimal = AMOUNT_TOLERANCE, minimum_amount: Decimal = MINIMUM_ORDER_AMOUNT):
        self.tolerance = tolerance
        self.minimum_amount = minimum_amount

    def validate(self, order: Order) -> List[Violation]:
        violations = []
        items = order.order_items

        expected_subtotal = sum((item.line_total for item in items), ZERO_AMOUNT)
        if amounts_differ(expected_subtotal, order.subtotal, self.tolerance):
            violations.append(Violation(
                path='subtotal',
                code='order.subtotal.mismatch',
                message=(
                    f"Subtotal {format_amount(order.subtotal)} does not match "
                    f"the sum of line totals {format_amount(expected_subtotal)}"
                ),
                params={'expected': format_amount(expected_subtotal), 'actual': format_amount(order.subtotal)},
            ))

        # The stored subtotal is used here so a stale subtotal is not reported twice
        expected_total = order.subtotal + order.tax_amount + order.shipping_amount
        if amounts_differ(expected_total, order.total_amount, self.tolerance):
            violations.append(Violation(
                path='total_amount',
                code='order.total.mismatch',
                message=(
                    f"Total {format_amount(order.total_amount)} does not equal "
                    f"subtotal + tax + shipping ({format_amount(expected_total)})"
                ),
                params={'expected': format_amount(expected_total), 'actual': format_amount(order.total_amount)},
            ))

        if not items:
            violations.append(Violation(
                path='order_items',
                code='order.items.empty',
                message="An order must contain at least one item",
            ))

        if ZERO_AMOUNT < order.total_amount < self.minimum_amount:
            violations.append(Violation(
                path='total_amount',
                code='order.total.minimum',
                message=f"Order total must be at least {format_amount(self.minimum_amount)}",
                params={'minimum': format_amount(self.minimum_amount), 'actual': format_amount(order.total_amount)},
            ))

        return violations

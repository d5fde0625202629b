"""
Order entity (Aggregate Root).
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Union
from uuid import UUID

from shared.domain import AggregateRoot, utc_now
from shared.domain.money import ZERO_AMOUNT, AmountLike, to_amount
from ..value_objects.order_status import OrderStatus
from ..value_objects.order_number import OrderNumber
from ..value_objects.shipping_address import ShippingAddress
from ..events.order_placed import OrderPlaced
from ..events.order_status_changed import OrderStatusChanged
from .order_item import OrderItem

logger = logging.getLogger(__name__)


class Order(AggregateRoot):
    """
    Customer order aggregating order items.

    Monetary fields are two-place amounts. Totals are only recomputed by an
    explicit calculate_totals() call; setters and item add/remove leave them
    untouched so a consistency check can report any drift.
    """

    def __init__(
        self,
        customer_id: Optional[UUID] = None,
        shipping_address: Optional[ShippingAddress] = None,
        order_number: Optional[Union[OrderNumber, str]] = None,
        status: Union[OrderStatus, str] = OrderStatus.PENDING,
        subtotal: AmountLike = ZERO_AMOUNT,
        tax_amount: AmountLike = ZERO_AMOUNT,
        shipping_amount: AmountLike = ZERO_AMOUNT,
        total_amount: AmountLike = ZERO_AMOUNT,
        shipped_at: Optional[datetime] = None,
        delivered_at: Optional[datetime] = None,
        notes: str = "",
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.customer_id = customer_id
        self.shipping_address = shipping_address
        if order_number is None:
            order_number = OrderNumber.generate()
        elif isinstance(order_number, str):
            order_number = OrderNumber(order_number)
        self.order_number: OrderNumber = order_number
        self._status = OrderStatus.parse(status)
        self.subtotal = subtotal
        self.tax_amount = tax_amount
        self.shipping_amount = shipping_amount
        self.total_amount = total_amount
        self.shipped_at = shipped_at
        self.delivered_at = delivered_at
        self.notes = notes
        self._order_items: List[OrderItem] = []

    @classmethod
    def place(
        cls,
        customer_id: UUID,
        shipping_address: ShippingAddress,
        items: List[OrderItem],
        tax_amount: AmountLike = ZERO_AMOUNT,
        shipping_amount: AmountLike = ZERO_AMOUNT,
        notes: str = "",
    ) -> 'Order':
        """Create a pending order with its items and computed totals."""
        order = cls(
            customer_id=customer_id,
            shipping_address=shipping_address,
            tax_amount=tax_amount,
            shipping_amount=shipping_amount,
            notes=notes,
        )
        for item in items:
            order.add_order_item(item)
        order.calculate_totals()
        order.add_domain_event(
            OrderPlaced(
                order_id=order.id,
                order_number=order.order_number.value,
                customer_id=customer_id,
                total_amount=order.total_amount,
                item_count=order.item_count,
            )
        )
        return order

    # Amounts

    @property
    def subtotal(self) -> Decimal:
        return self._subtotal

    @subtotal.setter
    def subtotal(self, value: AmountLike) -> None:
        self._subtotal = to_amount(value)

    @property
    def tax_amount(self) -> Decimal:
        return self._tax_amount

    @tax_amount.setter
    def tax_amount(self, value: AmountLike) -> None:
        self._tax_amount = to_amount(value)

    @property
    def shipping_amount(self) -> Decimal:
        return self._shipping_amount

    @shipping_amount.setter
    def shipping_amount(self, value: AmountLike) -> None:
        self._shipping_amount = to_amount(value)

    @property
    def total_amount(self) -> Decimal:
        return self._total_amount

    @total_amount.setter
    def total_amount(self, value: AmountLike) -> None:
        self._total_amount = to_amount(value)

    def calculate_totals(self) -> None:
        """subtotal = sum of line totals; total = subtotal + tax + shipping."""
        self.subtotal = sum((item.line_total for item in self._order_items), ZERO_AMOUNT)
        self.total_amount = self._subtotal + self._tax_amount + self._shipping_amount

    # Items

    @property
    def order_items(self) -> List[OrderItem]:
        return list(self._order_items)

    def add_order_item(self, item: OrderItem) -> None:
        if not any(existing is item for existing in self._order_items):
            self._order_items.append(item)
            item.order = self

    def remove_order_item(self, item: OrderItem) -> None:
        for index, existing in enumerate(self._order_items):
            if existing is item:
                del self._order_items[index]
                if item.order is self:
                    item.order = None
                return

    @property
    def item_count(self) -> int:
        """Number of order lines."""
        return len(self._order_items)

    @property
    def total_quantity(self) -> int:
        """Sum of item quantities."""
        return sum(item.quantity for item in self._order_items)

    # Status

    @property
    def status(self) -> OrderStatus:
        return self._status

    def set_status(self, status: Union[OrderStatus, str]) -> None:
        """
        Move to any status.

        The first entry into shipped or delivered stamps shipped_at or
        delivered_at; later entries keep the original timestamp. Jumps outside
        the regular flow are accepted as admin overrides and logged.
        """
        new_status = OrderStatus.parse(status)
        old_status = self._status

        if new_status == OrderStatus.SHIPPED and self.shipped_at is None:
            self.shipped_at = utc_now().replace(microsecond=0)
        if new_status == OrderStatus.DELIVERED and self.delivered_at is None:
            self.delivered_at = utc_now().replace(microsecond=0)

        if new_status == old_status:
            return

        standard = old_status.is_standard_transition_to(new_status)
        if not standard:
            logger.warning(
                "Order %s moved from %s to %s outside the regular flow",
                self.order_number, old_status.value, new_status.value,
            )
        self._status = new_status
        self.add_domain_event(
            OrderStatusChanged(
                order_id=self.id,
                old_status=old_status.value,
                new_status=new_status.value,
                standard_transition=standard,
            )
        )

    @property
    def can_be_cancelled(self) -> bool:
        return self._status.is_cancellable

    @property
    def is_pending(self) -> bool:
        return self._status == OrderStatus.PENDING

    @property
    def is_processing(self) -> bool:
        return self._status == OrderStatus.PROCESSING

    @property
    def is_shipped(self) -> bool:
        return self._status == OrderStatus.SHIPPED

    @property
    def is_delivered(self) -> bool:
        return self._status == OrderStatus.DELIVERED

    @property
    def is_cancelled(self) -> bool:
        return self._status == OrderStatus.CANCELLED

    def __str__(self) -> str:
        return str(self.order_number)

    def __repr__(self) -> str:
        return (
            f"Order(id={self.id!r}, order_number={self.order_number.value!r}, "
            f"status={self._status.value!r}, total_amount={self._total_amount})"
        )

"""
Order status value object.
"""
from enum import Enum
from typing import Dict, FrozenSet

from ..exceptions import InvalidOrderStatusError


class OrderStatus(str, Enum):
    """Lifecycle status of an order."""
    PENDING = 'pending'
    PROCESSING = 'processing'
    SHIPPED = 'shipped'
    DELIVERED = 'delivered'
    CANCELLED = 'cancelled'

    @classmethod
    def parse(cls, value) -> 'OrderStatus':
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidOrderStatusError(str(value)) from None

    @classmethod
    def choices(cls):
        return [(status.value, status.value.capitalize()) for status in cls]

    @property
    def is_cancellable(self) -> bool:
        return self in CANCELLABLE_STATUSES

    def is_standard_transition_to(self, target: 'OrderStatus') -> bool:
        """Whether target follows this status in the regular order flow."""
        return target in STANDARD_TRANSITIONS[self]


CANCELLABLE_STATUSES: FrozenSet[OrderStatus] = frozenset({OrderStatus.PENDING, OrderStatus.PROCESSING})

# Regular flow; Order.set_status still accepts any jump as an admin override
STANDARD_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

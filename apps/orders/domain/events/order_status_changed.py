"""
Order status changed domain event.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class OrderStatusChanged(DomainEvent):
    """Event raised when order status changes."""
    order_id: Optional[UUID] = None
    old_status: str = ""
    new_status: str = ""
    standard_transition: bool = True

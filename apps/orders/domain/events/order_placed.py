"""
Order placed domain event.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class OrderPlaced(DomainEvent):
    """Event raised when a new order is placed."""
    order_id: Optional[UUID] = None
    order_number: str = ""
    customer_id: Optional[UUID] = None
    total_amount: Decimal = Decimal('0.00')
    item_count: int = 0

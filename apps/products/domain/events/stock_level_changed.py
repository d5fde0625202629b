"""
Stock level changed domain event.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class StockLevelChanged(DomainEvent):
    """Event raised when an admin edit changes a product's stock level."""
    product_id: Optional[UUID] = None
    old_level: int = 0
    new_level: int = 0

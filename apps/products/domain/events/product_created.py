"""
Product created domain event.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class ProductCreated(DomainEvent):
    """Event raised when a new product is created."""
    product_id: Optional[UUID] = None
    name: str = ""
    sku: str = ""
    supplier_id: Optional[UUID] = None

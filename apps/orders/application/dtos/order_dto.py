"""
Order DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.value_objects.shipping_address import ShippingAddress


@dataclass
class OrderLineDTO:
    """One requested line of a new order."""
    product_id: UUID
    quantity: int
    unit_price: Optional[Decimal] = None


@dataclass
class PlaceOrderDTO:
    """DTO for placing an order."""
    customer_id: UUID
    shipping_address: ShippingAddress
    items: List[OrderLineDTO]
    tax_amount: Decimal = Decimal('0.00')
    shipping_amount: Decimal = Decimal('0.00')
    notes: str = ""


@dataclass
class UpdateOrderStatusDTO:
    order_id: UUID
    status: str


@dataclass
class OrderItemDTO:
    """DTO for order item output."""
    id: UUID
    product_id: Optional[UUID]
    product_name: Optional[str]
    product_sku: Optional[str]
    quantity: int
    unit_price: Decimal
    line_total: Decimal

    @classmethod
    def from_entity(cls, item: OrderItem) -> 'OrderItemDTO':
        return cls(
            id=item.id,
            product_id=item.product.id if item.product else None,
            product_name=item.product_name,
            product_sku=item.product_sku,
            quantity=item.quantity,
            unit_price=item.unit_price,
            line_total=item.line_total,
        )


@dataclass
class OrderDTO:
    """DTO for order output."""
    id: UUID
    order_number: str
    customer_id: Optional[UUID]
    status: str
    subtotal: Decimal
    tax_amount: Decimal
    shipping_amount: Decimal
    total_amount: Decimal
    item_count: int
    total_quantity: int
    shipping_address: Optional[str]
    notes: str
    shipped_at: Optional[datetime]
    delivered_at: Optional[datetime]
    created_at: datetime
    updated_at: datetime
    items: List[OrderItemDTO] = field(default_factory=list)

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderDTO':
        """Create DTO from entity."""
        return cls(
            id=order.id,
            order_number=order.order_number.value,
            customer_id=order.customer_id,
            status=order.status.value,
            subtotal=order.subtotal,
            tax_amount=order.tax_amount,
            shipping_amount=order.shipping_amount,
            total_amount=order.total_amount,
            item_count=order.item_count,
            total_quantity=order.total_quantity,
            shipping_address=order.shipping_address.formatted if order.shipping_address else None,
            notes=order.notes,
            shipped_at=order.shipped_at,
            delivered_at=order.delivered_at,
            created_at=order.created_at,
            updated_at=order.updated_at,
            items=[OrderItemDTO.from_entity(item) for item in order.order_items],
        )

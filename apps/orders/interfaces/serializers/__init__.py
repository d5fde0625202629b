# Serializers
from .order_serializer import (
    OrderSerializer,
    OrderItemSerializer,
    OrderCreateSerializer,
    OrderLineSerializer,
    ShippingAddressSerializer,
)

__all__ = [
    'OrderSerializer',
    'OrderItemSerializer',
    'OrderCreateSerializer',
    'OrderLineSerializer',
    'ShippingAddressSerializer',
]

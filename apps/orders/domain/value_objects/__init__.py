# Order value objects
from .order_status import OrderStatus, CANCELLABLE_STATUSES, STANDARD_TRANSITIONS
from .order_number import OrderNumber
from .shipping_address import ShippingAddress

__all__ = [
    'OrderStatus',
    'CANCELLABLE_STATUSES',
    'STANDARD_TRANSITIONS',
    'OrderNumber',
    'ShippingAddress',
]

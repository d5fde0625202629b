# Use cases
from .place_order import PlaceOrderUseCase
from .recalculate_order import RecalculateOrderUseCase
from .update_order_status import UpdateOrderStatusUseCase

__all__ = ['PlaceOrderUseCase', 'RecalculateOrderUseCase', 'UpdateOrderStatusUseCase']

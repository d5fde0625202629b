# DTOs
from .order_dto import OrderDTO, OrderItemDTO, OrderLineDTO, PlaceOrderDTO, UpdateOrderStatusDTO

__all__ = ['OrderDTO', 'OrderItemDTO', 'OrderLineDTO', 'PlaceOrderDTO', 'UpdateOrderStatusDTO']

# Repository interfaces
from .order_repository import OrderRepository, OrderStatusStatistics

__all__ = ['OrderRepository', 'OrderStatusStatistics']

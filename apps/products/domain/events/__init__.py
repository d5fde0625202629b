# Domain events
from .product_created import ProductCreated
from .stock_level_changed import StockLevelChanged

__all__ = ['ProductCreated', 'StockLevelChanged']

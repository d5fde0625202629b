# Product value objects
from .sku import SKU
from .product_status import ProductStatus
from .dimensions import Dimensions

__all__ = ['SKU', 'ProductStatus', 'Dimensions']

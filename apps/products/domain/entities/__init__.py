# Product entities
from .product import Product, MAX_IMAGES

__all__ = ['Product', 'MAX_IMAGES']

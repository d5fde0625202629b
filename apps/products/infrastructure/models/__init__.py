# Product models
from .product_model import ProductModel

__all__ = ['ProductModel']

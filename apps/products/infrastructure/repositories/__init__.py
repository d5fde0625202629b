# Product repository implementations
from .django_product_repository import DjangoProductRepository

__all__ = ['DjangoProductRepository']

"""
Product status value object.
"""
from enum import Enum

from ..exceptions import InvalidProductStatusError


class ProductStatus(str, Enum):
    """Catalogue status of a product."""
    AVAILABLE = 'available'
    OUT_OF_STOCK = 'out_of_stock'
    DISCONTINUED = 'discontinued'

    @classmethod
    def parse(cls, value) -> 'ProductStatus':
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidProductStatusError(str(value)) from None

    @classmethod
    def choices(cls):
        return [(status.value, status.label) for status in cls]

    @property
    def label(self) -> str:
        return self.value.replace('_', ' ').capitalize()

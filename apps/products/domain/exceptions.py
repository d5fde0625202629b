"""
Product domain exceptions.
"""
from shared.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)


class InvalidProductError(ValidationError):
    """Raised when product data is invalid."""

    def __init__(self, message: str, field: str = "product"):
        super().__init__(message=message, field=field)


class InvalidSKUError(ValidationError):
    """Raised when SKU format is invalid."""

    def __init__(self, sku: str):
        super().__init__(message=f"Invalid SKU format: '{sku}'", field="sku")
        self.sku = sku


class InvalidProductStatusError(ValidationError):
    """Raised for a status outside available, out_of_stock and discontinued."""

    def __init__(self, status: str):
        super().__init__(message=f"Invalid product status: '{status}'", field="status")
        self.status = status


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product is not found."""

    def __init__(self, identifier: str):
        super().__init__("Product", identifier, code="PRODUCT_NOT_FOUND")
        self.identifier = identifier


class DuplicateSKUError(ConflictError):
    """Raised when a SKU already exists."""

    def __init__(self, sku: str):
        super().__init__(
            message=f"Product with SKU '{sku}' already exists",
            code="DUPLICATE_SKU"
        )
        self.sku = sku


__all__ = [
    'InvalidProductError',
    'InvalidSKUError',
    'InvalidProductStatusError',
    'ProductNotFoundError',
    'DuplicateSKUError',
]

"""
Product repository interface.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from uuid import UUID

from ..entities.product import Product


class ProductRepository(ABC):
    """Abstract repository for Product aggregate."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Save a product."""
        pass

    @abstractmethod
    def find_by_id(self, product_id: UUID) -> Optional[Product]:
        """Find a product by ID."""
        pass

    @abstractmethod
    def find_by_ids(self, product_ids: List[UUID]) -> Dict[UUID, Product]:
        """Find several products, keyed by ID."""
        pass

    @abstractmethod
    def find_by_sku(self, sku: str) -> Optional[Product]:
        """Find a product by SKU."""
        pass

    @abstractmethod
    def find_by_supplier(self, supplier_id: UUID) -> List[Product]:
        """Products of one supplier, by name."""
        pass

    @abstractmethod
    def find_available(self) -> List[Product]:
        """Products with status available and stock on hand."""
        pass

    @abstractmethod
    def find_low_stock(self, threshold: int = 10) -> List[Product]:
        """Non-discontinued products at or under the threshold, lowest stock first."""
        pass

    @abstractmethod
    def search(self, term: str) -> List[Product]:
        """Search by name or SKU."""
        pass

    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def count_by_status(self) -> Dict[str, int]:
        """Number of products per status value."""
        pass

    @abstractmethod
    def exists_by_sku(self, sku: str, exclude_id: Optional[UUID] = None) -> bool:
        pass

    @abstractmethod
    def delete(self, product_id: UUID) -> bool:
        """Delete a product by ID."""
        pass

"""
Order repository interface.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional
from uuid import UUID

from ..entities.order import Order
from ..value_objects.order_status import OrderStatus


@dataclass
class OrderStatusStatistics:
    """Aggregated figures for the orders in one status."""
    status: str
    count: int
    total_amount: Decimal
    average_amount: Decimal


class OrderRepository(ABC):
    """Abstract repository for Order aggregate."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Save an order with its items; items no longer on the order are deleted."""
        pass

    @abstractmethod
    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """Find an order by ID."""
        pass

    @abstractmethod
    def find_by_order_number(self, order_number: str) -> Optional[Order]:
        """Find an order by order number."""
        pass

    @abstractmethod
    def find_by_customer(self, customer_id: UUID) -> List[Order]:
        """Orders of a customer, newest first."""
        pass

    @abstractmethod
    def find_by_status(self, status: OrderStatus) -> List[Order]:
        """Orders in a status, newest first."""
        pass

    @abstractmethod
    def find_by_statuses(
        self,
        statuses: Iterable[OrderStatus],
        oldest_first: bool = False,
        limit: Optional[int] = None,
    ) -> List[Order]:
        """Orders in any of the statuses, at most `limit` of them."""
        pass

    @abstractmethod
    def count_by_statuses(self, statuses: Iterable[OrderStatus]) -> int:
        pass

    @abstractmethod
    def find_recent(self, days: int = 30, limit: Optional[int] = None) -> List[Order]:
        """Orders created in the last `days` days, newest first."""
        pass

    @abstractmethod
    def count_recent(self, days: int = 30) -> int:
        pass

    @abstractmethod
    def search(self, term: str) -> List[Order]:
        """Search by order number or customer email."""
        pass

    @abstractmethod
    def get_order_statistics(self) -> List[OrderStatusStatistics]:
        """Count, sum and average of total_amount per status."""
        pass

    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def delete(self, order_id: UUID) -> bool:
        """Delete an order and its items."""
        pass

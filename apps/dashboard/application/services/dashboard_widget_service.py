"""
Dashboard widget service.
"""
import logging
from typing import Any, Dict, List, Optional

from shared.domain.money import ZERO_AMOUNT, to_amount
from shared.infrastructure.cache import RedisCache
from apps.orders.domain.entities.order import Order
from apps.orders.domain.repositories.order_repository import OrderRepository
from apps.orders.domain.value_objects.order_status import OrderStatus
from apps.products.domain.entities.product import Product
from apps.products.domain.repositories.product_repository import ProductRepository
from apps.products.domain.value_objects.product_status import ProductStatus
from apps.users.domain.repositories.account_repository import CustomerRepository, SupplierRepository
from apps.users.domain.value_objects.account_status import CUSTOMER_STATUSES, SUPPLIER_STATUSES

logger = logging.getLogger(__name__)

ALL_WIDGETS_KEY = 'all'


def _order_summary(order: Order) -> Dict[str, Any]:
    return {
        'id': order.id,
        'order_number': order.order_number.value,
        'customer_id': order.customer_id,
        'status': order.status.value,
        'item_count': order.item_count,
        'total_amount': order.total_amount,
        'created_at': order.created_at,
    }


def _product_summary(product: Product) -> Dict[str, Any]:
    return {
        'id': product.id,
        'name': product.name,
        'sku': product.sku.value,
        'stock_level': product.stock_level,
        'status': product.status.value,
    }


class DashboardWidgetService:
    """
    Builds the data shown on the admin dashboard.

    Only the combined payload from all_widgets() is cached; the single
    widget methods always read the repositories.
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        customer_repository: CustomerRepository,
        order_repository: OrderRepository,
        supplier_repository: SupplierRepository,
        cache: Optional[RedisCache] = None,
        low_stock_threshold: int = 10,
        cache_timeout: Optional[int] = None,
    ):
        self.product_repository = product_repository
        self.customer_repository = customer_repository
        self.order_repository = order_repository
        self.supplier_repository = supplier_repository
        self.cache = cache
        self.low_stock_threshold = low_stock_threshold
        self.cache_timeout = cache_timeout

    def statistics(self) -> Dict[str, int]:
        """Totals per entity."""
        return {
            'total_products': self.product_repository.count(),
            'total_customers': self.customer_repository.count(),
            'total_orders': self.order_repository.count(),
            'total_suppliers': self.supplier_repository.count(),
        }

    def recent_activity(self, days: int = 7, limit: int = 10) -> Dict[str, Any]:
        recent_orders = self.order_repository.find_recent(days, limit=limit)
        return {
            'recent_orders': [_order_summary(order) for order in recent_orders],
            'total_recent_orders': self.order_repository.count_recent(days),
            'days': days,
        }

    def low_stock_alerts(self, threshold: Optional[int] = None, limit: int = 10) -> Dict[str, Any]:
        if threshold is None:
            threshold = self.low_stock_threshold
        products = self.product_repository.find_low_stock(threshold)
        return {
            'low_stock_products': [_product_summary(product) for product in products[:limit]],
            'total_low_stock_products': len(products),
            'threshold': threshold,
        }

    def pending_orders(self, limit: int = 10) -> Dict[str, Any]:
        """Pending and processing orders, oldest first."""
        pending_count = self.order_repository.count_by_statuses([OrderStatus.PENDING])
        processing_count = self.order_repository.count_by_statuses([OrderStatus.PROCESSING])
        orders = self.order_repository.find_by_statuses(
            [OrderStatus.PENDING, OrderStatus.PROCESSING],
            oldest_first=True,
            limit=limit,
        )
        return {
            'pending_count': pending_count,
            'processing_count': processing_count,
            'orders_requiring_attention': [_order_summary(order) for order in orders],
            'total_orders_requiring_attention': pending_count + processing_count,
        }

    def revenue_statistics(self) -> Dict[str, Any]:
        orders_by_status = {}
        total_revenue = ZERO_AMOUNT
        total_orders = 0
        for row in self.order_repository.get_order_statistics():
            orders_by_status[row.status] = {
                'count': row.count,
                'total_amount': row.total_amount,
                'average_amount': row.average_amount,
            }
            total_revenue += row.total_amount
            total_orders += row.count

        average = to_amount(total_revenue / total_orders) if total_orders else ZERO_AMOUNT
        return {
            'orders_by_status': orders_by_status,
            'total_revenue': total_revenue,
            'total_orders': total_orders,
            'average_order_value': average,
        }

    def customer_statistics(self) -> Dict[str, int]:
        return self._status_breakdown(self.customer_repository.count_by_status(), CUSTOMER_STATUSES)

    def supplier_statistics(self) -> Dict[str, int]:
        return self._status_breakdown(self.supplier_repository.count_by_status(), SUPPLIER_STATUSES)

    def product_statistics(self) -> Dict[str, int]:
        return self._status_breakdown(self.product_repository.count_by_status(), list(ProductStatus))

    def _status_breakdown(self, counts: Dict[str, int], statuses: List) -> Dict[str, int]:
        breakdown = {status.value: counts.get(status.value, 0) for status in statuses}
        breakdown['total'] = sum(breakdown.values())
        return breakdown

    def all_widgets(self) -> Dict[str, Any]:
        """Every widget in one payload, cached when a cache is configured."""
        if self.cache is None:
            return self._build_all()
        return self.cache.get_or_set(ALL_WIDGETS_KEY, self._build_all, self.cache_timeout)

    def invalidate(self) -> None:
        if self.cache is not None:
            self.cache.delete(ALL_WIDGETS_KEY)

    def _build_all(self) -> Dict[str, Any]:
        logger.info("Building dashboard widgets")
        return {
            'statistics': self.statistics(),
            'recent_activity': self.recent_activity(),
            'low_stock_alerts': self.low_stock_alerts(),
            'pending_orders': self.pending_orders(),
            'revenue_statistics': self.revenue_statistics(),
            'customer_statistics': self.customer_statistics(),
            'product_statistics': self.product_statistics(),
            'supplier_statistics': self.supplier_statistics(),
        }

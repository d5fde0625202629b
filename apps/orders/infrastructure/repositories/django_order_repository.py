"""
Django ORM implementation of OrderRepository.
"""
import dataclasses
from datetime import timedelta
from typing import Iterable, List, Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Avg, Count, Q, Sum
from django.utils import timezone

from shared.domain.exceptions import ValidationError
from shared.domain.money import ZERO_AMOUNT, to_amount, to_unit_price
from shared.infrastructure.events import publish_domain_events
from apps.products.infrastructure.repositories.django_product_repository import DjangoProductRepository
from apps.users.infrastructure.models.address_model import AddressModel
from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.repositories.order_repository import OrderRepository, OrderStatusStatistics
from ...domain.value_objects.order_status import OrderStatus
from ...domain.value_objects.shipping_address import ShippingAddress
from ..models.order_model import OrderItemModel, OrderModel


class DjangoOrderRepository(OrderRepository):
    """Django ORM based order repository implementation."""

    def __init__(self):
        self.product_repository = DjangoProductRepository()

    def save(self, order: Order) -> Order:
        """Save an order with its items."""
        if order.shipping_address is None:
            raise ValidationError("Shipping address is required", field="shipping_address")

        with transaction.atomic():
            address_id = self._save_address(order)

            OrderModel.objects.update_or_create(
                id=order.id,
                defaults={
                    'order_number': order.order_number.value,
                    'customer_id': order.customer_id,
                    'shipping_address_id': address_id,
                    'status': order.status.value,
                    'subtotal': order.subtotal,
                    'tax_amount': order.tax_amount,
                    'shipping_amount': order.shipping_amount,
                    'total_amount': order.total_amount,
                    'notes': order.notes or '',
                    'shipped_at': order.shipped_at,
                    'delivered_at': order.delivered_at,
                    'created_at': order.created_at,
                }
            )

            kept_ids = []
            for item in order.order_items:
                if item.product is None:
                    raise ValidationError("Order item has no product", field="product")
                OrderItemModel.objects.update_or_create(
                    id=item.id,
                    defaults={
                        'order_id': order.id,
                        'product_id': item.product.id,
                        'quantity': item.quantity,
                        'unit_price': to_unit_price(item.unit_price) if item.has_unit_price else None,
                        'line_total': item.line_total,
                        'created_at': item.created_at,
                    }
                )
                kept_ids.append(item.id)

            OrderItemModel.objects.filter(order_id=order.id).exclude(id__in=kept_ids).delete()

        publish_domain_events(order)
        return self.find_by_id(order.id)

    def _save_address(self, order: Order) -> UUID:
        address = order.shipping_address
        values = {
            'first_name': address.first_name,
            'last_name': address.last_name,
            'company': address.company,
            'address_line1': address.address_line1,
            'address_line2': address.address_line2,
            'city': address.city,
            'state': address.state,
            'postal_code': address.postal_code,
            'country': address.country.upper(),
            'phone': address.phone,
        }
        if address.id is not None:
            AddressModel.objects.update_or_create(id=address.id, defaults=values)
            return address.id

        model = AddressModel.objects.create(customer_id=order.customer_id, **values)
        order.shipping_address = dataclasses.replace(address, id=model.id)
        return model.id

    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """Find an order by ID."""
        try:
            model = self._queryset().get(id=order_id)
            return self.to_entity(model)
        except OrderModel.DoesNotExist:
            return None

    def find_by_order_number(self, order_number: str) -> Optional[Order]:
        try:
            model = self._queryset().get(order_number=order_number.strip().upper())
            return self.to_entity(model)
        except OrderModel.DoesNotExist:
            return None

    def find_by_customer(self, customer_id: UUID) -> List[Order]:
        models = self._queryset().filter(customer_id=customer_id).order_by('-created_at')
        return [self.to_entity(model) for model in models]

    def find_by_status(self, status: OrderStatus) -> List[Order]:
        models = self._queryset().filter(status=OrderStatus.parse(status).value).order_by('-created_at')
        return [self.to_entity(model) for model in models]

    def find_by_statuses(
        self,
        statuses: Iterable[OrderStatus],
        oldest_first: bool = False,
        limit: Optional[int] = None,
    ) -> List[Order]:
        ordering = 'created_at' if oldest_first else '-created_at'
        models = self._queryset().filter(status__in=self._status_values(statuses)).order_by(ordering)
        if limit is not None:
            models = models[:limit]
        return [self.to_entity(model) for model in models]

    def count_by_statuses(self, statuses: Iterable[OrderStatus]) -> int:
        return OrderModel.objects.filter(status__in=self._status_values(statuses)).count()

    def find_recent(self, days: int = 30, limit: Optional[int] = None) -> List[Order]:
        models = self._queryset().filter(created_at__gte=self._since(days)).order_by('-created_at')
        if limit is not None:
            models = models[:limit]
        return [self.to_entity(model) for model in models]

    def count_recent(self, days: int = 30) -> int:
        return OrderModel.objects.filter(created_at__gte=self._since(days)).count()

    def search(self, term: str) -> List[Order]:
        """Search by order number or customer email."""
        models = self._queryset().filter(
            Q(order_number__icontains=term) |
            Q(customer__email__icontains=term)
        ).order_by('-created_at')
        return [self.to_entity(model) for model in models]

    def get_order_statistics(self) -> List[OrderStatusStatistics]:
        rows = (
            OrderModel.objects
            .values('status')
            .annotate(count=Count('id'), total=Sum('total_amount'), average=Avg('total_amount'))
            .order_by('status')
        )
        return [
            OrderStatusStatistics(
                status=row['status'],
                count=row['count'],
                total_amount=to_amount(row['total'] or ZERO_AMOUNT),
                average_amount=to_amount(row['average'] or ZERO_AMOUNT),
            )
            for row in rows
        ]

    def count(self) -> int:
        return OrderModel.objects.count()

    def delete(self, order_id: UUID) -> bool:
        """Delete an order; its items go with it."""
        deleted, _ = OrderModel.objects.filter(id=order_id).delete()
        return deleted > 0

    def _queryset(self):
        return OrderModel.objects.select_related('shipping_address').prefetch_related('items__product')

    @staticmethod
    def _status_values(statuses: Iterable[OrderStatus]) -> List[str]:
        return [OrderStatus.parse(status).value for status in statuses]

    @staticmethod
    def _since(days: int):
        return timezone.now() - timedelta(days=days)

    def to_entity(self, model: OrderModel) -> Order:
        """Convert a model with its items to an Order."""
        address = model.shipping_address
        order = Order(
            id=model.id,
            customer_id=model.customer_id,
            shipping_address=ShippingAddress(
                first_name=address.first_name,
                last_name=address.last_name,
                address_line1=address.address_line1,
                address_line2=address.address_line2,
                city=address.city,
                state=address.state,
                postal_code=address.postal_code,
                country=address.country,
                company=address.company,
                phone=address.phone,
                id=address.id,
            ),
            order_number=model.order_number,
            status=model.status,
            subtotal=model.subtotal,
            tax_amount=model.tax_amount,
            shipping_amount=model.shipping_amount,
            total_amount=model.total_amount,
            shipped_at=model.shipped_at,
            delivered_at=model.delivered_at,
            notes=model.notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
        for item_model in model.items.all():
            order.add_order_item(
                OrderItem(
                    id=item_model.id,
                    product=self.product_repository.to_entity(item_model.product),
                    quantity=item_model.quantity,
                    unit_price=item_model.unit_price,
                    created_at=item_model.created_at,
                    updated_at=item_model.updated_at,
                )
            )
        return order

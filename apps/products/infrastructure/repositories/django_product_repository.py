"""
Django ORM implementation of ProductRepository.
"""
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from django.db import transaction
from django.db.models import Count, Q

from shared.infrastructure.events import publish_domain_events

from ...domain.entities.product import Product
from ...domain.repositories.product_repository import ProductRepository
from ...domain.value_objects.dimensions import Dimensions
from ...domain.value_objects.product_status import ProductStatus
from ...domain.value_objects.sku import SKU
from ..models.product_model import ProductModel


class DjangoProductRepository(ProductRepository):
    """Django ORM based product repository implementation."""

    def save(self, product: Product) -> Product:
        """Save a product entity."""
        with transaction.atomic():
            model, created = ProductModel.objects.update_or_create(
                id=product.id,
                defaults={
                    'name': product.name,
                    'sku': product.sku.value,
                    'supplier_id': product.supplier_id,
                    'supplier_reference': product.supplier_reference,
                    'description': product.description,
                    'images': list(product.images),
                    'cost_price': product.cost_price,
                    'selling_price': product.selling_price,
                    'weight': product.weight,
                    'dimensions': product.dimensions.to_dict() if product.dimensions else None,
                    'category': product.category,
                    'stock_level': product.stock_level,
                    'status': product.status.value,
                    'created_at': product.created_at,
                }
            )
        publish_domain_events(product)
        return self.to_entity(model)

    def find_by_id(self, product_id: UUID) -> Optional[Product]:
        """Find a product by ID."""
        try:
            model = ProductModel.objects.get(id=product_id)
            return self.to_entity(model)
        except ProductModel.DoesNotExist:
            return None

    def find_by_ids(self, product_ids: List[UUID]) -> Dict[UUID, Product]:
        """Find several products, keyed by ID."""
        models = ProductModel.objects.filter(id__in=list(product_ids))
        return {model.id: self.to_entity(model) for model in models}

    def find_by_sku(self, sku: str) -> Optional[Product]:
        """Find a product by SKU."""
        try:
            model = ProductModel.objects.get(sku=sku.upper().strip())
            return self.to_entity(model)
        except ProductModel.DoesNotExist:
            return None

    def find_by_supplier(self, supplier_id: UUID) -> List[Product]:
        models = ProductModel.objects.filter(supplier_id=supplier_id).order_by('name')
        return [self.to_entity(model) for model in models]

    def find_available(self) -> List[Product]:
        models = ProductModel.objects.filter(
            status=ProductStatus.AVAILABLE.value,
            stock_level__gt=0,
        ).order_by('name')
        return [self.to_entity(model) for model in models]

    def find_low_stock(self, threshold: int = 10) -> List[Product]:
        models = (
            ProductModel.objects
            .filter(stock_level__lte=threshold)
            .exclude(status=ProductStatus.DISCONTINUED.value)
            .order_by('stock_level', 'name')
        )
        return [self.to_entity(model) for model in models]

    def search(self, term: str) -> List[Product]:
        """Search products by name or SKU."""
        models = ProductModel.objects.filter(
            Q(name__icontains=term) | Q(sku__icontains=term)
        ).order_by('name')
        return [self.to_entity(model) for model in models]

    def count(self) -> int:
        return ProductModel.objects.count()

    def count_by_status(self) -> Dict[str, int]:
        rows = ProductModel.objects.values('status').annotate(total=Count('id')).order_by()
        return {row['status']: row['total'] for row in rows}

    def exists_by_sku(self, sku: str, exclude_id: Optional[UUID] = None) -> bool:
        queryset = ProductModel.objects.filter(sku=sku.upper().strip())
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    def delete(self, product_id: UUID) -> bool:
        """Delete a product."""
        deleted, _ = ProductModel.objects.filter(id=product_id).delete()
        return deleted > 0

    def to_entity(self, model: ProductModel) -> Product:
        """Convert Django model to domain entity."""
        return Product(
            id=model.id,
            name=model.name,
            sku=SKU(value=model.sku),
            supplier_id=model.supplier_id,
            supplier_reference=model.supplier_reference,
            description=model.description,
            images=list(model.images or []),
            cost_price=Decimal(str(model.cost_price)),
            selling_price=Decimal(str(model.selling_price)),
            weight=Decimal(str(model.weight)) if model.weight is not None else None,
            dimensions=Dimensions.from_dict(model.dimensions),
            category=model.category,
            stock_level=model.stock_level,
            status=ProductStatus.parse(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

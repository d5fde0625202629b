"""
Product Django ORM model.
"""
import uuid

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from ...domain.value_objects.product_status import ProductStatus


class ProductModel(models.Model):
    """Catalogue product supplied by a supplier."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, db_index=True)
    sku = models.CharField(max_length=100, unique=True, db_index=True)
    supplier = models.ForeignKey(
        'users.SupplierModel',
        on_delete=models.PROTECT,
        related_name='products',
        null=True,
        blank=True,
    )
    supplier_reference = models.CharField(max_length=100, blank=True, default='')
    description = models.TextField(blank=True, null=True)
    images = models.JSONField(default=list, blank=True)
    cost_price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    selling_price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    weight = models.DecimalField(
        max_digits=8, decimal_places=3, null=True, blank=True, validators=[MinValueValidator(0)]
    )
    dimensions = models.JSONField(null=True, blank=True)
    category = models.CharField(max_length=100, null=True, blank=True, db_index=True)
    stock_level = models.PositiveIntegerField(default=0)
    status = models.CharField(
        max_length=20,
        choices=ProductStatus.choices(),
        default=ProductStatus.AVAILABLE.value,
        db_index=True,
    )

    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['name']
        indexes = [
            models.Index(fields=['status', 'stock_level']),
        ]

    def __str__(self):
        return f"{self.name} ({self.sku})"

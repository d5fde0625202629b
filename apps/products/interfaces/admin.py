"""
Products admin configuration.
"""
from django import forms
from django.contrib import admin

from shared.domain.exceptions import ValidationError
from ..domain.entities.product import Product
from ..domain.exceptions import DuplicateSKUError
from ..domain.value_objects.dimensions import Dimensions
from ..infrastructure.models.product_model import ProductModel
from ..infrastructure.repositories.django_product_repository import DjangoProductRepository


class ProductAdminForm(forms.ModelForm):
    """Runs the product entity rules on admin input."""

    class Meta:
        model = ProductModel
        fields = '__all__'

    def clean(self):
        cleaned_data = super().clean()
        if self.errors:
            return cleaned_data
        try:
            product = Product(
                name=cleaned_data.get('name') or '',
                sku=cleaned_data.get('sku') or '',
                cost_price=cleaned_data.get('cost_price'),
                selling_price=cleaned_data.get('selling_price'),
                weight=cleaned_data.get('weight'),
                dimensions=Dimensions.from_dict(cleaned_data.get('dimensions')),
                images=list(cleaned_data.get('images') or []),
                stock_level=cleaned_data.get('stock_level') or 0,
                status=cleaned_data.get('status'),
            )
        except ValidationError as exc:
            field = exc.field.split('.')[0] if exc.field else None
            self.add_error(field if field in self.fields else None, exc.message)
            return cleaned_data

        exclude_id = None if self.instance._state.adding else self.instance.pk
        if DjangoProductRepository().exists_by_sku(product.sku.value, exclude_id=exclude_id):
            self.add_error('sku', DuplicateSKUError(product.sku.value).message)
            return cleaned_data
        cleaned_data['sku'] = product.sku.value
        return cleaned_data


@admin.register(ProductModel)
class ProductAdmin(admin.ModelAdmin):
    """Admin configuration for Product model."""
    form = ProductAdminForm
    list_display = (
        'name', 'sku', 'supplier', 'cost_price', 'selling_price',
        'margin', 'stock_level', 'status', 'is_available',
    )
    list_filter = ('status', 'category', 'supplier')
    search_fields = ('name', 'sku', 'supplier_reference')
    ordering = ('name',)
    readonly_fields = ('id', 'created_at', 'updated_at')
    list_select_related = ('supplier',)

    @admin.display(description='Margin %')
    def margin(self, obj):
        return DjangoProductRepository().to_entity(obj).margin

    @admin.display(description='Available', boolean=True)
    def is_available(self, obj):
        return DjangoProductRepository().to_entity(obj).is_available

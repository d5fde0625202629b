"""
Orders admin configuration.
"""
from django.contrib import admin, messages

from shared.domain.exceptions import DomainException
from ..application.dtos.order_dto import UpdateOrderStatusDTO
from ..application.use_cases.recalculate_order import RecalculateOrderUseCase
from ..application.use_cases.update_order_status import UpdateOrderStatusUseCase
from ..domain.value_objects.order_number import OrderNumber
from ..domain.value_objects.order_status import OrderStatus
from ..infrastructure.models.order_model import OrderItemModel, OrderModel
from ..infrastructure.repositories.django_order_repository import DjangoOrderRepository


class OrderItemInline(admin.TabularInline):
    """Inline for order items."""
    model = OrderItemModel
    extra = 0
    fields = ('product', 'quantity', 'unit_price', 'line_total')
    readonly_fields = ('line_total',)
    autocomplete_fields = ('product',)


@admin.register(OrderModel)
class OrderAdmin(admin.ModelAdmin):
    """
    Admin configuration for Order model.

    Totals are recalculated after the items are saved. Status changes go
    through the order entity so shipping and delivery dates are stamped.
    """
    list_display = ('order_number', 'customer', 'status', 'item_count', 'total_amount', 'created_at')
    list_filter = ('status', 'created_at')
    search_fields = ('order_number', 'customer__email', 'customer__last_name')
    ordering = ('-created_at',)
    readonly_fields = (
        'id', 'order_number', 'subtotal', 'total_amount',
        'shipped_at', 'delivered_at', 'created_at', 'updated_at',
    )
    list_select_related = ('customer',)
    inlines = [OrderItemInline]
    actions = ['mark_processing', 'mark_shipped', 'mark_delivered', 'mark_cancelled']

    @admin.display(description='Items')
    def item_count(self, obj):
        return obj.items.count()

    def save_model(self, request, obj, form, change):
        if not obj.order_number:
            obj.order_number = OrderNumber.generate().value
        obj.requested_status = obj.status
        obj.status = form.initial.get('status', OrderStatus.PENDING.value) if change else OrderStatus.PENDING.value
        super().save_model(request, obj, form, change)

    def save_related(self, request, form, formsets, change):
        super().save_related(request, form, formsets, change)
        obj = form.instance
        repository = DjangoOrderRepository()

        result = RecalculateOrderUseCase(repository).execute(obj.id)
        for violation in result.violations:
            self.message_user(request, f"{violation.path}: {violation.message}", messages.WARNING)

        requested = getattr(obj, 'requested_status', obj.status)
        if requested != result.data.status:
            order = repository.find_by_id(obj.id)
            order.set_status(requested)
            order.touch()
            repository.save(order)

    def _change_status(self, request, queryset, status: OrderStatus):
        use_case = UpdateOrderStatusUseCase(DjangoOrderRepository())
        updated = 0
        for model in queryset:
            try:
                use_case.execute(UpdateOrderStatusDTO(order_id=model.id, status=status.value))
                updated += 1
            except DomainException as exc:
                self.message_user(request, f"{model.order_number}: {exc.message}", messages.ERROR)
        if updated:
            self.message_user(request, f"{updated} order(s) marked as {status.value}.", messages.SUCCESS)

    @admin.action(description='Mark selected orders as processing')
    def mark_processing(self, request, queryset):
        self._change_status(request, queryset, OrderStatus.PROCESSING)

    @admin.action(description='Mark selected orders as shipped')
    def mark_shipped(self, request, queryset):
        self._change_status(request, queryset, OrderStatus.SHIPPED)

    @admin.action(description='Mark selected orders as delivered')
    def mark_delivered(self, request, queryset):
        self._change_status(request, queryset, OrderStatus.DELIVERED)

    @admin.action(description='Mark selected orders as cancelled')
    def mark_cancelled(self, request, queryset):
        self._change_status(request, queryset, OrderStatus.CANCELLED)

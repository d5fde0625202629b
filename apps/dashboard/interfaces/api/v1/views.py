"""
Admin dashboard API v1 views.
"""
from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAdminUser
from rest_framework.views import APIView

from shared.infrastructure.cache import RedisCache
from shared.interfaces import success_response
from apps.orders.infrastructure.repositories.django_order_repository import DjangoOrderRepository
from apps.products.infrastructure.repositories.django_product_repository import DjangoProductRepository
from apps.users.infrastructure.repositories.django_account_repository import (
    DjangoCustomerRepository,
    DjangoSupplierRepository,
)
from ....application.services import DashboardWidgetService


def build_dashboard_service() -> DashboardWidgetService:
    return DashboardWidgetService(
        product_repository=DjangoProductRepository(),
        customer_repository=DjangoCustomerRepository(),
        order_repository=DjangoOrderRepository(),
        supplier_repository=DjangoSupplierRepository(),
        cache=RedisCache(prefix='dashboard', default_timeout=settings.DASHBOARD_CACHE_TIMEOUT),
        low_stock_threshold=settings.LOW_STOCK_THRESHOLD,
    )


@extend_schema(tags=['Dashboard'])
class DashboardView(APIView):
    """All dashboard widgets for staff users."""
    permission_classes = [IsAdminUser]

    @extend_schema(summary="Get dashboard widgets")
    def get(self, request):
        return success_response("Dashboard", build_dashboard_service().all_widgets())


@extend_schema(tags=['Dashboard'])
class DashboardRefreshView(APIView):
    """Drop the cached widgets and rebuild them."""
    permission_classes = [IsAdminUser]

    @extend_schema(summary="Rebuild dashboard widgets")
    def post(self, request):
        service = build_dashboard_service()
        service.invalidate()
        return success_response("Dashboard refreshed", service.all_widgets())

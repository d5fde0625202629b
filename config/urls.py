"""
Root URL configuration.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path('admin/', admin.site.urls),

    # Self-service auth for customers and suppliers
    path('api/', include('apps.users.interfaces.api.urls')),
    path('api/customer/orders/', include(('apps.orders.interfaces.api.urls', 'orders'))),

    path('api/admin/dashboard/', include(('apps.dashboard.interfaces.api.urls', 'dashboard'))),
    path('api/health/', include('shared.interfaces.urls')),

    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
]

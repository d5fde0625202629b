"""
Users API URLs.
"""
from django.urls import path, include

from .v1.urls import customer_urlpatterns, supplier_urlpatterns

urlpatterns = [
    path('customer/', include((customer_urlpatterns, 'customer'))),
    path('supplier/', include((supplier_urlpatterns, 'supplier'))),
]

"""
Admin dashboard API v1 URLs.
"""
from django.urls import path

from .views import DashboardView, DashboardRefreshView

urlpatterns = [
    path('', DashboardView.as_view(), name='dashboard'),
    path('refresh/', DashboardRefreshView.as_view(), name='dashboard-refresh'),
]

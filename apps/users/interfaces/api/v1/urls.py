"""
Customer and supplier API v1 URLs.
"""
from django.urls import path

from .views import (
    CustomerRegisterView,
    SupplierRegisterView,
    LoginView,
    PasswordRecoveryView,
    PasswordResetView,
    PasswordChangeView,
    MeView,
    AccountTokenRefreshView,
)


def account_urlpatterns(account_type, register_view):
    """The same auth endpoints for each account type."""
    return [
        path('register/', register_view.as_view(), name='register'),
        path('login/', LoginView.as_view(account_type=account_type), name='login'),
        path('token/refresh/', AccountTokenRefreshView.as_view(), name='token-refresh'),
        path('password-recovery/', PasswordRecoveryView.as_view(account_type=account_type), name='password-recovery'),
        path('password-reset/', PasswordResetView.as_view(account_type=account_type), name='password-reset'),
        path('password-change/', PasswordChangeView.as_view(account_type=account_type), name='password-change'),
        path('me/', MeView.as_view(account_type=account_type), name='me'),
    ]


customer_urlpatterns = account_urlpatterns('customer', CustomerRegisterView)
supplier_urlpatterns = account_urlpatterns('supplier', SupplierRegisterView)

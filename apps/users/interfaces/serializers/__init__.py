# Serializers
from .account_serializer import (
    AccountSerializer,
    CustomerRegistrationSerializer,
    SupplierRegistrationSerializer,
)
from .auth_serializer import (
    LoginSerializer,
    LoginResponseSerializer,
    PasswordRecoverySerializer,
    PasswordResetSerializer,
    PasswordChangeSerializer,
    AccountTokenRefreshSerializer,
)

__all__ = [
    'AccountSerializer',
    'CustomerRegistrationSerializer',
    'SupplierRegistrationSerializer',
    'LoginSerializer',
    'LoginResponseSerializer',
    'PasswordRecoverySerializer',
    'PasswordResetSerializer',
    'PasswordChangeSerializer',
    'AccountTokenRefreshSerializer',
]

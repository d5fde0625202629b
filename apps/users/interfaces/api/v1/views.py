"""
Customer and supplier self-service API v1 views.
"""
import logging

from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView
from rest_framework_simplejwt.views import TokenRefreshView

from shared.interfaces import success_response
from ....application.dtos import (
    AccountDTO,
    CustomerRegistrationDTO,
    SupplierRegistrationDTO,
    LoginDTO,
    PasswordRecoveryDTO,
    PasswordResetDTO,
    PasswordChangeDTO,
)
from ....application.services.token_service import TokenService
from ....application.use_cases import (
    RegisterCustomerUseCase,
    RegisterSupplierUseCase,
    LoginAccountUseCase,
    RequestPasswordResetUseCase,
    ResetPasswordUseCase,
    ChangePasswordUseCase,
)
from ....infrastructure.authentication import ACCOUNT_REPOSITORIES, IsAccountType
from ...serializers import (
    AccountSerializer,
    CustomerRegistrationSerializer,
    SupplierRegistrationSerializer,
    LoginSerializer,
    LoginResponseSerializer,
    PasswordRecoverySerializer,
    PasswordResetSerializer,
    PasswordChangeSerializer,
    AccountTokenRefreshSerializer,
)

logger = logging.getLogger(__name__)


def _token_service() -> TokenService:
    return TokenService(ttl_hours=settings.PASSWORD_RESET_TOKEN_TTL_HOURS)


class AccountAPIView(APIView):
    """Base view bound to one account type through as_view(account_type=...)."""
    account_type = None

    def get_repository(self):
        return ACCOUNT_REPOSITORIES[self.account_type]()


@extend_schema(tags=['Customer auth'])
class CustomerRegisterView(AccountAPIView):
    """Customer registration endpoint."""
    permission_classes = [AllowAny]
    account_type = 'customer'

    @extend_schema(
        request=CustomerRegistrationSerializer,
        responses={201: AccountSerializer},
        summary="Register a new customer",
    )
    def post(self, request):
        serializer = CustomerRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = RegisterCustomerUseCase(customer_repository=self.get_repository())
        result = use_case.execute(CustomerRegistrationDTO(**serializer.validated_data))

        return success_response(
            "Customer registered successfully",
            {'customer': AccountSerializer(result.data).data},
            status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=['Supplier auth'])
class SupplierRegisterView(AccountAPIView):
    """Supplier registration endpoint."""
    permission_classes = [AllowAny]
    account_type = 'supplier'

    @extend_schema(
        request=SupplierRegistrationSerializer,
        responses={201: AccountSerializer},
        summary="Register a new supplier",
    )
    def post(self, request):
        serializer = SupplierRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = RegisterSupplierUseCase(supplier_repository=self.get_repository())
        result = use_case.execute(SupplierRegistrationDTO(**serializer.validated_data))

        return success_response(
            "Supplier registered successfully",
            {'supplier': AccountSerializer(result.data).data},
            status=status.HTTP_201_CREATED,
        )


@extend_schema(tags=['Auth'])
class LoginView(AccountAPIView):
    """Email and password login."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=LoginSerializer,
        responses={200: LoginResponseSerializer},
        summary="Login and get tokens",
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = LoginAccountUseCase(account_repository=self.get_repository())
        result = use_case.execute(LoginDTO(**serializer.validated_data))

        return success_response("Login successful", LoginResponseSerializer(result.data).data)


@extend_schema(tags=['Auth'])
class PasswordRecoveryView(AccountAPIView):
    """Issue a password reset token."""
    permission_classes = [AllowAny]

    @extend_schema(request=PasswordRecoverySerializer, summary="Request a password reset token")
    def post(self, request):
        serializer = PasswordRecoverySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = RequestPasswordResetUseCase(
            account_repository=self.get_repository(),
            token_service=_token_service(),
        )
        result = use_case.execute(PasswordRecoveryDTO(**serializer.validated_data))

        data = {'expires_at': result.data.expires_at.isoformat()}
        # No mail delivery: the token is only handed back where explicitly enabled
        if settings.EXPOSE_PASSWORD_RESET_TOKEN:
            data['token'] = result.data.token
        return success_response("Password recovery token has been sent to your email address", data)


@extend_schema(tags=['Auth'])
class PasswordResetView(AccountAPIView):
    """Set a new password with a reset token."""
    permission_classes = [AllowAny]

    @extend_schema(request=PasswordResetSerializer, summary="Reset password with a token")
    def post(self, request):
        serializer = PasswordResetSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = ResetPasswordUseCase(
            account_repository=self.get_repository(),
            token_service=_token_service(),
        )
        use_case.execute(PasswordResetDTO(
            token=serializer.validated_data['token'],
            new_password=serializer.validated_data['password'],
        ))
        return success_response("Password has been reset successfully")


@extend_schema(tags=['Auth'])
class PasswordChangeView(AccountAPIView):
    """Change the password of the signed-in account."""
    permission_classes = [IsAccountType]

    @extend_schema(request=PasswordChangeSerializer, summary="Change password")
    def put(self, request):
        serializer = PasswordChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = ChangePasswordUseCase(account_repository=self.get_repository())
        use_case.execute(PasswordChangeDTO(account_id=request.user.id, **serializer.validated_data))
        return success_response("Password has been changed successfully")


@extend_schema(tags=['Auth'])
class MeView(AccountAPIView):
    """Profile of the signed-in account."""
    permission_classes = [IsAccountType]

    @extend_schema(responses={200: AccountSerializer}, summary="Get current account")
    def get(self, request):
        return success_response(
            "Current account",
            AccountSerializer(AccountDTO.from_entity(request.user.account)).data,
        )


@extend_schema(tags=['Auth'])
class AccountTokenRefreshView(TokenRefreshView):
    """Refresh an access token for a customer or supplier account."""
    serializer_class = AccountTokenRefreshSerializer

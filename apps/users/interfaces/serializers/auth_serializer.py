"""
Authentication serializers.
"""
from rest_framework import serializers
from rest_framework_simplejwt.tokens import RefreshToken

from ...infrastructure.authentication import resolve_account
from .account_serializer import AccountSerializer, validate_strong_password


class LoginSerializer(serializers.Serializer):
    """Serializer for login request."""
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class LoginResponseSerializer(serializers.Serializer):
    """Tokens plus the signed-in account."""
    token = serializers.CharField(read_only=True, source='token.access_token')
    refresh_token = serializers.CharField(read_only=True, source='token.refresh_token')
    token_type = serializers.CharField(read_only=True, source='token.token_type')
    user = AccountSerializer(read_only=True, source='account')


class PasswordRecoverySerializer(serializers.Serializer):
    email = serializers.EmailField()


class PasswordResetSerializer(serializers.Serializer):
    token = serializers.CharField()
    password = serializers.CharField(write_only=True, validators=[validate_strong_password])


class PasswordChangeSerializer(serializers.Serializer):
    current_password = serializers.CharField(write_only=True)
    new_password = serializers.CharField(write_only=True, validators=[validate_strong_password])


class AccountTokenRefreshSerializer(serializers.Serializer):
    """Exchanges a refresh token for a new access token if the account is still active."""
    refresh = serializers.CharField(write_only=True)
    access = serializers.CharField(read_only=True)

    def validate(self, attrs):
        refresh = RefreshToken(attrs['refresh'])
        resolve_account(refresh)
        return {'access': str(refresh.access_token)}

"""
JWT authentication for customer and supplier accounts.
"""
import logging
from typing import Dict, Type

from rest_framework import exceptions
from rest_framework.permissions import BasePermission
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework_simplejwt.settings import api_settings

from ..domain.entities.account import Account
from .repositories.django_account_repository import (
    DjangoAccountRepository,
    DjangoCustomerRepository,
    DjangoSupplierRepository,
)

logger = logging.getLogger(__name__)

ACCOUNT_REPOSITORIES: Dict[str, Type[DjangoAccountRepository]] = {
    'customer': DjangoCustomerRepository,
    'supplier': DjangoSupplierRepository,
}


class AccountPrincipal:
    """request.user for a token-authenticated account."""
    is_authenticated = True
    is_anonymous = False
    is_staff = False
    is_superuser = False

    def __init__(self, account: Account):
        self.account = account

    @property
    def id(self):
        return self.account.id

    @property
    def pk(self):
        return self.account.id

    @property
    def user_type(self) -> str:
        return self.account.user_type

    @property
    def email(self) -> str:
        return self.account.email.value

    def __str__(self) -> str:
        return f"{self.user_type}:{self.email}"


def resolve_account(token) -> Account:
    """Active account named by a validated token's user_type and user id claims."""
    user_type = token.get('user_type')
    account_id = token.get(api_settings.USER_ID_CLAIM)
    repository_class = ACCOUNT_REPOSITORIES.get(user_type)
    if repository_class is None or account_id is None:
        raise InvalidToken("Token contained no recognizable user identification")

    account = repository_class().find_by_id(account_id)
    if account is None:
        raise exceptions.AuthenticationFailed("User not found", code="user_not_found")
    if not account.is_active:
        raise exceptions.AuthenticationFailed("User is inactive", code="user_inactive")
    return account


class AccountJWTAuthentication(JWTAuthentication):
    """Resolves the account named by the token's user_type and user id claims."""

    def get_user(self, validated_token):
        account = resolve_account(validated_token)
        logger.info("%s %s authenticated via JWT", account.user_type.capitalize(), account.id)
        return AccountPrincipal(account)


class IsAccountType(BasePermission):
    """Allows token-authenticated accounts whose type matches view.account_type."""

    def has_permission(self, request, view):
        user = request.user
        expected = getattr(view, 'account_type', None)
        return bool(
            user
            and user.is_authenticated
            and isinstance(user, AccountPrincipal)
            and user.user_type == expected
        )

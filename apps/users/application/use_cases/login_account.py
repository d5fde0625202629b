"""
Login use case for customers and suppliers.
"""
import logging
from dataclasses import dataclass

from django.contrib.auth.hashers import check_password
from rest_framework_simplejwt.tokens import RefreshToken

from shared.application import UseCase, UseCaseResult
from ...domain.entities.account import Account
from ...domain.repositories.account_repository import AccountRepository
from ...domain.exceptions import InvalidCredentialsError, UserInactiveError
from ..dtos.account_dto import AccountDTO
from ..dtos.auth_dto import LoginDTO, LoginResultDTO, TokenDTO

logger = logging.getLogger(__name__)


def issue_tokens(account: Account) -> TokenDTO:
    """Refresh/access pair carrying user_type and email claims."""
    refresh = RefreshToken.for_user(account)
    refresh['user_type'] = account.user_type
    refresh['email'] = account.email.value
    return TokenDTO(
        access_token=str(refresh.access_token),
        refresh_token=str(refresh),
    )


@dataclass
class LoginAccountUseCase(UseCase[LoginDTO, LoginResultDTO]):
    """Use case for signing in with email and password."""

    account_repository: AccountRepository

    def execute(self, input_dto: LoginDTO) -> UseCaseResult[LoginResultDTO]:
        account = self.account_repository.find_by_email(input_dto.email)

        if account is None or not account.hashed_password:
            logger.info("Login failed for unknown email %s", input_dto.email)
            raise InvalidCredentialsError()

        if not check_password(input_dto.password, account.hashed_password):
            logger.info("Login failed for %s %s: wrong password", account.user_type, account.id)
            raise InvalidCredentialsError()

        if not account.is_active:
            logger.info("Login refused for %s %s: status %s", account.user_type, account.id, account.status.value)
            raise UserInactiveError(str(account.id))

        logger.info("%s %s signed in", account.user_type.capitalize(), account.id)
        return UseCaseResult.ok(
            LoginResultDTO(token=issue_tokens(account), account=AccountDTO.from_entity(account))
        )

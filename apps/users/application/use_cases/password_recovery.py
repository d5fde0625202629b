"""
Password recovery use cases.
"""
import logging
from dataclasses import dataclass, field

from django.contrib.auth.hashers import make_password

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.account_repository import AccountRepository
from ...domain.exceptions import AccountNotFoundError, InvalidResetTokenError
from ...domain.validators.strong_password import ensure_strong_password
from ..dtos.account_dto import AccountDTO
from ..dtos.auth_dto import PasswordRecoveryDTO, PasswordResetDTO, PasswordResetIssuedDTO
from ..services.token_service import TokenService

logger = logging.getLogger(__name__)


@dataclass
class RequestPasswordResetUseCase(UseCase[PasswordRecoveryDTO, PasswordResetIssuedDTO]):
    """Issue a reset token for an email; the plain token is returned once."""

    account_repository: AccountRepository
    token_service: TokenService = field(default_factory=TokenService)

    def execute(self, input_dto: PasswordRecoveryDTO) -> UseCaseResult[PasswordResetIssuedDTO]:
        account = self.account_repository.find_by_email(input_dto.email)
        if account is None:
            raise AccountNotFoundError(input_dto.email, user_type=self.account_repository.user_type)

        token = self.token_service.generate_password_reset_token()
        expires_at = self.token_service.expiration_time()
        account.set_password_reset_token(self.token_service.hash_token(token), expires_at)
        self.account_repository.save(account)

        logger.info("Password reset token issued for %s %s", account.user_type, account.id)
        return UseCaseResult.ok(
            PasswordResetIssuedDTO(email=account.email.value, token=token, expires_at=expires_at)
        )


@dataclass
class ResetPasswordUseCase(UseCase[PasswordResetDTO, AccountDTO]):
    """Set a new password from a valid reset token."""

    account_repository: AccountRepository
    token_service: TokenService = field(default_factory=TokenService)

    def execute(self, input_dto: PasswordResetDTO) -> UseCaseResult[AccountDTO]:
        account = self.account_repository.find_by_reset_token(
            self.token_service.hash_token(input_dto.token)
        )
        if account is None:
            raise InvalidResetTokenError()
        if self.token_service.is_expired(account.password_reset_token_expires_at):
            logger.info("Expired reset token used for %s %s", account.user_type, account.id)
            raise InvalidResetTokenError("Reset token has expired")

        ensure_strong_password(input_dto.new_password, field='new_password')
        account.update_password(make_password(input_dto.new_password))
        account.clear_password_reset_token()
        saved = self.account_repository.save(account)

        logger.info("Password reset for %s %s", saved.user_type, saved.id)
        return UseCaseResult.ok(AccountDTO.from_entity(saved))

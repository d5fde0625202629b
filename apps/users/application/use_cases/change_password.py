"""
Change password use case.
"""
import logging
from dataclasses import dataclass

from django.contrib.auth.hashers import check_password, make_password

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.account_repository import AccountRepository
from ...domain.exceptions import AccountNotFoundError, InvalidCurrentPasswordError
from ...domain.validators.strong_password import ensure_strong_password
from ..dtos.account_dto import AccountDTO
from ..dtos.auth_dto import PasswordChangeDTO

logger = logging.getLogger(__name__)


@dataclass
class ChangePasswordUseCase(UseCase[PasswordChangeDTO, AccountDTO]):
    """Replace the password of a signed-in account."""

    account_repository: AccountRepository

    def execute(self, input_dto: PasswordChangeDTO) -> UseCaseResult[AccountDTO]:
        account = self.account_repository.find_by_id(input_dto.account_id)
        if account is None:
            raise AccountNotFoundError(str(input_dto.account_id), user_type=self.account_repository.user_type)

        if not check_password(input_dto.current_password, account.hashed_password):
            raise InvalidCurrentPasswordError()

        ensure_strong_password(input_dto.new_password, field='new_password')
        account.update_password(make_password(input_dto.new_password))
        saved = self.account_repository.save(account)

        logger.info("Password changed for %s %s", saved.user_type, saved.id)
        return UseCaseResult.ok(AccountDTO.from_entity(saved))

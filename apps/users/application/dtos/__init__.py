# DTOs
from .account_dto import AccountDTO, CustomerRegistrationDTO, SupplierRegistrationDTO
from .auth_dto import (
    LoginDTO,
    TokenDTO,
    LoginResultDTO,
    PasswordRecoveryDTO,
    PasswordResetIssuedDTO,
    PasswordResetDTO,
    PasswordChangeDTO,
)

__all__ = [
    'AccountDTO',
    'CustomerRegistrationDTO',
    'SupplierRegistrationDTO',
    'LoginDTO',
    'TokenDTO',
    'LoginResultDTO',
    'PasswordRecoveryDTO',
    'PasswordResetIssuedDTO',
    'PasswordResetDTO',
    'PasswordChangeDTO',
]

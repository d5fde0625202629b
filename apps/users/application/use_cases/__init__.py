# Use cases
from .register_account import RegisterCustomerUseCase, RegisterSupplierUseCase
from .login_account import LoginAccountUseCase, issue_tokens
from .password_recovery import RequestPasswordResetUseCase, ResetPasswordUseCase
from .change_password import ChangePasswordUseCase

__all__ = [
    'RegisterCustomerUseCase',
    'RegisterSupplierUseCase',
    'LoginAccountUseCase',
    'issue_tokens',
    'RequestPasswordResetUseCase',
    'ResetPasswordUseCase',
    'ChangePasswordUseCase',
]

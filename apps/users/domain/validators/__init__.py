# Account validators
from .strong_password import StrongPasswordValidator, ensure_strong_password

__all__ = ['StrongPasswordValidator', 'ensure_strong_password']

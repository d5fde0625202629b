"""
Authentication DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from .account_dto import AccountDTO


@dataclass
class LoginDTO:
    """DTO for login request."""
    email: str
    password: str


@dataclass
class TokenDTO:
    """DTO for token response."""
    access_token: str
    refresh_token: str
    token_type: str = "Bearer"


@dataclass
class LoginResultDTO:
    """Tokens plus the signed-in account."""
    token: TokenDTO
    account: AccountDTO


@dataclass
class PasswordRecoveryDTO:
    email: str


@dataclass
class PasswordResetIssuedDTO:
    """A freshly issued reset token; only its hash is stored."""
    email: str
    token: str
    expires_at: datetime


@dataclass
class PasswordResetDTO:
    token: str
    new_password: str


@dataclass
class PasswordChangeDTO:
    account_id: UUID
    current_password: str
    new_password: str

"""
Account base entity shared by customers and suppliers.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Optional, Tuple

from shared.domain import AggregateRoot
from ..value_objects.account_status import AccountStatus
from ..value_objects.email import Email
from ..value_objects.phone_number import PhoneNumber
from ..exceptions import InvalidAccountStatusError


@dataclass(eq=False)
class Account(AggregateRoot):
    """An account that signs in to the self-service API."""
    email: Optional[Email] = None
    hashed_password: str = ""
    phone: Optional[PhoneNumber] = None
    status: AccountStatus = AccountStatus.ACTIVE
    password_reset_token: Optional[str] = None
    password_reset_token_expires_at: Optional[datetime] = None

    user_type: ClassVar[str] = "account"
    allowed_statuses: ClassVar[Tuple[AccountStatus, ...]] = tuple(AccountStatus)

    def __post_init__(self):
        if isinstance(self.email, str):
            self.email = Email(self.email)
        if isinstance(self.phone, str):
            self.phone = PhoneNumber(self.phone) if self.phone else None
        self.status = self._parse_status(self.status)

    @classmethod
    def _parse_status(cls, value) -> AccountStatus:
        try:
            status = AccountStatus(value)
        except ValueError:
            raise InvalidAccountStatusError(str(value), cls.user_type) from None
        if status not in cls.allowed_statuses:
            raise InvalidAccountStatusError(status.value, cls.user_type)
        return status

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE

    @property
    def display_name(self) -> str:
        return str(self.email)

    def change_status(self, status) -> None:
        self.status = self._parse_status(status)
        self.touch()

    def update_password(self, hashed_password: str) -> None:
        """Replace the password hash."""
        self.hashed_password = hashed_password
        self.touch()

    def set_password_reset_token(self, token_hash: str, expires_at: datetime) -> None:
        """Store the hash of an issued reset token."""
        self.password_reset_token = token_hash
        self.password_reset_token_expires_at = expires_at
        self.touch()

    def clear_password_reset_token(self) -> None:
        self.password_reset_token = None
        self.password_reset_token_expires_at = None
        self.touch()

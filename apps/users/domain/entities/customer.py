"""
Customer entity (Aggregate Root).
"""
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from ..value_objects.account_status import AccountStatus, CUSTOMER_STATUSES
from ..value_objects.email import Email
from ..value_objects.phone_number import PhoneNumber
from ..events.account_registered import AccountRegistered
from .account import Account


@dataclass(eq=False)
class Customer(Account):
    """A customer buying through the storefront."""
    first_name: str = ""
    last_name: str = ""

    user_type: ClassVar[str] = "customer"
    allowed_statuses: ClassVar[Tuple[AccountStatus, ...]] = CUSTOMER_STATUSES

    @classmethod
    def register(
        cls,
        email: str,
        hashed_password: str,
        first_name: str,
        last_name: str,
        phone: Optional[str] = None,
    ) -> 'Customer':
        """Factory method for a newly registered customer."""
        customer = cls(
            email=Email(email),
            hashed_password=hashed_password,
            first_name=first_name,
            last_name=last_name,
            phone=PhoneNumber(phone) if phone else None,
        )
        customer.add_domain_event(
            AccountRegistered(account_id=customer.id, email=customer.email.value, user_type=cls.user_type)
        )
        return customer

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def display_name(self) -> str:
        return self.full_name or str(self.email)

    @property
    def is_blocked(self) -> bool:
        return self.status == AccountStatus.BLOCKED

    def block(self) -> None:
        self.change_status(AccountStatus.BLOCKED)

"""
Supplier entity (Aggregate Root).
"""
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from ..value_objects.account_status import AccountStatus, SUPPLIER_STATUSES
from ..value_objects.email import Email
from ..value_objects.phone_number import PhoneNumber
from ..events.account_registered import AccountRegistered
from .account import Account


@dataclass(eq=False)
class Supplier(Account):
    """A supplier whose products are resold; email is the contact email."""
    company_name: str = ""
    contact_person: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None

    user_type: ClassVar[str] = "supplier"
    allowed_statuses: ClassVar[Tuple[AccountStatus, ...]] = SUPPLIER_STATUSES

    @classmethod
    def register(
        cls,
        company_name: str,
        email: str,
        hashed_password: str,
        contact_person: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> 'Supplier':
        """Factory method for a newly registered supplier."""
        supplier = cls(
            company_name=company_name,
            email=Email(email),
            hashed_password=hashed_password,
            contact_person=contact_person,
            phone=PhoneNumber(phone) if phone else None,
            address=address,
        )
        supplier.add_domain_event(
            AccountRegistered(account_id=supplier.id, email=supplier.email.value, user_type=cls.user_type)
        )
        return supplier

    @property
    def display_name(self) -> str:
        return self.company_name

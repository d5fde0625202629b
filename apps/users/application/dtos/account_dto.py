"""
Account DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from ...domain.entities.account import Account
from ...domain.entities.customer import Customer
from ...domain.entities.supplier import Supplier


@dataclass
class CustomerRegistrationDTO:
    """DTO for customer sign-up."""
    email: str
    password: str
    first_name: str
    last_name: str
    phone: Optional[str] = None


@dataclass
class SupplierRegistrationDTO:
    """DTO for supplier sign-up."""
    company_name: str
    email: str
    password: str
    contact_person: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


@dataclass
class AccountDTO:
    """DTO for account output."""
    id: UUID
    email: str
    type: str
    status: str
    name: str
    phone: Optional[str]
    created_at: datetime
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company_name: Optional[str] = None
    contact_person: Optional[str] = None

    @classmethod
    def from_entity(cls, account: Account) -> 'AccountDTO':
        """Create DTO from entity."""
        dto = cls(
            id=account.id,
            email=account.email.value,
            type=account.user_type,
            status=account.status.value,
            name=account.display_name,
            phone=account.phone.value if account.phone else None,
            created_at=account.created_at,
        )
        if isinstance(account, Customer):
            dto.first_name = account.first_name
            dto.last_name = account.last_name
        elif isinstance(account, Supplier):
            dto.company_name = account.company_name
            dto.contact_person = account.contact_person
        return dto

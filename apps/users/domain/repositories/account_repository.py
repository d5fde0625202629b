"""
Account repository interfaces.
"""
from abc import ABC, abstractmethod
from typing import Dict, Generic, Optional, TypeVar
from uuid import UUID

from ..entities.account import Account
from ..entities.customer import Customer
from ..entities.supplier import Supplier

AccountT = TypeVar('AccountT', bound=Account)


class AccountRepository(ABC, Generic[AccountT]):
    """Abstract repository for one kind of account."""
    user_type = "account"

    @abstractmethod
    def save(self, account: AccountT) -> AccountT:
        """Save an account."""
        pass

    @abstractmethod
    def find_by_id(self, account_id: UUID) -> Optional[AccountT]:
        """Find an account by ID."""
        pass

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[AccountT]:
        """Find an account by email, case-insensitively."""
        pass

    @abstractmethod
    def find_by_reset_token(self, token_hash: str) -> Optional[AccountT]:
        """Find the account holding a password reset token hash."""
        pass

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        """Check if an account exists with the given email."""
        pass

    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def count_by_status(self) -> Dict[str, int]:
        """Number of accounts per status value."""
        pass

    @abstractmethod
    def delete(self, account_id: UUID) -> bool:
        """Delete an account by ID."""
        pass


class CustomerRepository(AccountRepository[Customer], ABC):
    """Repository for customers."""
    user_type = "customer"


class SupplierRepository(AccountRepository[Supplier], ABC):
    """Repository for suppliers."""
    user_type = "supplier"

"""
Account registered domain event.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class AccountRegistered(DomainEvent):
    """Event raised when a customer or supplier registers."""
    account_id: Optional[UUID] = None
    email: str = ""
    user_type: str = ""

"""
Account status value object.
"""
from enum import Enum


class AccountStatus(str, Enum):
    """Status of a customer or supplier account."""
    ACTIVE = 'active'
    INACTIVE = 'inactive'
    BLOCKED = 'blocked'

    @classmethod
    def choices_for(cls, statuses):
        return [(status.value, status.value.capitalize()) for status in statuses]


CUSTOMER_STATUSES = (AccountStatus.ACTIVE, AccountStatus.INACTIVE, AccountStatus.BLOCKED)
SUPPLIER_STATUSES = (AccountStatus.ACTIVE, AccountStatus.INACTIVE)

# Account value objects
from .email import Email
from .phone_number import PhoneNumber
from .account_status import AccountStatus, CUSTOMER_STATUSES, SUPPLIER_STATUSES

__all__ = ['Email', 'PhoneNumber', 'AccountStatus', 'CUSTOMER_STATUSES', 'SUPPLIER_STATUSES']

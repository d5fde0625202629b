# Account repositories
from .account_repository import AccountRepository, CustomerRepository, SupplierRepository

__all__ = ['AccountRepository', 'CustomerRepository', 'SupplierRepository']

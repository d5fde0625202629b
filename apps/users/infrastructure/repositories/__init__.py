# Account repository implementations
from .django_account_repository import DjangoCustomerRepository, DjangoSupplierRepository

__all__ = ['DjangoCustomerRepository', 'DjangoSupplierRepository']

# Account entities
from .account import Account
from .customer import Customer
from .supplier import Supplier

__all__ = ['Account', 'Customer', 'Supplier']

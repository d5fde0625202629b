# Domain events
from .account_registered import AccountRegistered

__all__ = ['AccountRegistered']

# Account models
from .address_model import AddressModel
from .customer_model import CustomerModel
from .supplier_model import SupplierModel

__all__ = ['AddressModel', 'CustomerModel', 'SupplierModel']

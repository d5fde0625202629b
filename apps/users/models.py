# Model discovery for the users app
from .infrastructure.models import AddressModel, CustomerModel, SupplierModel  # noqa: F401

# Model discovery for the products app
from .infrastructure.models import ProductModel  # noqa: F401

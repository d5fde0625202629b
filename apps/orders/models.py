# Model discovery for the orders app
from .infrastructure.models import OrderModel, OrderItemModel  # noqa: F401

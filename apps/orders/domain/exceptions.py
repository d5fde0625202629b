"""
Order domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError, InvalidOperationError, ValidationError


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order is not found."""

    def __init__(self, identifier: str):
        super().__init__("Order", identifier, code="ORDER_NOT_FOUND")
        self.identifier = identifier


class InvalidOrderStatusError(ValidationError):
    """Raised for a status value outside the known set."""

    def __init__(self, status: str):
        super().__init__(message=f"Invalid order status: '{status}'", field="status")
        self.status = status


class InvalidOrderNumberError(ValidationError):
    """Raised when an order number does not match ORD-<year>-<token>."""

    def __init__(self, value: str):
        super().__init__(message=f"Invalid order number: '{value}'", field="order_number")
        self.value = value


class InvalidShippingAddressError(ValidationError):
    """Raised when a shipping address is incomplete."""

    def __init__(self, message: str, field: str = "shipping_address"):
        super().__init__(message=message, field=field)


class InvalidOrderStateError(InvalidOperationError):
    """Raised when an order operation is invalid for the current state."""

    def __init__(self, operation: str, current_state: str):
        super().__init__(
            message=f"Cannot {operation} order in '{current_state}' state",
            operation=operation,
            state=current_state,
            code="INVALID_ORDER_STATE",
        )

"""
Update order status use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import InvalidOrderStateError, OrderNotFoundError
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects.order_status import OrderStatus
from ..dtos.order_dto import OrderDTO, UpdateOrderStatusDTO

logger = logging.getLogger(__name__)


@dataclass
class UpdateOrderStatusUseCase(UseCase[UpdateOrderStatusDTO, OrderDTO]):
    """Change an order's status; cancelling is limited to pending and processing orders."""

    order_repository: OrderRepository

    def execute(self, input_dto: UpdateOrderStatusDTO) -> UseCaseResult[OrderDTO]:
        order = self.order_repository.find_by_id(input_dto.order_id)
        if order is None:
            raise OrderNotFoundError(str(input_dto.order_id))

        new_status = OrderStatus.parse(input_dto.status)
        if new_status == OrderStatus.CANCELLED and not order.can_be_cancelled and not order.is_cancelled:
            raise InvalidOrderStateError("cancel", order.status.value)

        old_status = order.status
        order.set_status(new_status)
        order.touch()
        saved = self.order_repository.save(order)

        logger.info("Order %s status %s -> %s", saved.order_number, old_status.value, saved.status.value)
        return UseCaseResult.ok(OrderDTO.from_entity(saved))

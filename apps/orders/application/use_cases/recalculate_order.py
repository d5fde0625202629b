"""
Recalculate order totals use case.
"""
import logging
from dataclasses import dataclass
from uuid import UUID

from shared.application import UseCase, UseCaseResult
from ...domain.exceptions import OrderNotFoundError
from ...domain.repositories.order_repository import OrderRepository
from ...domain.validators import validate_order
from ..dtos.order_dto import OrderDTO

logger = logging.getLogger(__name__)


@dataclass
class RecalculateOrderUseCase(UseCase[UUID, OrderDTO]):
    """
    Recompute line totals and order totals after an edit and save them.

    Remaining problems (e.g. too little stock) do not block the save; they
    are returned as violations for the caller to show.
    """

    order_repository: OrderRepository

    def execute(self, order_id: UUID) -> UseCaseResult[OrderDTO]:
        order = self.order_repository.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(str(order_id))

        for item in order.order_items:
            item.recalculate_line_total()
        order.calculate_totals()
        violations = validate_order(order)
        for violation in violations:
            logger.warning("Order %s: %s (%s)", order.order_number, violation.message, violation.path)

        order.touch()
        saved = self.order_repository.save(order)
        return UseCaseResult.ok(OrderDTO.from_entity(saved), violations=violations)

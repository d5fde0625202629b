"""
Place order use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from shared.domain.exceptions import ConstraintViolationError
from apps.products.domain.exceptions import ProductNotFoundError
from apps.products.domain.repositories.product_repository import ProductRepository
from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.repositories.order_repository import OrderRepository
from ...domain.validators import validate_order
from ..dtos.order_dto import OrderDTO, PlaceOrderDTO

logger = logging.getLogger(__name__)


@dataclass
class PlaceOrderUseCase(UseCase[PlaceOrderDTO, OrderDTO]):
    """Build an order from product lines, check it, then persist it."""

    order_repository: OrderRepository
    product_repository: ProductRepository

    def execute(self, input_dto: PlaceOrderDTO) -> UseCaseResult[OrderDTO]:
        products = self.product_repository.find_by_ids([line.product_id for line in input_dto.items])

        items = []
        for line in input_dto.items:
            product = products.get(line.product_id)
            if product is None:
                raise ProductNotFoundError(str(line.product_id))
            items.append(OrderItem(product=product, quantity=line.quantity, unit_price=line.unit_price))

        order = Order.place(
            customer_id=input_dto.customer_id,
            shipping_address=input_dto.shipping_address,
            items=items,
            tax_amount=input_dto.tax_amount,
            shipping_amount=input_dto.shipping_amount,
            notes=input_dto.notes,
        )

        violations = validate_order(order)
        if violations:
            logger.info(
                "Order for customer %s rejected with %d violation(s)",
                input_dto.customer_id, len(violations),
            )
            raise ConstraintViolationError(violations)

        order.touch()
        saved = self.order_repository.save(order)

        logger.info("Order %s placed, total %s", saved.order_number, saved.total_amount)
        return UseCaseResult.ok(OrderDTO.from_entity(saved))

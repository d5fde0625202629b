"""
Order item entity.
"""
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from shared.domain import BaseEntity
from shared.domain.money import ZERO_AMOUNT, AmountLike, to_amount, to_unit_price
from apps.products.domain.entities.product import Product

if TYPE_CHECKING:
    from .order import Order


class OrderItem(BaseEntity):
    """
    A priced line of an order.

    The line total is derived: it is recalculated whenever quantity, unit
    price or product changes. Until a unit price has been assigned, the item
    reads as 0.00 and takes the selling price of the first product attached;
    an explicitly assigned price, including 0.00, is kept from then on.
    Unit prices keep four places; only the line total is a two-place amount.
    """

    def __init__(
        self,
        product: Optional[Product] = None,
        quantity: int = 1,
        unit_price: Optional[AmountLike] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.order: Optional['Order'] = None
        self._product: Optional[Product] = None
        self._quantity = 1
        self._unit_price: Optional[Decimal] = None
        self._line_total = ZERO_AMOUNT

        if unit_price is not None:
            self.unit_price = unit_price
        self.product = product
        self.quantity = quantity

    @property
    def quantity(self) -> int:
        return self._quantity

    @quantity.setter
    def quantity(self, value: int) -> None:
        self._quantity = int(value)
        self.recalculate_line_total()

    @property
    def unit_price(self) -> Decimal:
        """Unit price, 0.00 while unset."""
        if self._unit_price is None:
            return ZERO_AMOUNT
        return self._unit_price

    @unit_price.setter
    def unit_price(self, value: AmountLike) -> None:
        self._unit_price = to_unit_price(value)
        self.recalculate_line_total()

    @property
    def has_unit_price(self) -> bool:
        """True once a unit price was assigned or copied from a product."""
        return self._unit_price is not None

    @property
    def product(self) -> Optional[Product]:
        return self._product

    @product.setter
    def product(self, product: Optional[Product]) -> None:
        self._product = product
        if product is not None and self._unit_price is None:
            self._unit_price = product.selling_price
        self.recalculate_line_total()

    @property
    def line_total(self) -> Decimal:
        return self._line_total

    def recalculate_line_total(self) -> None:
        """line_total = unit_price x quantity, rounded to 2 places; 0.00 when quantity <= 0."""
        if self._quantity <= 0:
            self._line_total = ZERO_AMOUNT
            return
        if self._unit_price is None and self._product is not None:
            self._unit_price = self._product.selling_price
        self._line_total = to_amount(self.unit_price * self._quantity)

    @property
    def product_name(self) -> Optional[str]:
        return self._product.name if self._product else None

    @property
    def product_sku(self) -> Optional[str]:
        return self._product.sku.value if self._product and self._product.sku else None

    def __str__(self) -> str:
        if self._product is None:
            return "Unknown Product"
        return f"{self._product.name} (x{self._quantity})"

    def __repr__(self) -> str:
        return (
            f"OrderItem(id={self.id!r}, product={self.product_sku!r}, "
            f"quantity={self._quantity}, unit_price={self.unit_price}, line_total={self._line_total})"
        )

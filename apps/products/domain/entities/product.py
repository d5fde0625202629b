"""
Product entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from shared.domain import AggregateRoot
from shared.domain.money import ZERO_AMOUNT, to_amount, to_decimal
from ..value_objects.dimensions import Dimensions
from ..value_objects.product_status import ProductStatus
from ..value_objects.sku import SKU
from ..events.product_created import ProductCreated
from ..events.stock_level_changed import StockLevelChanged
from ..exceptions import InvalidProductError

MAX_IMAGES = 10


@dataclass(eq=False)
class Product(AggregateRoot):
    """A sellable item sourced from a supplier."""
    name: str = ""
    sku: Optional[SKU] = None
    supplier_id: Optional[UUID] = None
    supplier_reference: str = ""
    description: Optional[str] = None
    images: List[str] = field(default_factory=list)
    cost_price: Decimal = ZERO_AMOUNT
    selling_price: Decimal = ZERO_AMOUNT
    weight: Optional[Decimal] = None
    dimensions: Optional[Dimensions] = None
    category: Optional[str] = None
    stock_level: int = 0
    status: ProductStatus = ProductStatus.AVAILABLE

    def __post_init__(self):
        if isinstance(self.sku, str):
            self.sku = SKU(self.sku)
        self.status = ProductStatus.parse(self.status)
        self.cost_price = to_amount(self.cost_price)
        self.selling_price = to_amount(self.selling_price)
        if self.weight is not None:
            self.weight = to_decimal(self.weight)
        self._validate()

    def _validate(self) -> None:
        """Validate product data."""
        if not self.name or not self.name.strip():
            raise InvalidProductError("Product name must not be blank", field="name")
        if self.cost_price < 0:
            raise InvalidProductError("Cost price must be non-negative", field="cost_price")
        if self.selling_price < 0:
            raise InvalidProductError("Selling price must be non-negative", field="selling_price")
        if self.stock_level < 0:
            raise InvalidProductError("Stock level must be non-negative", field="stock_level")
        if self.weight is not None and self.weight < 0:
            raise InvalidProductError("Weight must be non-negative", field="weight")
        if len(self.images) > MAX_IMAGES:
            raise InvalidProductError(f"A product can have at most {MAX_IMAGES} images", field="images")

    @classmethod
    def create(
        cls,
        name: str,
        sku: str,
        cost_price,
        selling_price,
        stock_level: int = 0,
        supplier_id: Optional[UUID] = None,
        supplier_reference: str = "",
        **extra,
    ) -> 'Product':
        """Factory method to create a new product."""
        product = cls(
            name=name,
            sku=SKU(sku),
            cost_price=cost_price,
            selling_price=selling_price,
            stock_level=stock_level,
            supplier_id=supplier_id,
            supplier_reference=supplier_reference,
            **extra,
        )
        product.add_domain_event(
            ProductCreated(
                product_id=product.id,
                name=product.name,
                sku=product.sku.value,
                supplier_id=supplier_id,
            )
        )
        return product

    @property
    def is_available(self) -> bool:
        """Orderable: status is available and there is stock."""
        return self.status == ProductStatus.AVAILABLE and self.stock_level > 0

    @property
    def is_in_stock(self) -> bool:
        """Check if product is in stock."""
        return self.stock_level > 0

    @property
    def margin(self) -> Decimal:
        """Markup over cost as a percentage, 0 when cost is not positive."""
        if self.cost_price <= 0:
            return ZERO_AMOUNT
        return to_amount((self.selling_price - self.cost_price) / self.cost_price * 100)

    def update_pricing(self, cost_price=None, selling_price=None) -> None:
        """Update cost and/or selling price."""
        if cost_price is not None:
            self.cost_price = to_amount(cost_price)
        if selling_price is not None:
            self.selling_price = to_amount(selling_price)
        self._validate()
        self.touch()

    def update_stock_level(self, stock_level: int) -> None:
        """Set the stock level; stock is only ever adjusted by admin edits."""
        if stock_level < 0:
            raise InvalidProductError("Stock level must be non-negative", field="stock_level")
        old_level = self.stock_level
        self.stock_level = stock_level
        if old_level != stock_level:
            self.add_domain_event(
                StockLevelChanged(product_id=self.id, old_level=old_level, new_level=stock_level)
            )
        self.touch()

    def change_status(self, status) -> None:
        self.status = ProductStatus.parse(status)
        self.touch()

    def add_image(self, image_url: str) -> None:
        """Add an image to the product."""
        if image_url in self.images:
            return
        if len(self.images) >= MAX_IMAGES:
            raise InvalidProductError(f"A product can have at most {MAX_IMAGES} images", field="images")
        self.images.append(image_url)
        self.touch()

    def remove_image(self, image_url: str) -> None:
        """Remove an image from the product."""
        if image_url in self.images:
            self.images.remove(image_url)
            self.touch()

    def __str__(self) -> str:
        return self.name

"""
Shipping address value object.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.domain import ValueObject
from ..exceptions import InvalidShippingAddressError


@dataclass(frozen=True)
class ShippingAddress(ValueObject):
    """Postal address an order ships to."""
    first_name: str
    last_name: str
    address_line1: str
    city: str
    postal_code: str
    country: str
    address_line2: Optional[str] = None
    state: Optional[str] = None
    company: Optional[str] = None
    phone: Optional[str] = None
    id: Optional[UUID] = None

    def validate(self) -> None:
        for name in ('first_name', 'last_name', 'address_line1', 'city', 'postal_code', 'country'):
            if not (getattr(self, name) or '').strip():
                raise InvalidShippingAddressError(f"'{name}' is required", field=f"shipping_address.{name}")
        if len(self.country) != 2:
            raise InvalidShippingAddressError(
                "Country must be a 2-letter ISO code", field="shipping_address.country"
            )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def formatted(self) -> str:
        """Multi-line postal rendering."""
        lines = [self.full_name]
        if self.company:
            lines.append(self.company)
        lines.append(self.address_line1)
        if self.address_line2:
            lines.append(self.address_line2)
        city_line = self.city
        if self.state:
            city_line += f", {self.state}"
        lines.append(f"{city_line} {self.postal_code}")
        lines.append(self.country.upper())
        return "\n".join(lines)

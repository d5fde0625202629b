"""
SKU value object.
"""
import re
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidSKUError

SKU_MAX_LENGTH = 100


@dataclass(frozen=True)
class SKU(ValueObject):
    """Stock Keeping Unit, stored uppercase."""
    value: str

    def validate(self) -> None:
        normalized = (self.value or "").upper().strip()
        if not self._is_valid(normalized):
            raise InvalidSKUError(self.value)
        object.__setattr__(self, 'value', normalized)

    @staticmethod
    def _is_valid(sku: str) -> bool:
        """Alphanumeric with dashes, underscores or dots."""
        pattern = r'^[A-Z0-9][A-Z0-9\-_.]*$'
        return 0 < len(sku) <= SKU_MAX_LENGTH and bool(re.match(pattern, sku))

    def __str__(self) -> str:
        return self.value

"""
Product dimensions value object.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from shared.domain import ValueObject
from ..exceptions import InvalidProductError

DIMENSION_KEYS = ('width', 'height', 'depth')


@dataclass(frozen=True)
class Dimensions(ValueObject):
    """Optional width/height/depth measurements, each non-negative."""
    width: Optional[Decimal] = None
    height: Optional[Decimal] = None
    depth: Optional[Decimal] = None

    def validate(self) -> None:
        for key in DIMENSION_KEYS:
            value = getattr(self, key)
            if value is not None and value < 0:
                raise InvalidProductError(f"Dimension '{key}' must be non-negative", field=f"dimensions.{key}")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['Dimensions']:
        if not data:
            return None
        unknown = set(data) - set(DIMENSION_KEYS)
        if unknown:
            raise InvalidProductError(
                f"Unknown dimension keys: {', '.join(sorted(unknown))}", field="dimensions"
            )
        values = {}
        for key in DIMENSION_KEYS:
            raw = data.get(key)
            if raw is None:
                continue
            try:
                values[key] = Decimal(str(raw))
            except InvalidOperation:
                raise InvalidProductError(
                    f"Dimension '{key}' must be numeric", field=f"dimensions.{key}"
                ) from None
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        return {key: str(getattr(self, key)) for key in DIMENSION_KEYS if getattr(self, key) is not None}

"""
Email value object.
"""
import re
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidEmailError

EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')


@dataclass(frozen=True)
class Email(ValueObject):
    """Email address, stored lowercase."""
    value: str

    def validate(self) -> None:
        normalized = (self.value or '').strip().lower()
        if len(normalized) > 180 or not EMAIL_PATTERN.match(normalized):
            raise InvalidEmailError(self.value)
        object.__setattr__(self, 'value', normalized)

    @property
    def domain(self) -> str:
        """Get the email domain."""
        return self.value.split('@')[1]

    def __str__(self) -> str:
        return self.value

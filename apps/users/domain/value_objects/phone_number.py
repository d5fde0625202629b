"""
Phone number value object.
"""
import re
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidPhoneNumberError

PHONE_PATTERN = re.compile(r'^\+?[1-9]\d{0,15}$')


@dataclass(frozen=True)
class PhoneNumber(ValueObject):
    """International phone number, digits with an optional leading +."""
    value: str

    def validate(self) -> None:
        normalized = self._normalize(self.value or '')
        if not PHONE_PATTERN.match(normalized):
            raise InvalidPhoneNumberError(self.value)
        object.__setattr__(self, 'value', normalized)

    @staticmethod
    def _normalize(phone: str) -> str:
        """Drop spaces, dashes, dots and parentheses."""
        return re.sub(r'[\s\-.()]', '', phone)

    def __str__(self) -> str:
        return self.value

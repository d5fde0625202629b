"""
Order number value object.
"""
import re
import secrets
import string
from dataclasses import dataclass
from datetime import datetime

from shared.domain import ValueObject
from ..exceptions import InvalidOrderNumberError

TOKEN_LENGTH = 13
TOKEN_ALPHABET = string.ascii_uppercase + string.digits
ORDER_NUMBER_PATTERN = re.compile(r'^ORD-\d{4}-[A-Z0-9]+$')


@dataclass(frozen=True)
class OrderNumber(ValueObject):
    """Order number in the form ORD-<year>-<token>."""
    value: str

    def validate(self) -> None:
        if not ORDER_NUMBER_PATTERN.match(self.value or ''):
            raise InvalidOrderNumberError(self.value)

    @classmethod
    def generate(cls, now: datetime = None) -> 'OrderNumber':
        """Generate a new order number; uniqueness is left to the store."""
        year = (now or datetime.now()).strftime("%Y")
        token = ''.join(secrets.choice(TOKEN_ALPHABET) for _ in range(TOKEN_LENGTH))
        return cls(value=f"ORD-{year}-{token}")

    @property
    def year(self) -> int:
        return int(self.value.split('-')[1])

    def __str__(self) -> str:
        return self.value

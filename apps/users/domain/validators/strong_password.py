"""
Password strength policy.
"""
import re
from typing import List, Optional

from shared.domain.validation import Validator, Violation
from ..exceptions import WeakPasswordError

SPECIAL_CHARACTERS = re.compile(r'[!@#$%^&*()\-_=+\[\]{};:\'",.<>/?\\|`~]')


class StrongPasswordValidator(Validator[Optional[str]]):
    """Length plus lowercase, uppercase, digit and optionally special characters."""

    def __init__(
        self,
        min_length: int = 8,
        require_lowercase: bool = True,
        require_uppercase: bool = True,
        require_number: bool = True,
        require_special: bool = False,
        path: str = 'password',
    ):
        self.min_length = min_length
        self.require_lowercase = require_lowercase
        self.require_uppercase = require_uppercase
        self.require_number = require_number
        self.require_special = require_special
        self.path = path

    def missing_requirements(self, password: str) -> List[str]:
        missing = []
        if len(password) < self.min_length:
            missing.append(f"at least {self.min_length} characters")
        if self.require_lowercase and not re.search(r'[a-z]', password):
            missing.append("at least one lowercase letter")
        if self.require_uppercase and not re.search(r'[A-Z]', password):
            missing.append("at least one uppercase letter")
        if self.require_number and not re.search(r'\d', password):
            missing.append("at least one number")
        if self.require_special and not SPECIAL_CHARACTERS.search(password):
            missing.append("at least one special character")
        return missing

    def validate(self, password: Optional[str]) -> List[Violation]:
        # Empty values are left to required-field checks
        if not password:
            return []
        missing = self.missing_requirements(password)
        if not missing:
            return []
        return [Violation(
            path=self.path,
            code='password.strength',
            message="Password must contain " + ", ".join(missing),
            params={'requirements': ", ".join(missing)},
        )]


def ensure_strong_password(password: str, field: str = 'password') -> None:
    """Raise WeakPasswordError if the password fails the default policy."""
    if not password:
        raise WeakPasswordError("Password must not be blank", field=field)
    violations = StrongPasswordValidator(path=field).validate(password)
    if violations:
        raise WeakPasswordError(violations[0].message, field=field)

"""
Account domain exceptions.
"""
from shared.domain.exceptions import (
    AuthenticationError,
    ConflictError,
    EntityNotFoundError,
    PermissionDeniedError,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when an email is invalid."""

    def __init__(self, email: str):
        super().__init__(message=f"Invalid email format: '{email}'", field="email")
        self.email = email


class InvalidPhoneNumberError(ValidationError):
    """Raised when a phone number is invalid."""

    def __init__(self, phone: str):
        super().__init__(message=f"Invalid phone number: '{phone}'", field="phone")
        self.phone = phone


class InvalidAccountStatusError(ValidationError):
    """Raised for a status the account type does not support."""

    def __init__(self, status: str, user_type: str):
        super().__init__(message=f"Invalid {user_type} status: '{status}'", field="status")
        self.status = status


class WeakPasswordError(ValidationError):
    """Raised when a password does not meet the strength policy."""

    def __init__(self, message: str, field: str = "password"):
        super().__init__(message=message, field=field)


class UserAlreadyExistsError(ConflictError):
    """Raised when attempting to register an email that is taken."""

    def __init__(self, field: str, value: str):
        super().__init__(
            message=f"An account with {field} '{value}' already exists",
            code="EMAIL_EXISTS"
        )
        self.field = field
        self.value = value


class AccountNotFoundError(EntityNotFoundError):
    """Raised when no account matches an email."""

    def __init__(self, identifier: str, user_type: str = "account"):
        super().__init__(
            user_type.capitalize(),
            identifier,
            code="EMAIL_NOT_FOUND",
            message=f"No {user_type} is registered with '{identifier}'",
        )
        self.identifier = identifier


class InvalidCredentialsError(AuthenticationError):
    """Raised when login credentials are invalid."""

    def __init__(self):
        super().__init__(
            message="Invalid email or password",
            code="INVALID_CREDENTIALS"
        )


class UserInactiveError(PermissionDeniedError):
    """Raised when an inactive or blocked account attempts to sign in."""

    def __init__(self, user_id: str):
        super().__init__(
            message=f"Account '{user_id}' is not active",
            code="ACCOUNT_INACTIVE"
        )
        self.user_id = user_id


class InvalidResetTokenError(ValidationError):
    """Raised when a password reset token is unknown or expired."""

    def __init__(self, message: str = "Invalid or expired reset token"):
        super().__init__(message=message, field="token", code="INVALID_TOKEN")


class InvalidCurrentPasswordError(ValidationError):
    """Raised when the current password does not match on change."""

    def __init__(self):
        super().__init__(
            message="Current password is incorrect",
            field="current_password",
            code="INVALID_CURRENT_PASSWORD",
        )

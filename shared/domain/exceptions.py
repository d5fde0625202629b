"""
Domain exceptions.
"""
from typing import List


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str, code: str = "ENTITY_NOT_FOUND", message: str = None):
        super().__init__(
            message=message or f"{entity_name} with id '{entity_id}' not found",
            code=code
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str = None, code: str = "VALIDATION_ERROR"):
        super().__init__(message=message, code=code)
        self.field = field


class ConstraintViolationError(ValidationError):
    """Raised when an entity fails one or more consistency checks."""

    def __init__(self, violations: List['Violation'], message: str = None):
        super().__init__(
            message=message or "; ".join(v.message for v in violations),
            code="CONSTRAINT_VIOLATION",
        )
        self.violations = list(violations)


class BusinessRuleViolationError(DomainException):
    """Raised when a business rule is violated."""

    def __init__(self, message: str, rule: str = None):
        super().__init__(message=message, code="BUSINESS_RULE_VIOLATION")
        self.rule = rule


class InvalidOperationError(DomainException):
    """Raised when an operation is invalid for the current state."""

    def __init__(self, message: str, operation: str = None, state: str = None, code: str = "INVALID_OPERATION"):
        super().__init__(message=message, code=code)
        self.operation = operation
        self.state = state


class ConflictError(DomainException):
    """Raised when a resource collides with an existing one."""


class AuthenticationError(DomainException):
    """Raised when credentials or tokens are rejected."""


class PermissionDeniedError(DomainException):
    """Raised when an authenticated account may not perform an action."""

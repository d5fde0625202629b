"""
Custom exception handlers for DRF.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    ConstraintViolationError,
    BusinessRuleViolationError,
    InvalidOperationError,
    ConflictError,
    AuthenticationError,
    PermissionDeniedError,
)

logger = logging.getLogger(__name__)


def _error_body(exc: DomainException, **extra) -> dict:
    body = {'error': exc.message, 'code': exc.code}
    body.update(extra)
    return body


def custom_exception_handler(exc, context):
    """Handle custom domain exceptions."""
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if isinstance(exc, EntityNotFoundError):
        return Response(
            _error_body(exc, entity=exc.entity_name, entity_id=exc.entity_id),
            status=status.HTTP_404_NOT_FOUND,
        )

    if isinstance(exc, ConstraintViolationError):
        return Response(
            _error_body(exc, violations=[v.to_dict() for v in exc.violations]),
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, ValidationError):
        return Response(
            _error_body(exc, field=exc.field),
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, BusinessRuleViolationError):
        return Response(
            _error_body(exc, rule=exc.rule),
            status=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    if isinstance(exc, InvalidOperationError):
        return Response(
            _error_body(exc, operation=exc.operation, state=exc.state),
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, ConflictError):
        return Response(_error_body(exc), status=status.HTTP_409_CONFLICT)

    if isinstance(exc, AuthenticationError):
        return Response(_error_body(exc), status=status.HTTP_401_UNAUTHORIZED)

    if isinstance(exc, PermissionDeniedError):
        return Response(_error_body(exc), status=status.HTTP_403_FORBIDDEN)

    if isinstance(exc, DomainException):
        return Response(_error_body(exc), status=status.HTTP_400_BAD_REQUEST)

    if response is None:
        view = context.get('view')
        logger.exception(
            "Unhandled error in %s", view.__class__.__name__ if view else 'unknown view'
        )

    return response

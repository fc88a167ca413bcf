"""Base domain exceptions shared by every module.

Each ``DomainError`` subclass carries the HTTP status it maps to.  Services
raise them at the point of detection; the DRF exception handler in
``modules.core.exception_handler`` is the only place that turns them into
responses.
"""

from __future__ import annotations

import functools
from typing import Callable, TypeVar

import structlog
from django.core.exceptions import FieldDoesNotExist, FieldError
from django.db import DatabaseError
from rest_framework import status

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable)


class DomainError(Exception):
    """Root of the domain error taxonomy."""

    status_code: int = status.HTTP_400_BAD_REQUEST


class StorageFailure(DomainError):
    """Any underlying persistence error (constraints, connectivity, bad sort key).

    The low-level cause is kept on ``__cause__`` for diagnostics; the message
    returned to callers is always the generic one.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Error accessing the database"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


# Errors raised by the ORM that mean "the store rejected this operation".
STORAGE_ERRORS = (DatabaseError, FieldError, FieldDoesNotExist)


def translate_storage_errors(func: F) -> F:
    """Re-raise ORM/database errors from ``func`` as ``StorageFailure``."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except STORAGE_ERRORS as exc:
            logger.error(
                "storage.failure",
                operation=func.__qualname__,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise StorageFailure() from exc

    return wrapper  # type: ignore[return-value]

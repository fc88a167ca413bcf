"""DRF exception handler mapping domain errors to plain-text responses.

Every ``DomainError`` becomes a ``text/plain`` response whose body is the
exception message and whose status is the exception's ``status_code``.
Anything else is left to DRF's default handler.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.http import HttpResponse
from rest_framework.views import exception_handler

from modules.core.exceptions import DomainError, StorageFailure

logger = structlog.get_logger(__name__)


def domain_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[HttpResponse]:
    if not isinstance(exc, DomainError):
        return exception_handler(exc, context)

    view = context.get("view")
    log = logger.bind(
        error_type=type(exc).__name__,
        status_code=exc.status_code,
        view=type(view).__name__ if view is not None else None,
    )
    if isinstance(exc, StorageFailure):
        cause = exc.__cause__
        log.error(
            "request.storage_failure",
            cause=repr(cause) if cause is not None else None,
        )
    else:
        log.warning("request.domain_error", detail=str(exc))

    return HttpResponse(
        str(exc),
        status=exc.status_code,
        content_type="text/plain; charset=utf-8",
    )

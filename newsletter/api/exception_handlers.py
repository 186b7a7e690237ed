"""Global exception handlers that map domain exceptions to HTTP responses.

Intake responses carry no body; callers only see the status code.
"""

import logging

from fastapi import Request, status
from fastapi.responses import Response

from newsletter.errors import PersistenceError, ValidationError

logger = logging.getLogger(__name__)


def validation_error_handler(_request: Request, exc: ValidationError) -> Response:
    logger.info("Rejected submission: %s", exc)
    return Response(status_code=status.HTTP_400_BAD_REQUEST)


def persistence_error_handler(_request: Request, exc: PersistenceError) -> Response:
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app):
    """Register domain exception handlers on the FastAPI app."""
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)

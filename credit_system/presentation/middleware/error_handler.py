"""Exception handlers mapping domain errors to HTTP responses."""

from typing import List, Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from credit_system.core.metrics import record_domain_error
from credit_system.domain.exceptions import (
    CreditNotFoundException,
    CreditOwnershipMismatchException,
    CustomerHasCreditsException,
    CustomerNotFoundException,
    DomainException,
    FieldError,
    InvalidInstallmentDateException,
    InvalidRequestException,
    UniquenessViolationException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)

STATUS_BY_EXCEPTION = {
    CustomerNotFoundException: 404,
    CreditNotFoundException: 404,
    InvalidInstallmentDateException: 400,
    CreditOwnershipMismatchException: 400,
    UniquenessViolationException: 409,
    CustomerHasCreditsException: 409,
}


def _error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[List[FieldError]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": code,
            "message": message,
            "details": [d.to_dict() for d in details or []],
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    async def mapped_domain_handler(request: Request, exc: DomainException) -> JSONResponse:
        """Handle domain errors with a fixed status code."""
        status_code = STATUS_BY_EXCEPTION[type(exc)]
        record_domain_error(exc.code)
        logger.info(
            "domain_error",
            code=exc.code,
            status_code=status_code,
            path=request.url.path,
        )
        return _error_response(status_code, exc.code, exc.message)

    for exc_class in STATUS_BY_EXCEPTION:
        app.add_exception_handler(exc_class, mapped_domain_handler)

    @app.exception_handler(InvalidRequestException)
    async def invalid_request_handler(
        request: Request,
        exc: InvalidRequestException,
    ) -> JSONResponse:
        """Handle field validation failures."""
        record_domain_error(exc.code)
        logger.info(
            "invalid_request",
            path=request.url.path,
            fields=[e.field for e in exc.errors],
        )
        return _error_response(400, exc.code, exc.message, exc.errors)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        record_domain_error(exc.code)
        logger.warning(
            "domain_exception",
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")

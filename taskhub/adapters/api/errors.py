# taskhub/adapters/api/errors.py
from typing import Dict, Tuple

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from taskhub.core.domain.exceptions import DomainError, ErrorKind

logger = structlog.get_logger()

INTERNAL_MESSAGE = "Internal server error"

# ErrorKind -> (HTTP status, wire code)
ERROR_TABLE: Dict[ErrorKind, Tuple[int, str]] = {
    ErrorKind.VALIDATION: (status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR"),
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
    ErrorKind.ALREADY_EXISTS: (status.HTTP_409_CONFLICT, "ALREADY_EXISTS"),
    ErrorKind.INFRASTRUCTURE: (status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"),
    ErrorKind.UNEXPECTED: (status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR"),
}


def error_body(code: str, message: str) -> Dict[str, str]:
    return {"code": code, "message": message}


def render_domain_error(exc: DomainError) -> JSONResponse:
    """
    Builds the HTTP response for a DomainError.
    Server-side failures keep their detail in the logs, never in the body.
    """
    status_code, code = ERROR_TABLE[exc.kind]
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("request_failed", kind=exc.kind.value, error=exc.message)
        message = INTERNAL_MESSAGE
    else:
        message = exc.message
    return JSONResponse(status_code=status_code, content=error_body(code, message))


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return render_domain_error(exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything that escaped the DomainError taxonomy is reported as unexpected."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    _, code = ERROR_TABLE[ErrorKind.UNEXPECTED]
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(code, INTERNAL_MESSAGE),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

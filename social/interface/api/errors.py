"""Mapping of domain errors to HTTP responses."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from social.domain.error import DomainError, ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.STORAGE_FAILURE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.ENCODING_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as ``{"detail", "kind"}`` with the mapped status."""
    status_code = STATUS_BY_KIND.get(
        exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    if status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            kind=exc.kind.value,
            error=str(exc),
        )
    else:
        logfire.warn(
            "Request rejected",
            path=request.url.path,
            kind=exc.kind.value,
            error=str(exc),
        )
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "kind": exc.kind.value},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the domain error handler on an app."""
    app.add_exception_handler(DomainError, domain_error_handler)

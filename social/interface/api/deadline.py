"""Per-request deadline taken from the ``X-Request-Timeout`` header."""

import math
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from social.domain.error import InvalidInputError
from social.interface.api.errors import domain_error_handler
from social.util.deadline import deadline

REQUEST_TIMEOUT_HEADER = "X-Request-Timeout"


def parse_request_timeout(raw: str) -> float:
    """Parse the header value as a positive, finite number of seconds.

    Raises:
        InvalidInputError: If the value is anything else
    """
    try:
        seconds = float(raw)
    except ValueError:
        seconds = math.nan
    if not math.isfinite(seconds) or seconds <= 0:
        raise InvalidInputError(
            f"{REQUEST_TIMEOUT_HEADER} must be a positive number of seconds"
        )
    return seconds


def register_deadline_middleware(app: FastAPI) -> None:
    """Bound every graph and filesystem call of a request by its header.

    Requests without the header fall back to the configured timeouts.
    """

    @app.middleware("http")
    async def request_deadline(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        raw = request.headers.get(REQUEST_TIMEOUT_HEADER)
        if raw is None:
            return await call_next(request)
        try:
            seconds = parse_request_timeout(raw)
        except InvalidInputError as e:
            # Raised outside the routes, so the app's handlers never see it
            return await domain_error_handler(request, e)
        with deadline(seconds):
            return await call_next(request)

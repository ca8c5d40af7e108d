# cinereview/services/api/errors.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cinereview.common.logging import get_logger
from cinereview.domain.errors import (
    CineReviewError, DuplicateReview, Forbidden, InvalidArgument, NotFound,
    Unauthenticated, UpstreamUnavailable,
)
from cinereview.services.schemas.errors import ErrorRead

logger = get_logger()

# most specific first; MovieNotFound/ReviewNotFound resolve through NotFound
STATUS_BY_ERROR: list[tuple[type[CineReviewError], HTTPStatus]] = [
    (InvalidArgument, HTTPStatus.BAD_REQUEST),
    (Unauthenticated, HTTPStatus.UNAUTHORIZED),
    (Forbidden, HTTPStatus.FORBIDDEN),
    (NotFound, HTTPStatus.NOT_FOUND),
    (DuplicateReview, HTTPStatus.CONFLICT),
    (UpstreamUnavailable, HTTPStatus.SERVICE_UNAVAILABLE),
]


def status_for(exc: CineReviewError) -> HTTPStatus:
    for kind, status in STATUS_BY_ERROR:
        if isinstance(exc, kind):
            return status
    return HTTPStatus.INTERNAL_SERVER_ERROR


def _body(code: str, detail: str) -> dict:
    return ErrorRead(error=code, detail=detail).model_dump()


async def _domain_error(request: Request, exc: CineReviewError) -> JSONResponse:
    status = status_for(exc)
    if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if status == HTTPStatus.UNAUTHORIZED else None
    return JSONResponse(status_code=status, content=_body(exc.code, exc.message), headers=headers)


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content=_body(InvalidArgument.code, "; ".join(parts) or "Invalid request"),
    )


def install_error_handlers(app: FastAPI) -> None:
    """
    Map the documented failure kinds to HTTP. Anything else is left to the
    default 500 handler so internal faults stay distinguishable.
    """
    app.add_exception_handler(CineReviewError, _domain_error)
    app.add_exception_handler(RequestValidationError, _validation_error)

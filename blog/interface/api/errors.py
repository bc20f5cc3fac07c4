"""Exception handlers translating errors into the response envelope."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from blog.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from blog.util.jwt import JWTError

# DomainError stays last: the status lookup takes the first match.
STATUS_BY_ERROR: dict[type[Exception], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    BusinessRuleViolationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    ConflictError: status.HTTP_409_CONFLICT,
    JWTError: status.HTTP_401_UNAUTHORIZED,
    DomainError: status.HTTP_400_BAD_REQUEST,
}
KNOWN_ERRORS = tuple(STATUS_BY_ERROR)


def error_response(status_code: int, message: str, data=None) -> JSONResponse:
    body = {"success": False, "message": message}
    if data is not None:
        body["data"] = data
    headers = (
        {"WWW-Authenticate": "Bearer"}
        if status_code == status.HTTP_401_UNAUTHORIZED
        else None
    )
    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def handle_known_error(request: Request, exc: Exception) -> JSONResponse:
    status_code = next(
        code for error_type, code in STATUS_BY_ERROR.items() if isinstance(exc, error_type)
    )
    if status_code >= 500:
        logfire.error("Request failed", path=request.url.path, error=str(exc))
    else:
        logfire.warn(
            "Request rejected",
            path=request.url.path,
            status_code=status_code,
            error_type=type(exc).__name__,
            error=str(exc),
        )
    return error_response(status_code, str(exc))


class KnownErrorMiddleware(BaseHTTPMiddleware):
    """Render domain and token errors once the DI request scope has closed.

    Exception handlers run inside dishka's container middleware, so the
    request scope would see a handled error as success and commit. This
    middleware is installed outside it: the error passes through the
    request scope first, which rolls the transaction back.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except KNOWN_ERRORS as exc:
            return await handle_known_error(request, exc)


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logfire.warn(
        "Request validation failed", path=request.url.path, errors=len(exc.errors())
    )
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Validation failed",
        data=jsonable_encoder(exc.errors()),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
        _exc_info=exc,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on the app.

    Domain and token errors are left to KnownErrorMiddleware.
    """
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

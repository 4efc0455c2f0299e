"""
API error taxonomy and the handlers that render it.

Every error body is either `{"msg": ...}` or, for field validation,
`{"errors": [{"msg", "param", "location"}, ...]}`.
"""
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from backend.app.core.logging_config import get_logger

logger = get_logger("core.exceptions")

SERVER_ERROR_MSG = "Server Error"


class ApiError(HTTPException):
    """Base for errors raised by services and guards."""

    default_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, msg: str, status_code: int | None = None, headers: dict | None = None):
        super().__init__(status_code=status_code or self.default_status, detail=msg, headers=headers)

    @property
    def msg(self) -> str:
        return self.detail


class UnauthorizedError(ApiError):
    default_status = status.HTTP_401_UNAUTHORIZED

    def __init__(self, msg: str = "Token is not valid"):
        super().__init__(msg, headers={"WWW-Authenticate": "Bearer"})


class NotFoundError(ApiError):
    """Missing document or malformed id. Status is chosen by the route family."""

    default_status = status.HTTP_404_NOT_FOUND


class ForbiddenError(ApiError):
    # Ownership mismatch is answered with 401 by this API
    default_status = status.HTTP_401_UNAUTHORIZED

    def __init__(self, msg: str = "User not authorized"):
        super().__init__(msg)


class ConflictError(ApiError):
    default_status = status.HTTP_400_BAD_REQUEST


class FieldValidationError(ApiError):
    """One or more request fields failed validation."""

    def __init__(self, errors: list[dict[str, Any]]):
        super().__init__(errors[0]["msg"] if errors else "Invalid request")
        self.errors = errors

    @classmethod
    def single(cls, msg: str, param: str | None = None, location: str = "body") -> "FieldValidationError":
        return cls([field_error(msg, param, location)])


def field_error(msg: str, param: str | None = None, location: str = "body") -> dict[str, Any]:
    return {"msg": msg, "param": param, "location": location}


def _validation_errors_from_pydantic(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Flatten FastAPI/pydantic errors; custom validator messages are unwrapped from ValueError."""
    errors = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ())]
        location = loc[0] if loc else "body"
        param = loc[-1] if len(loc) > 1 else None
        # Defaults are validated under the attribute name (from_), not the alias
        if param and param.endswith("_"):
            param = param.rstrip("_")
        ctx_error = (err.get("ctx") or {}).get("error")
        if isinstance(ctx_error, ValueError):
            msg = str(ctx_error)
        else:
            msg = str(err.get("msg", "Invalid value")).removeprefix("Value error, ")
        errors.append(field_error(msg, param, location))
    return errors


async def _http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    if isinstance(exc, FieldValidationError):
        return JSONResponse(status_code=exc.status_code, content={"errors": exc.errors})
    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _validation_errors_from_pydantic(exc)
    logger.warning("Validation failed path=%s errors=%s", request.url.path, [e["msg"] for e in errors])
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error path=%s error=%s", request.url.path, str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"msg": SERVER_ERROR_MSG},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error renderers on the app."""
    from starlette.exceptions import HTTPException as StarletteHTTPException

    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)

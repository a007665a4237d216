"""API errors surfaced to clients as ``{"detail": message}`` with a fixed status code."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = structlog.get_logger()


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        self.message = message
        super().__init__(self.message)


class RequestValidationFailed(ApiError):
    """Missing or malformed required request parameter."""

    status_code = 400

    def __init__(self, message: str = "Bad request"):
        super().__init__(message)


class AccessDeniedError(ApiError):
    """Caller's tenant does not own the requested resource."""

    status_code = 403

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class NotFoundError(ApiError):
    status_code = 404

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


class MethodNotAllowedError(ApiError):
    status_code = 405

    def __init__(self, message: str = "Method Not Allowed"):
        super().__init__(message)


class InternalError(ApiError):
    status_code = 500


def require_param(value: str | None, name: str) -> str:
    if value is None or not value.strip():
        raise RequestValidationFailed(f"Missing required parameter: {name}")
    return value


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("api_error", path=request.url.path, status=exc.status_code, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and parameters are 400s, same as a missing tenantId."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    logger.info("request_validation_failed", path=request.url.path, problems=problems)
    return JSONResponse(status_code=400, content={"detail": f"Invalid request: {problems}"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

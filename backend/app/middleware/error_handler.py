import structlog
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger()


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Last line of defence: anything unhandled becomes an opaque 500.

    Sits outside CORSMiddleware, so it sets the wildcard allow-origin header
    itself when one is configured.
    """

    def __init__(self, app, allow_origin: str | None = "*"):
        super().__init__(app)
        self.allow_origin = allow_origin

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            logger.error(
                "unhandled_error",
                path=request.url.path,
                method=request.method,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            headers = {"Access-Control-Allow-Origin": self.allow_origin} if self.allow_origin else None
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal server error"},
                headers=headers,
            )

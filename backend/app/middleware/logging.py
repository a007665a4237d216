import time

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)

        log = logger.warning if response.status_code in (403, 404, 405) else logger.info
        log(
            "http_request",
            method=request.method,
            path=request.url.path,
            tenant_id=request.query_params.get("tenantId"),
            status=response.status_code,
            duration_ms=duration_ms,
        )
        return response

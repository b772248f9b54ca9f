"""Per-request access logging"""
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("simple_webserver.access")


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """Logs client, method, path, status and latency once the handler is done."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        client = request.client.host if request.client else "-"
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            elapsed = (time.perf_counter() - start_time) * 1000
            logger.info(
                f'{client} "{request.method} {request.url.path}" {status} ({elapsed:.2f} ms)'
            )

"""Request logging middleware."""

import logging
import time
from typing import Callable
from urllib.parse import unquote

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


class LoggingMiddleware(BaseHTTPMiddleware):
    """One access line per request, with emoji paths shown decoded."""

    def __init__(self, app, logger: logging.Logger = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("emojiurl.web")

    async def dispatch(self, request: Request, call_next: Callable):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        peer = request.client.host if request.client else "-"
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        self.logger.log(
            level,
            f"{peer} {request.method} {unquote(request.url.path)} "
            f"{response.status_code} {elapsed_ms:.1f}ms",
        )
        return response

"""Error handling middleware for consistent error responses."""

import logging
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from emojiurl.errors import EmojiURLError


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Translate engine errors into JSON error responses.
    
    ``EmojiURLError`` subclasses answer with their own status code. Anything
    else is a 500; its text is only exposed outside production.
    """
    
    def __init__(self, app, logger: logging.Logger = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("emojiurl.web")
    
    async def dispatch(self, request: Request, call_next: Callable):
        try:
            return await call_next(request)
        except EmojiURLError as e:
            if e.status_code >= 500:
                self.logger.error(f"Error in {request.url.path}: {e.message}")
                detail = None if self._is_production(request) else e.message
                return JSONResponse(
                    {"error": "Internal server error", "detail": detail},
                    status_code=e.status_code,
                )
            self.logger.warning(f"Request error in {request.url.path}: {e.message}")
            return JSONResponse(
                {"error": e.message, "detail": None},
                status_code=e.status_code,
            )
        except Exception as e:
            self.logger.error(f"Unhandled error in {request.url.path}: {e}", exc_info=True)
            detail = None if self._is_production(request) else f"{type(e).__name__}: {e}"
            return JSONResponse(
                {"error": "Internal server error", "detail": detail},
                status_code=500,
            )
    
    @staticmethod
    def _is_production(request: Request) -> bool:
        config = getattr(request.app.state, "config", None)
        # Redact unless explicitly configured otherwise
        return config is None or config.is_production

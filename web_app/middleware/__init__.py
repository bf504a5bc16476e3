"""Middleware for the emoji URL shortener web app."""

from .error_handling import ErrorHandlingMiddleware
from .logging import LoggingMiddleware

__all__ = ["ErrorHandlingMiddleware", "LoggingMiddleware"]

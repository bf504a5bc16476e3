"""FastAPI application factory."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import api_router
from .web import web_router
from .middleware.error_handling import ErrorHandlingMiddleware
from .middleware.logging import LoggingMiddleware


async def _request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies and path params are plain 400s.

    422 is reserved for empty slugs.
    """
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid request")
    return JSONResponse(
        {"error": f"Invalid request: {location}: {message}" if location else message, "detail": None},
        status_code=400,
    )


def create_app(
    service_instance,
    config,
    db_instance=None,
    cache_instance=None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        service_instance: EmojiURLService instance (may be set later in lifespan)
        config: Configuration instance
        db_instance: Store instance
        cache_instance: Cache instance

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Emoji URL Shortener",
        description="Short links made of emoji",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # Store instances in app state for access in routes
    app.state.db = db_instance
    app.state.cache = cache_instance
    app.state.service = service_instance
    app.state.config = config

    app.add_exception_handler(RequestValidationError, _request_validation_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Last added runs first: logging sees the final status of error responses
    app.add_middleware(ErrorHandlingMiddleware)
    app.add_middleware(LoggingMiddleware)

    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app

"""API routes implementation.

Engine errors are not caught here; ``ErrorHandlingMiddleware`` turns them
into JSON responses with the status each error class carries.
"""

from typing import List

from fastapi import APIRouter, Request
from datetime import datetime, timezone

from .schemas import (
    NewURLRequest,
    NewURLResponse,
    RecordResponse,
    ResolveResponse,
    HealthResponse,
    ErrorResponse,
)
from emojiurl.common.url_builder import build_emoji_url

router = APIRouter()


@router.get("", response_model=List[RecordResponse], include_in_schema=False)
@router.get(
    "/",
    response_model=List[RecordResponse],
    summary="List all slugs",
    description="List every stored slug, most recently created first.",
)
async def list_all(request: Request):
    """List all records."""
    service = request.app.state.service

    records = await service.list_records()

    return [RecordResponse(**record.to_dict()) for record in records]


@router.get(
    "/last/{n}",
    response_model=List[RecordResponse],
    responses={
        400: {"model": ErrorResponse, "description": "n is not a positive integer"},
    },
    summary="List last n slugs",
    description="List the n most recently created slugs, most recent first.",
)
async def list_last(request: Request, n: int):
    """List the last n records."""
    service = request.app.state.service

    records = await service.list_records(limit=n)

    return [RecordResponse(**record.to_dict()) for record in records]


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service

    health = await service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        database="healthy" if health["database"] else "unhealthy",
        cache="healthy" if health["cache"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )


@router.post(
    "/newURL",
    response_model=NewURLResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid URL or slug"},
        409: {"model": ErrorResponse, "description": "Slug already exists"},
        422: {"model": ErrorResponse, "description": "Slug is empty"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
        503: {"model": ErrorResponse, "description": "No free slug could be generated"},
    },
    summary="Create emoji slug",
    description="Create a slug for a URL. Optionally provide the emoji to use.",
)
async def new_url(request: Request, body: NewURLRequest):
    """Allocate a slug for a URL."""
    service = request.app.state.service
    config = request.app.state.config

    record = await service.allocate(body.emojis, body.url)

    return NewURLResponse(
        **record.to_dict(),
        port=config.port,
        domain=config.domain,
    )


@router.get(
    "/{key}",
    response_model=ResolveResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Key not found"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Resolve key",
    description="Resolve a canonical key to its emoji URL and destination.",
)
async def resolve_key(request: Request, key: str):
    """Resolve a canonical key."""
    service = request.app.state.service
    config = request.app.state.config

    record = await service.resolve(key)

    return ResolveResponse(
        emojiURL=build_emoji_url(record.raw, config.domain, config.public_scheme),
        redirectURL=record.target,
    )

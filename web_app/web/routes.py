"""Browser-facing routes: the emoji links themselves."""

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from emojiurl.encoder import canonicalize
from emojiurl.errors import NotFoundError

router = APIRouter()


@router.get("/health", include_in_schema=False)
async def health_check_web(request: Request):
    """Liveness probe (simple version for load balancers)."""
    return {"status": "ok"}


@router.get("/{slug}", include_in_schema=False)
async def redirect_to_target(request: Request, slug: str):
    """Redirect an emoji link to its target.

    The path segment is normally the emoji slug itself; an ASCII segment is
    also tried verbatim as a canonical key.
    """
    service = request.app.state.service

    candidates = [canonicalize(slug)]
    if slug.isascii() and slug not in candidates:
        candidates.append(slug)

    for key in candidates:
        if not key:
            continue
        try:
            record = await service.resolve(key)
        except NotFoundError:
            continue
        return RedirectResponse(url=record.target, status_code=status.HTTP_302_FOUND)

    raise NotFoundError(f"Slug '{slug}' not found")

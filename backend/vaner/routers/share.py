"""Share landing page and Open Graph image endpoints."""
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, Response

from ..config import settings
from ..services.share_renderer import build_share_content, render_og_image, render_share_page

router = APIRouter(tags=["share"])


def _cache_control(seconds: int) -> str:
    return f"public, max-age={seconds}, s-maxage={seconds}"


def _single_name(request: Request) -> Optional[str]:
    """The name query value, or None when it is missing or repeated."""
    values = request.query_params.getlist("name")
    return values[0] if len(values) == 1 else None


@router.get("/share", response_class=HTMLResponse)
async def share_page(request: Request):
    """Landing page with OG/Twitter tags for rich link previews."""
    content = build_share_content(
        _single_name(request),
        request.headers,
        request.url.path,
        request.url.query,
    )
    return HTMLResponse(
        content=render_share_page(content),
        headers={"Cache-Control": _cache_control(settings.share_page_cache_seconds)},
    )


@router.get("/og.svg")
async def share_og_image(request: Request):
    """Dynamic Open Graph preview image (SVG)."""
    return Response(
        content=render_og_image(_single_name(request)),
        media_type="image/svg+xml; charset=utf-8",
        headers={"Cache-Control": _cache_control(settings.share_image_cache_seconds)},
    )

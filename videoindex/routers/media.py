"""Public media URL endpoints."""

from fastapi import APIRouter, Query

from videoindex.models.media import MediaUrl
from videoindex.services.media_urls import resolve_image_url, resolve_video_url

router = APIRouter(prefix="/media", tags=["media"])


@router.get("/image", response_model=MediaUrl)
async def image_url(
    path: str = Query(description="Internal filesystem path of the image"),
):
    """Resolve an internal image path to its public URL."""
    return MediaUrl(url=resolve_image_url(path))


@router.get("/video", response_model=MediaUrl)
async def video_url(
    path: str | None = Query(
        default=None,
        description="Internal temp-directory path of the video",
    ),
):
    """Resolve an internal video path to its public URL.

    Without a path the bare site origin is returned.
    """
    return MediaUrl(url=resolve_video_url(path))

"""Rewrite internal storage paths into public media URLs."""

import re

from videoindex.config import get_settings


def resolve_image_url(image_path: str) -> str:
    """Map an image path under the internal store to its public URL."""
    settings = get_settings()
    relative_path = image_path.replace(
        settings.media_image_prefix, settings.media_static_prefix, 1
    )
    return f"{settings.media_base_url}/{relative_path}"


def resolve_video_url(video_path: str | None) -> str:
    """Map a temp-directory video path to its public URL.

    Everything up to and including the first temp marker is replaced by the
    static prefix. ``None`` yields the bare base origin.
    """
    settings = get_settings()
    if video_path is None:
        return settings.media_base_url
    pattern = "^.*?" + re.escape(settings.media_temp_marker)
    relative_path = re.sub(
        pattern, lambda _m: f"{settings.media_static_prefix}/", video_path, count=1
    )
    return f"{settings.media_base_url}/{relative_path}"

"""Media URL models."""

from pydantic import BaseModel


class MediaUrl(BaseModel):
    """A resolved public media URL."""

    url: str

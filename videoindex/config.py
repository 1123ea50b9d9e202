"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    debug: bool = False
    environment: str = "development"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "https://videoindex.app",
    ]

    # Feedback modal timing (seconds)
    submit_latency: float = 1.5  # simulated round-trip before on_submit fires
    auto_close_delay: float = 2.0  # success screen dwell before auto-close

    # Public media URLs
    media_base_url: str = "https://videoindex.app"
    media_image_prefix: str = "/home/azureuser/recallstore/recall-api/../recallhq"
    media_temp_marker: str = "/recallhq/temp/"
    media_static_prefix: str = "learnpod_static"

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""
VideoIndex API

Thin FastAPI host for the search-page widgets: feedback categories and
validation, plus public media URL resolution.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from videoindex.config import get_settings
from videoindex.routers import feedback, media

logger = logging.getLogger(__name__)

settings = get_settings()

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown."""
    logger.info("VideoIndex API starting (%s)", settings.environment)
    yield


app = FastAPI(
    title="VideoIndex API",
    description="Feedback and media helpers for the VideoIndex search page",
    version=VERSION,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(feedback.router, prefix="/api/videoindex")
app.include_router(media.router, prefix="/api/videoindex")


@app.get("/api/videoindex/health")
async def health_check() -> dict[str, str]:
    """Liveness check."""
    return {"status": "ok", "service": "videoindex-api", "version": VERSION}

"""
main.py — IMT Hasher Service Entrypoint
=========================================
Runs the FastAPI service that hashes remote resources on request.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from imt_hasher.api.routes import router
from imt_hasher.config import settings

# ── Logging Configuration ─────────────────────────────────
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("imt_hasher")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("IMT Hasher starting on %s:%d", settings.HOST, settings.PORT)
    logger.info("Fetch timeout: %.1fs", settings.FETCH_TIMEOUT)
    logger.info("Default throttle: %d ms", settings.DEFAULT_THROTTLE_MS)
    yield
    logger.info("IMT Hasher shutting down")


# ── FastAPI Application ───────────────────────────────────
app = FastAPI(
    title="IMT Hasher API",
    description=(
        "Fetches a remote file and reduces it to a 16-character IMT "
        "digest.\n\n"
        "**Hash:** URL → fetch → IMT hash → hex → (optional) save"
    ),
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(router)


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

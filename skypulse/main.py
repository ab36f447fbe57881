from __future__ import annotations

import contextlib
import logging
import time

from fastapi import FastAPI, Request

from skypulse.api import api_router
from skypulse.config import settings
from skypulse.ingestors import GeocodingIngestor
from skypulse.services import WeatherService

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s - %(message)s",
)
logger = logging.getLogger("skypulse")


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the weather context owned by this application instance."""

    app.state.weather_service = WeatherService()
    app.state.geocoding_ingestor = GeocodingIngestor()
    logger.info(
        "SkyPulse started: env=%s weather=%s geocoding=%s",
        settings.skypulse_env,
        settings.weather_base_url,
        settings.geocoding_base_url,
    )

    try:
        yield
    finally:
        app.state.weather_service = None
        app.state.geocoding_ingestor = None
        logger.info("SkyPulse stopped")


app = FastAPI(title="SkyPulse Weather Backend", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log basic request information for observability."""

    start_time = time.time()
    response = await call_next(request)
    if settings.log_requests:
        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            "HTTP %s %s -> %s (%.2f ms)",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
    return response


app.include_router(api_router)


@app.get("/", summary="Root")
def read_root() -> dict[str, str]:
    """Basic root endpoint for quick verification."""

    return {"message": "SkyPulse backend is running"}

"""
autobal API

A FastAPI-based backend for BAL quasar trough analysis.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from autobal import __version__
from autobal.api import epochs, health
from autobal.core.config import settings

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    engine = settings.engine_config()
    logger.info("Starting autobal API...")
    logger.info(
        f"Engine: threshold={engine.absorption_threshold}, "
        f"min width={engine.min_trough_width} A, "
        f"reference line={engine.reference_line} A"
    )

    yield

    logger.info("Shutting down API...")


# Create FastAPI application
app = FastAPI(
    title="autobal API",
    description="""
    Broad absorption line (BAL) trough extraction for time-series quasar spectra.

    ## Features

    * **Epoch Analysis**: Smooth, normalize and segment one epoch into absorption troughs
    * **Batch Analysis**: Independent epochs processed in parallel with per-epoch errors
    * **Trough Metrics**: Equivalent width, depth, centroid velocity, velocity width
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(epochs.router, prefix="/api/epochs", tags=["Epochs"])


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "autobal API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "autobal.main:app",
        host="0.0.0.0",
        port=8000,
        log_level=settings.LOG_LEVEL.lower(),
    )

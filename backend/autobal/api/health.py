"""API router for health check endpoints."""

import platform
from datetime import datetime, timezone

import numpy as np
from fastapi import APIRouter

from autobal import __version__
from autobal.core.config import settings

router = APIRouter()


@router.get("/api/health")
async def health_check():
    """
    Health check endpoint.

    Returns system status and the active engine parameters.
    """
    engine = settings.engine_config()

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "system": {
            "platform": platform.system(),
            "python_version": platform.python_version(),
            "numpy_version": np.__version__,
            "autobal_version": __version__,
        },
        "engine": {
            "absorption_threshold": engine.absorption_threshold,
            "min_trough_width": engine.min_trough_width,
            "reference_line": engine.reference_line,
            "light_speed": engine.light_speed,
        },
    }

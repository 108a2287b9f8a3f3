"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
"""

import logging
from fastapi import APIRouter, status

from seo_console import __version__

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "seo-console-stub",
        "version": __version__,
    }

"""
Health and metrics endpoints.

  GET /health  -- Liveness probe (always returns 200 if process is alive)
  GET /metrics -- Validation counters and cache statistics
"""

import logging
import time
from dataclasses import asdict

from fastapi import APIRouter, Request

from ..models.responses import CacheStatsModel, HealthResponse, MetricsResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def liveness(request: Request) -> HealthResponse:
    """Liveness probe -- returns 200 if the process is running."""
    pipeline = request.app.state.pipeline
    start_time = getattr(request.app.state, "start_time", time.time())
    return HealthResponse(
        status="healthy",
        rules_loaded=pipeline.rules.is_loaded,
        uptime_seconds=round(time.time() - start_time, 1),
    )


@router.get("/metrics", response_model=MetricsResponse)
async def metrics(request: Request) -> MetricsResponse:
    """Request counters plus per-cache hit rates."""
    m = request.app.state.metrics
    caches = request.app.state.caches
    return MetricsResponse(
        validations=m["validations"],
        validations_passed=m["validations_passed"],
        safety_checks=m["safety_checks"],
        caches={
            name: CacheStatsModel(**asdict(cache.get_stats()))
            for name, cache in (
                ("knowledge", caches.knowledge),
                ("enforcement", caches.enforcement),
                ("readability", caches.readability),
            )
        },
    )

"""
API Gateway -- FastAPI application factory.

Creates the FastAPI app with all routes and shared services. This is the
entrypoint for uvicorn:

    uvicorn tonegate.api.gateway:create_app --factory --host 127.0.0.1 --port 8000

The HTTP layer is a thin adapter: every route delegates to the same
ValidationPipeline / SafetyGate / IntentClassifier an in-process caller uses.

Security:
  - CORS restricted to localhost origins by default
  - Rate limiting via dependency
  - All external input validated at boundary
"""

import logging
import time

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..cache import create_caches
from ..config import Settings
from ..enforcement import ValidationPipeline
from ..learning import CorrectionStore, EvidenceTracker
from .middleware.rate_limit import RateLimiter
from .routes import health, rules, safety, validation

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:8000",
    "http://localhost:8080",
]


def create_app(
    pipeline: ValidationPipeline | None = None,
    settings: Settings | None = None,
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """
    Application factory -- creates and configures the FastAPI app.

    Args:
        pipeline: Pre-built validation pipeline (creates default if None).
        settings: Thresholds, cache sizes, and limits (defaults if None).
        cors_origins: Allowed browser origins (localhost only if None).
    """
    settings = settings or (pipeline.settings if pipeline else Settings())
    caches = create_caches(settings)

    if pipeline is None:
        pipeline = ValidationPipeline(
            settings=settings,
            readability_cache=caches.readability,
            evidence_tracker=EvidenceTracker(),
            corrections=CorrectionStore(),
        )

    application = FastAPI(
        title="tonegate API",
        description="Brand-voice, readability, and safety checks for generated text",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins or DEFAULT_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    application.state.settings = settings
    application.state.pipeline = pipeline
    application.state.caches = caches
    application.state.rate_limiter = RateLimiter(settings.rate_limit_per_minute)
    application.state.start_time = time.time()
    application.state.metrics = {
        "validations": 0,
        "validations_passed": 0,
        "safety_checks": 0,
    }

    application.include_router(health.router, tags=["Health"])
    application.include_router(
        validation.router, prefix="/api/v1", tags=["Validation"]
    )
    application.include_router(
        safety.router, prefix="/api/v1", tags=["Safety"]
    )
    application.include_router(
        rules.router, prefix="/api/v1", tags=["Rules"]
    )

    logger.info("[Gateway] API gateway initialized")
    return application


app = create_app()

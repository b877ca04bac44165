"""
Validation API -- trust score, violations, and auto-fix previews.

  POST /api/v1/validate -- Validate text (all checks, or intent-selected checks)
  POST /api/v1/autofix  -- Apply every auto-fix and return the before/after

Identical requests within the enforcement TTL are served from cache, except
when a message_id asks for evidence tracking.

Security:
  - Input validation on all text fields
  - Rate limiting on both endpoints
"""

import hashlib
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from ...security import ValidationError, sanitize_text, validate_text_input
from ..middleware.rate_limit import check_rate_limit
from ..models.requests import TextRequest, ValidateRequest
from ..models.responses import AutoFixPreviewResponse, ValidationResponse

logger = logging.getLogger(__name__)
router = APIRouter()


def checked_text(request: Request, text: str, field_name: str = "text") -> str:
    max_length = request.app.state.settings.max_text_length
    try:
        validate_text_input(text, field_name, max_length=max_length)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return sanitize_text(text, max_length=max_length)


def _cache_key(body: ValidateRequest) -> str:
    raw = f"{body.use_intent}\x1f{body.prompt or ''}\x1f{body.text}"
    return "validate:" + hashlib.sha256(raw.encode("utf-8")).hexdigest()


@router.post("/validate", response_model=ValidationResponse)
async def validate(
    body: ValidateRequest,
    request: Request,
    _rate: None = Depends(check_rate_limit),
) -> ValidationResponse:
    """Validate text and return the trust score and violations."""
    text = checked_text(request, body.text)
    prompt = checked_text(request, body.prompt, "prompt") if body.prompt else None
    pipeline = request.app.state.pipeline

    def run() -> ValidationResponse:
        if body.use_intent:
            result = pipeline.validate_with_intent(text, prompt, message_id=body.message_id)
        else:
            result = pipeline.validate(text, message_id=body.message_id)
        return ValidationResponse.from_result(result)

    async def fetch() -> ValidationResponse:
        return run()

    if body.message_id:
        response = run()
    else:
        response = await request.app.state.caches.enforcement.get_or_fetch(
            _cache_key(body), fetch
        )

    m = request.app.state.metrics
    m["validations"] += 1
    if response.passed:
        m["validations_passed"] += 1
    return response


@router.post("/autofix", response_model=AutoFixPreviewResponse)
async def autofix(
    body: TextRequest,
    request: Request,
    _rate: None = Depends(check_rate_limit),
) -> AutoFixPreviewResponse:
    """Apply all auto-fixes; return the fixed text and the fixes that changed it."""
    text = checked_text(request, body.text)
    preview = request.app.state.pipeline.rules.apply_all_fixes(text)
    logger.debug(f"[Gateway] Auto-fix applied {preview.fix_count} fixes")
    return AutoFixPreviewResponse.from_preview(preview)

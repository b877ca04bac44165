"""
Safety and intent API -- direct access to the safety gate and intent classifier.

  POST /api/v1/safety/classify -- Classify text, return routing and modifications
  POST /api/v1/intent          -- Detect intent and the validation level it implies
"""

import logging

from fastapi import APIRouter, Depends, Request

from ..middleware.rate_limit import check_rate_limit
from ..models.requests import TextRequest
from ..models.responses import IntentResponse, SafetyGateResponse
from .validation import checked_text

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/safety/classify", response_model=SafetyGateResponse)
async def classify_safety(
    body: TextRequest,
    request: Request,
    _rate: None = Depends(check_rate_limit),
) -> SafetyGateResponse:
    """Run the safety gate on text."""
    text = checked_text(request, body.text)
    result = request.app.state.pipeline.safety_gate.classify(text)
    request.app.state.metrics["safety_checks"] += 1
    logger.debug(f"[Gateway] Safety classify routed to {result.routing}")
    return SafetyGateResponse.from_result(result)


@router.post("/intent", response_model=IntentResponse)
async def detect_intent(
    body: TextRequest,
    request: Request,
    _rate: None = Depends(check_rate_limit),
) -> IntentResponse:
    """Classify a message's intent."""
    text = checked_text(request, body.text)
    return IntentResponse.from_result(request.app.state.pipeline.detect_intent(text))

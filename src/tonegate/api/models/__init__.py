"""Pydantic models for API request/response contracts."""
from .requests import TextRequest, ValidateRequest
from .responses import (
    AutoFixModel,
    AutoFixPreviewResponse,
    AvoidTermModel,
    HealthResponse,
    IntentResponse,
    MetricsResponse,
    RuleStatsResponse,
    SafetyGateResponse,
    ValidationResponse,
    ViolationModel,
)

"""
Rules API -- read-only view of the loaded wording tables.

  GET /api/v1/rules/stats -- Table sizes (served through the knowledge cache)
  GET /api/v1/rules/avoid -- Avoid terms, optionally filtered by category
"""

import logging

from fastapi import APIRouter, HTTPException, Request

from ...rules.models import AVOID_CATEGORY_INFO
from ...security import ValidationError, validate_in_choices
from ..models.responses import AvoidTermModel, RuleStatsResponse

logger = logging.getLogger(__name__)
router = APIRouter()

STATS_CACHE_KEY = "rules:stats"


@router.get("/rules/stats", response_model=RuleStatsResponse)
async def rule_stats(request: Request) -> RuleStatsResponse:
    """Counts of avoid terms, preferred terms, and auto-fix rules."""
    rules = request.app.state.pipeline.rules

    async def fetch() -> RuleStatsResponse:
        return RuleStatsResponse(**rules.stats())

    return await request.app.state.caches.knowledge.get_or_fetch(STATS_CACHE_KEY, fetch)


@router.get("/rules/avoid", response_model=list[AvoidTermModel])
async def avoid_terms(request: Request, category: str | None = None) -> list[AvoidTermModel]:
    """Avoid terms, all or for one category."""
    if category is not None:
        try:
            validate_in_choices(category, list(AVOID_CATEGORY_INFO), "category")
        except ValidationError as e:
            logger.debug(f"[Gateway] Rejected avoid-term category {category!r}")
            raise HTTPException(status_code=400, detail=str(e))
    terms = request.app.state.pipeline.rules.get_avoid_terms(category)
    return [AvoidTermModel.from_term(t) for t in terms]
